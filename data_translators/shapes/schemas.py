"""Shape models: the structural classification of a value.

A Shape is derived on demand from a value and never stored. Translators
and the dataset normalizer branch on ``Shape.kind``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ShapeKind(str, Enum):
    """Structural category of a JSON-like value."""

    SCALAR = "scalar"
    LIST_OF_SCALARS = "list_of_scalars"
    LIST_OF_MAPPINGS = "list_of_mappings"
    MAPPING_OF_MAPPINGS = "mapping_of_mappings"
    MAPPING_OF_SCALARS = "mapping_of_scalars"
    LIST_OF_PAIRS = "list_of_pairs"
    GENERIC = "generic"


class Shape(BaseModel):
    """Classification result for one value."""

    model_config = ConfigDict(frozen=True)

    kind: ShapeKind
    homogeneous: bool = Field(
        default=True,
        description="For list_of_mappings: every row has the same key set "
        "(order may differ). Always True for other kinds.",
    )

    @property
    def is_tabular(self) -> bool:
        """Rows of mappings, rendered under a column header."""
        return self.kind == ShapeKind.LIST_OF_MAPPINGS

    @property
    def is_key_value(self) -> bool:
        """Flat scalar-keyed entries: a mapping of scalars or a list of pairs."""
        return self.kind in (ShapeKind.MAPPING_OF_SCALARS, ShapeKind.LIST_OF_PAIRS)
