"""API routes for conversion, dataset normalization and shape classification.

The request body carries already-parsed JSON data, so these endpoints
never parse text themselves.
"""

import logging
import time
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from data_translators.datasets.normalizer import to_dataset
from data_translators.shapes.classifier import classify
from data_translators.shapes.schemas import Shape
from data_translators.translators.base import IncompatibleShapeError
from data_translators.translators.dispatcher import DEFAULT_TARGET, convert
from data_translators.translators.registry import get_target_registry
from data_translators.translators.schemas import RenderOptions, TargetDefinition

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])


def _get_or_404(name: str) -> TargetDefinition:
    """Resolve a target name or alias or raise 404."""
    registry = get_target_registry()
    target = registry.resolve(name)
    if target is None:
        raise HTTPException(
            status_code=404,
            detail=f"Target '{name}' not supported. "
            f"Available: {registry.list_aliases()}",
        )
    return target


# ── Request/Response schemas ─────────────────────────────


class ConvertRequest(BaseModel):
    """Request to convert data to a target language."""

    data: Any = Field(..., description="The data to convert")
    target: str = Field(
        default=DEFAULT_TARGET, description="Target key or alias"
    )
    field_names: Optional[list[str]] = Field(
        default=None, description="Top-level column order / positional keys"
    )
    table_attributes: Optional[str] = Field(
        default=None, description="Attributes of the outermost HTML table"
    )
    encode: bool = Field(default=False, description="Encode non-ASCII text")
    escape: bool = Field(default=False, description="Escape HTML characters")
    missing_value: str = Field(
        default="", description="Fill value for absent columns"
    )
    max_depth: Optional[int] = Field(
        default=None, description="Maximum container nesting levels"
    )
    dataset: bool = Field(
        default=False, description="Normalize into a rectangular dataset first"
    )


class ConvertResponse(BaseModel):
    """Rendered output of a conversion."""

    target: str
    output_format: str
    output: str
    execution_time_ms: int = 0


class DatasetRequest(BaseModel):
    """Request to normalize data into a rectangular dataset."""

    data: Any = Field(..., description="The data to normalize")
    missing_value: str = Field(
        default="", description="Fill value for absent columns"
    )


class DatasetResponse(BaseModel):
    """Normalized data with the shape it was classified as."""

    shape: Shape
    data: Any = None


class ClassifyRequest(BaseModel):
    data: Any = Field(..., description="The data to classify")


# ── Endpoints ────────────────────────────────────────────


@router.post("/convert", response_model=ConvertResponse)
async def convert_data(request: ConvertRequest):
    """Convert data to HTML, R, Wolfram Language or JSON text.

    Unknown targets return 404; shapes the target cannot render return 422.
    """
    start_time = time.time()
    target = _get_or_404(request.target)

    options = RenderOptions(
        field_names=request.field_names,
        table_attributes=request.table_attributes,
        encode=request.encode,
        escape=request.escape,
        missing_value=request.missing_value,
    )
    if request.max_depth is not None:
        options.max_depth = request.max_depth

    try:
        output = convert(
            request.data,
            target=target.target_key,
            options=options,
            dataset=request.dataset,
            parse=False,
        )
    except IncompatibleShapeError as e:
        logger.warning(f"Conversion to {target.target_key} failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    if output is None:
        raise HTTPException(
            status_code=501,
            detail=f"Target '{target.target_key}' has no implementation",
        )

    elapsed = int((time.time() - start_time) * 1000)
    return ConvertResponse(
        target=target.target_key,
        output_format=target.output_format,
        output=output,
        execution_time_ms=elapsed,
    )


@router.post("/datasets", response_model=DatasetResponse)
async def normalize_dataset(request: DatasetRequest):
    """Normalize ragged data into a rectangular dataset."""
    return DatasetResponse(
        shape=classify(request.data),
        data=to_dataset(request.data, request.missing_value),
    )


@router.post("/classify", response_model=Shape)
async def classify_data(request: ClassifyRequest):
    """Classify the shape of data."""
    return classify(request.data)
