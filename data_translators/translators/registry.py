"""Target catalog backed by one JSON definition file per target.

- JSON-per-file in definitions/ directory (or DATA_TRANSLATORS_TARGETS_DIR)
- Lazy loading with _loaded guard
- In-memory dict keyed by target_key, plus an alias index
- Global singleton via get_target_registry()
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .schemas import TargetDefinition, TargetSummary

logger = logging.getLogger(__name__)

TARGETS_DIR_ENV = "DATA_TRANSLATORS_TARGETS_DIR"


def normalize_alias(name: str) -> str:
    """Case-insensitive, whitespace-collapsed form of a target name."""
    return " ".join(name.strip().lower().split())


class TargetRegistry:
    """Registry of target definitions loaded from JSON files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            override = os.environ.get(TARGETS_DIR_ENV)
            definitions_dir = (
                Path(override) if override else Path(__file__).parent / "definitions"
            )
        self.definitions_dir = definitions_dir
        self._targets: dict[str, TargetDefinition] = {}
        self._aliases: dict[str, str] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all target definitions from JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Target definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                target = TargetDefinition.model_validate(data)
                self._targets[target.target_key] = target
                self._index_aliases(target)
                logger.debug(f"Loaded target: {target.target_key}")
            except Exception as e:
                logger.error(f"Failed to load target from {json_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._targets)} target definitions")

    def _index_aliases(self, target: TargetDefinition) -> None:
        for alias in [target.target_key, *target.aliases]:
            normalized = normalize_alias(alias)
            owner = self._aliases.get(normalized)
            if owner is not None and owner != target.target_key:
                logger.warning(
                    f"Alias '{alias}' of target '{target.target_key}' is "
                    f"already taken by '{owner}'; keeping '{owner}'"
                )
                continue
            self._aliases[normalized] = target.target_key

    def get(self, target_key: str) -> Optional[TargetDefinition]:
        """Get a target definition by key."""
        self.load()
        return self._targets.get(target_key)

    def resolve(self, name: str) -> Optional[TargetDefinition]:
        """Resolve a target name or alias (case-insensitive) to an active target."""
        self.load()
        target_key = self._aliases.get(normalize_alias(name))
        if target_key is None:
            return None
        target = self._targets[target_key]
        if target.status != "active":
            logger.warning(f"Target '{target_key}' is {target.status}")
            return None
        return target

    def list_all(self) -> list[TargetDefinition]:
        """List all target definitions."""
        self.load()
        return list(self._targets.values())

    def list_summaries(self) -> list[TargetSummary]:
        """List target summaries."""
        self.load()
        return [
            TargetSummary(
                target_key=t.target_key,
                target_name=t.target_name,
                description=t.description,
                aliases=t.aliases,
                output_format=t.output_format,
                status=t.status,
            )
            for t in sorted(self.list_all(), key=lambda t: t.target_key)
        ]

    def list_keys(self) -> list[str]:
        """List all target keys."""
        self.load()
        return list(self._targets.keys())

    def list_aliases(self) -> list[str]:
        """List every accepted target name, normalized."""
        self.load()
        return sorted(self._aliases)

    def count(self) -> int:
        """Get total number of targets."""
        self.load()
        return len(self._targets)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._targets.clear()
        self._aliases.clear()
        self.load()


# Global registry instance
_registry: Optional[TargetRegistry] = None


def get_target_registry() -> TargetRegistry:
    """Get the global target registry instance."""
    global _registry
    if _registry is None:
        _registry = TargetRegistry()
        _registry.load()
    return _registry
