"""API routes for the target catalog.

Targets are the output languages data can be converted to. Consumers fetch
the catalog to discover target keys, accepted aliases and supported options.
"""

import logging

from fastapi import APIRouter, HTTPException

from data_translators.translators.registry import get_target_registry
from data_translators.translators.schemas import TargetDefinition, TargetSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/targets", tags=["targets"])


def _get_or_404(name: str) -> TargetDefinition:
    """Get a target by key or alias or raise 404."""
    registry = get_target_registry()
    target = registry.resolve(name)
    if target is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Target '{name}' not found. Available: {available}",
        )
    return target


@router.get("", response_model=list[TargetSummary])
async def list_targets():
    """List all target definitions (summaries)."""
    registry = get_target_registry()
    return registry.list_summaries()


@router.post("/reload")
async def reload_targets():
    """Force reload target definitions from disk."""
    registry = get_target_registry()
    registry.reload()
    logger.info(f"Reloaded {registry.count()} target definitions")
    return {"reloaded": True, "count": registry.count()}


@router.get("/{name}", response_model=TargetDefinition)
async def get_target(name: str):
    """Get a single target definition by key or alias."""
    return _get_or_404(name)
