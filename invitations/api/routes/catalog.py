"""Catalog routes: block kinds and event categories."""

from typing import Any

from fastapi import APIRouter, HTTPException, status

from invitations.components.registry import registry
from invitations.dsl.schema import CamelModel, ColorScheme, InvitationConfig
from invitations.engine import build_default_config, default_scheme_for, list_categories

router = APIRouter()


class CategoryResponse(CamelModel):
    """Event category with its default colors."""
    id: str
    name: str
    description: str
    icon: str
    color_scheme: ColorScheme


@router.get("/blocks")
async def list_blocks() -> list[dict[str, Any]]:
    """List every block kind in registration order."""
    return [definition.to_info() for definition in registry.list_definitions()]


@router.get("/blocks/{kind}")
async def get_block(kind: str) -> dict[str, Any]:
    """Describe one block kind, including its content schema."""
    info = registry.get_definition_info(kind)
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown block kind: {kind}",
        )
    return info


@router.get("/categories", response_model=list[CategoryResponse])
async def get_categories():
    """List event categories with their default color schemes."""
    return [
        CategoryResponse(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
            color_scheme=default_scheme_for(category.id),
        )
        for category in list_categories()
    ]


@router.get("/categories/{category}/defaults", response_model=InvitationConfig)
async def get_category_defaults(category: str):
    """Default configuration for a new event of this category."""
    return build_default_config(category)
