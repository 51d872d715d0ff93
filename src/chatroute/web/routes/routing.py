"""Routing API routes.

Request bodies are validated against the closed enumerations before
they reach the resolver; an unknown family or speed is rejected by
pydantic with a 422.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from chatroute.routing import (
    ModelConfigResolver,
    ModelFamily,
    SpeedPreference,
    describe_family,
    map_to_model_id,
)
from chatroute.routing.presets import is_known_preset, settings_from_display_name

router = APIRouter()

_resolver = ModelConfigResolver()


class ResolveRequest(BaseModel):
    """Request to route a single chat turn."""
    prompt: str = ""
    family: ModelFamily = ModelFamily.AUTO
    speed: SpeedPreference = SpeedPreference.AUTO
    preset: str | None = None  # Overrides family/speed when set


@router.post("/routing/resolve")
async def resolve_config(req: ResolveRequest):
    """Resolve model family, effort and model id for a prompt."""
    family, speed = req.family, req.speed
    if req.preset is not None:
        if not is_known_preset(req.preset):
            raise HTTPException(
                status_code=400, detail=f"Unknown preset: {req.preset}")
        chosen = settings_from_display_name(req.preset)
        family, speed = chosen.family, chosen.speed

    config = _resolver.resolve(family, speed, req.prompt)
    return {
        **config.to_dict(),
        "label": describe_family(config.resolved_family),
        "requested": {"family": family.value, "speed": speed.value},
    }


@router.get("/routing/families")
async def list_families():
    """List concrete families with their model ids."""
    return {
        "families": [
            {
                "family": fam.value,
                "label": describe_family(fam),
                "model": map_to_model_id(fam),
                "compact": fam.is_compact,
            }
            for fam in ModelFamily
            if fam != ModelFamily.AUTO
        ]
    }
