"""Cost and plan limit API routes."""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

router = APIRouter()


class EstimateRequest(BaseModel):
    """Token counts for a finished request."""
    model_id: str
    input_tokens: int = Field(0, ge=0)
    cached_tokens: int = Field(0, ge=0)
    output_tokens: int = Field(0, ge=0)


@router.post("/usage/estimate")
async def estimate(req: EstimateRequest):
    """Estimate the USD cost of a request."""
    from chatroute.usage import MODEL_PRICING, estimate_cost

    if req.cached_tokens > req.input_tokens:
        raise HTTPException(
            status_code=400, detail="cached_tokens cannot exceed input_tokens")

    return {
        "model": req.model_id,
        "known_model": req.model_id in MODEL_PRICING,
        "cost_usd": round(estimate_cost(
            req.model_id, req.input_tokens, req.cached_tokens, req.output_tokens,
        ), 8),
    }


@router.get("/usage/status")
async def usage_status(
    spending: float = Query(..., ge=0, description="Spend so far this month (USD)"),
    plan: str = Query("free", description="free|plus|max"),
):
    """Measure spend against a plan ceiling."""
    from chatroute.usage import get_usage_status

    return get_usage_status(spending, plan).to_dict()
