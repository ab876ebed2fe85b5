from fastapi import APIRouter, HTTPException
from typing import List

from .. import schemas
from ..estimator.engine import calculate
from ..estimator.prices import DEFAULT_PRICES
from ..estimator.registry import list_calculators, resolve_system

router = APIRouter(tags=["estimate"])


def run_estimate(request: schemas.EstimateRequest) -> dict:
    """Shared by every endpoint that needs the current material list. Unknown system → 400."""
    try:
        system = resolve_system(request.system)
        result = calculate(request.inputs.model_dump(), system, request.price_overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result["system"] = system
    return result


@router.get("/systems", response_model=List[schemas.SystemInfo])
def list_systems():
    return [{"key": s.key, "name": s.value} for s in list_calculators()]


@router.get("/materials/defaults", response_model=List[schemas.DefaultPrice])
def default_prices():
    return [{"id": material_id, "unit_price": price} for material_id, price in DEFAULT_PRICES.items()]


@router.post("/estimate", response_model=schemas.CalculationResult)
def estimate_materials(request: schemas.EstimateRequest):
    """
    Full material takeoff for the selected system.
    Re-run on every input, system or price change — nothing is stored.
    """
    return run_estimate(request)
