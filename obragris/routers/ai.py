"""
AI endpoints — Gemini price lookup, supplier search and chat assistant.

Nothing here changes an estimate: fetched prices come back to the client,
which sends them as price_overrides on its next /estimate call.
"""

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..ai.assistant import ask_assistant
from ..ai.gemini import has_api_key
from ..ai.price_oracle import PriceOracle
from ..ai.supplier_finder import SupplierFinder
from ..estimator.registry import resolve_system
from .estimate import run_estimate

router = APIRouter(prefix="/ai", tags=["ai"])


def _require_api_key():
    if not has_api_key():
        raise HTTPException(status_code=503, detail="GEMINI_API_KEY not configured")


@router.post("/prices", response_model=schemas.PriceUpdateResponse)
def update_prices(request: schemas.PriceUpdateRequest):
    """Suggested unit prices for the current material list at a location."""
    _require_api_key()
    result = run_estimate(request)

    oracle = PriceOracle()
    location = oracle.resolve_location(request.location)
    prices = oracle.fetch_material_prices(result["materials"], location)
    if prices is None:
        raise HTTPException(
            status_code=502,
            detail="No se pudieron obtener precios. Intente más tarde.",
        )
    return {"location": location, "prices": prices}


@router.post("/suppliers", response_model=schemas.SupplierResult)
def find_suppliers(request: schemas.SupplierRequest):
    _require_api_key()
    try:
        system = resolve_system(request.system)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = SupplierFinder().find_suppliers(system, request.location)
    if result is None:
        raise HTTPException(status_code=502, detail="Supplier search failed")
    return result


@router.post("/chat", response_model=schemas.ChatResponse)
def chat(request: schemas.ChatRequest):
    """Assistant reply. Missing key and Gemini failures come back as reply text, not errors."""
    result = run_estimate(request)
    context = {
        "system": result["system"],
        "inputs": request.inputs.model_dump(),
        "materials": result["materials"],
    }
    history = [m.model_dump() for m in request.history]
    return {"answer": ask_assistant(request.question, context, history)}
