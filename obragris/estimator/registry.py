"""
Calculator registry: maps construction systems to calculator classes.

Closed set: a system without a calculator is an error, never an empty wall block.
"""

from ..models import ConstructionSystem
from .base import BaseCalculator
from .masonry import MasonryCalculator
from .metal_panel import MetalPanelCalculator
from .sip import SIPCalculator
from .steel_frame import SteelFrameCalculator
from .wood_frame import WoodFrameCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    calc.SYSTEM.key: calc
    for calc in (
        MasonryCalculator,
        SIPCalculator,
        SteelFrameCalculator,
        WoodFrameCalculator,
        MetalPanelCalculator,
    )
}


def resolve_system(system) -> ConstructionSystem:
    """
    Accepts a ConstructionSystem, its display value ("Steel Frame") or its
    registry key ("steel_frame"). Raises ValueError for anything else.
    """
    if isinstance(system, ConstructionSystem):
        return system
    for candidate in ConstructionSystem:
        if system == candidate.value or system == candidate.key:
            return candidate
    raise ValueError(
        f"Unknown construction system: {system!r}. "
        f"Available: {list(CALCULATOR_REGISTRY.keys())}"
    )


def get_calculator(system) -> BaseCalculator:
    """Returns an instance of the calculator for a system, or raises ValueError."""
    return CALCULATOR_REGISTRY[resolve_system(system).key]()


def list_calculators() -> list[ConstructionSystem]:
    """Registered systems, in registration order."""
    return [calc.SYSTEM for calc in CALCULATOR_REGISTRY.values()]
