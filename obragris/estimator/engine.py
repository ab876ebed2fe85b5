"""
Estimate assembly — the single entry point of the takeoff engine.

Block order is fixed: Platea, Muros (system-specific), Aberturas, Techo
(system roof structure first, then common finishing). No item is ever
dropped for having zero quantity.
"""

from .common import CommonItemsCalculator
from .prices import PriceLookup
from .registry import get_calculator


def estimate(inputs: dict, system, price_overrides: dict = None) -> list:
    """
    Build the ordered material list for one (inputs, system, overrides) triple.

    Args:
        inputs: the five geometric inputs (plate_area, wall_height,
            wall_perimeter, window_area, door_count)
        system: ConstructionSystem, its display value or its registry key
        price_overrides: sparse {material_id: unit_price}; never mutated

    Returns:
        List of MaterialItem dicts {id, name, unit, quantity, unit_price, category}.

    Raises:
        ValueError: unknown system, a missing/non-numeric/non-finite input
            field, or inputs so large a quantity overflows.
    """
    calculator = get_calculator(system)
    common = CommonItemsCalculator()
    prices = PriceLookup(price_overrides)
    dims = common.parse_dimensions(inputs)

    materials = []
    materials.extend(common.slab_items(dims, prices))
    materials.extend(calculator.wall_items(dims, prices))
    materials.extend(common.opening_items(dims, prices))
    materials.append(calculator.roof_structure_item(dims, prices))
    materials.extend(common.roof_finishing_items(dims, prices))
    return materials


def total_cost(materials: list) -> float:
    """Sum of quantity × unit price over all items."""
    return sum(m["quantity"] * m["unit_price"] for m in materials)


def calculate(inputs: dict, system, price_overrides: dict = None) -> dict:
    """Estimate plus total — the CalculationResult dict."""
    materials = estimate(inputs, system, price_overrides)
    return {
        "materials": materials,
        "total_cost": total_cost(materials),
    }
