"""
Mampostería (ladrillo hueco) calculator.

Hollow brick 18x18x33 laid with premixed mortar, plastered both faces.
Roof on galvanized C profiles.
"""

from ..models import Category, ConstructionSystem
from .base import BaseCalculator


class MasonryCalculator(BaseCalculator):

    SYSTEM = ConstructionSystem.MASONRY

    BRICKS_PER_M2 = 15.5     # 18x18x33 hollow brick, with joint
    MORTAR_KG_PER_M2 = 25
    PLASTER_KG_PER_M2 = 35   # revoque grueso + fino

    def wall_items(self, dims: dict, prices) -> list:
        net_area = self.net_wall_area(dims)
        return [
            self.make_material_item(
                "brick_hollow", "Ladrillo Hueco 18x18x33", "unidades",
                net_area * self.BRICKS_PER_M2, Category.MUROS, prices,
            ),
            self.make_material_item(
                "mortar_mix", "Mortero Asiento (Premezcla)", "kg",
                net_area * self.MORTAR_KG_PER_M2, Category.MUROS, prices,
            ),
            self.make_material_item(
                "plaster_mix", "Revoque Listo (Interior/Ext)", "kg",
                net_area * self.PLASTER_KG_PER_M2, Category.MUROS, prices,
            ),
        ]
