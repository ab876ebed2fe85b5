"""
Wood Frame calculator.

Pine 2"x4" studs every 40 cm plus top and bottom plates,
3/4" tongue-and-groove exterior siding, glass wool.
Roof on timber rafters.
"""

from ..models import Category, ConstructionSystem
from .base import BaseCalculator


class WoodFrameCalculator(BaseCalculator):

    SYSTEM = ConstructionSystem.WOOD_FRAME

    ROOF_STRUCTURE_ID = "roof_struct_wood"
    ROOF_STRUCTURE_NAME = "Tirantes Madera 2\"x6\" (Estructura Techo)"

    TIMBER_WASTE = 1.10
    SIDING_WASTE = 1.10
    INSULATION_WASTE = 1.05

    def wall_items(self, dims: dict, prices) -> list:
        perimeter = dims["wall_perimeter"]
        net_area = self.net_wall_area(dims)

        studs_length = self.stud_count(perimeter) * dims["wall_height"]
        plates_length = perimeter * 2

        return [
            self.make_material_item(
                "wood_2x4", "Tirante Pino 2\"x4\" (Estructura)", "ml",
                (studs_length + plates_length) * self.TIMBER_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "siding_wood", "Machimbre 3/4\" (19mm) Exterior", "m²",
                net_area * self.SIDING_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "insul_wall", "Lana de Vidrio (Muro)", "m²",
                net_area * self.INSULATION_WASTE, Category.MUROS, prices,
            ),
        ]
