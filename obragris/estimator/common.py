"""
System-independent items: platea, aberturas and roof finishing.

These are emitted for every construction system, in this order around the
system's own wall block.
"""

from ..models import Category
from .base import TakeoffHelpers


class CommonItemsCalculator(TakeoffHelpers):

    SLAB_THICKNESS_M = 0.12     # H17 platea, average thickness
    MESH_OVERLAP = 1.10
    FILM_OVERLAP = 1.10
    ROOF_SHEET_WASTE = 1.15     # overlaps + eaves
    ROOF_INSULATION_WASTE = 1.15
    ROOF_SCREWS_PER_M2 = 6

    def slab_items(self, dims: dict, prices) -> list:
        plate_area = dims["plate_area"]
        return [
            self.make_material_item(
                "conc_h17", "Hormigón H17 Elaborado", "m³",
                plate_area * self.SLAB_THICKNESS_M, Category.PLATEA, prices,
            ),
            self.make_material_item(
                "mesh_steel", "Malla Acero Simag (15x15) 5.5mm", "m²",
                plate_area * self.MESH_OVERLAP, Category.PLATEA, prices,
            ),
            self.make_material_item(
                "poly_film", "Film Polietileno 200 micrones", "m²",
                plate_area * self.FILM_OVERLAP, Category.PLATEA, prices,
            ),
        ]

    def opening_items(self, dims: dict, prices) -> list:
        return [
            self.make_material_item(
                "win_dvh", "Ventanas DVH (Aluminio/PVC)", "m²",
                dims["window_area"], Category.ABERTURAS, prices,
            ),
            self.make_material_item(
                "door_ext", "Puerta Exterior Seguridad", "unidades",
                dims["door_count"], Category.ABERTURAS, prices,
            ),
        ]

    def roof_finishing_items(self, dims: dict, prices) -> list:
        plate_area = dims["plate_area"]
        return [
            self.make_material_item(
                "roof_sheet", "Chapa Sinusoidal Galv. N°25", "m²",
                plate_area * self.ROOF_SHEET_WASTE, Category.TECHO, prices,
            ),
            self.make_material_item(
                "insul_roof", "Aislante Térmico (Espuma+Alum)", "m²",
                plate_area * self.ROOF_INSULATION_WASTE, Category.TECHO, prices,
            ),
            self.make_material_item(
                "screw_roof", "Tornillo Autoperforante Chapa (con arandela)", "unidades",
                plate_area * self.ROOF_SCREWS_PER_M2, Category.TECHO, prices,
            ),
        ]
