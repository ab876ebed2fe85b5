import enum


# --- Enums ---

class ConstructionSystem(str, enum.Enum):
    MASONRY = "Mampostería (Ladrillos)"
    SIP = "Paneles SIP"
    STEEL_FRAME = "Steel Frame"
    WOOD_FRAME = "Wood Frame"
    METAL_PANEL = "Paneles Termoaislantes Metálicos"

    @property
    def key(self) -> str:
        """Registry key — lower-cased member name (e.g. "steel_frame")."""
        return self.name.lower()


class Category(str, enum.Enum):
    PLATEA = "Platea"        # Foundation / slab
    MUROS = "Muros"          # Walls
    ABERTURAS = "Aberturas"  # Openings
    TECHO = "Techo"          # Roof


# Block order of every estimate.
CATEGORY_ORDER = [
    Category.PLATEA,
    Category.MUROS,
    Category.ABERTURAS,
    Category.TECHO,
]

# The five geometric inputs every estimate needs.
INPUT_FIELDS = [
    "plate_area",       # m² — slab and roof footprint
    "wall_height",      # m
    "wall_perimeter",   # m
    "window_area",      # m² — total glazed area
    "door_count",       # exterior doors
]

# Average exterior door opening (m²) deducted from the gross wall area.
DOOR_AREA_M2 = 2.0
