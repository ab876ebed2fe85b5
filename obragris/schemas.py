from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Literal
from .models import Category, ConstructionSystem

# Upper bounds keep every derived quantity finite
MAX_DIMENSION = 1_000_000.0
MAX_DOORS = 10_000


class UserInputs(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    plate_area: float = Field(60.0, ge=0, le=MAX_DIMENSION, description="Superficie de platea / techo (m²)")
    wall_height: float = Field(2.6, ge=0, le=MAX_DIMENSION, description="Altura de muros (m)")
    wall_perimeter: float = Field(40.0, ge=0, le=MAX_DIMENSION, description="Perímetro de muros (m)")
    window_area: float = Field(8.0, ge=0, le=MAX_DIMENSION, description="Superficie total de ventanas (m²)")
    door_count: int = Field(2, ge=0, le=MAX_DOORS, description="Puertas exteriores")


class MaterialItem(BaseModel):
    id: str
    name: str
    unit: str
    quantity: float
    unit_price: float
    category: Category


class CalculationResult(BaseModel):
    system: ConstructionSystem
    materials: List[MaterialItem] = []
    total_cost: float = 0.0


class EstimateRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    inputs: UserInputs = UserInputs()
    system: str = ConstructionSystem.MASONRY.key
    price_overrides: Dict[str, float] = {}


class PriceUpdateRequest(EstimateRequest):
    location: str = ""


class PriceUpdateResponse(BaseModel):
    location: str
    prices: Dict[str, float]


class SupplierSource(BaseModel):
    title: str
    uri: str


class SupplierResult(BaseModel):
    text: str
    sources: List[SupplierSource] = []


class SupplierRequest(BaseModel):
    system: str = ConstructionSystem.MASONRY.key
    location: str = ""


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    text: str


class ChatRequest(EstimateRequest):
    question: str
    history: List[ChatMessage] = []


class ChatResponse(BaseModel):
    answer: str


class ExportRequest(EstimateRequest):
    location: str = ""


class WhatsAppExport(BaseModel):
    text: str
    url: str


class SystemInfo(BaseModel):
    key: str
    name: str


class EmbedSnippet(BaseModel):
    url: str
    iframe: str


class DefaultPrice(BaseModel):
    id: str
    unit_price: float
