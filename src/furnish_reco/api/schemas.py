from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from furnish_reco.domain.models import FurnitureCategory, StylePreference

Source = Literal["ai", "fallback"]


class AvailableProductSchema(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    category: FurnitureCategory
    priceFils: int = Field(..., ge=0)
    materials: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    stockQuantity: Optional[int] = Field(None, ge=0)


class PackageRecommendationRequest(BaseModel):
    budgetMinFils: Optional[int] = Field(None, ge=0)
    budgetMaxFils: int = Field(..., ge=0)
    stylePreferences: List[StylePreference] = Field(default_factory=list)
    roomType: Optional[str] = None
    styleTag: Optional[StylePreference] = None
    availableProducts: List[AvailableProductSchema] = Field(default_factory=list)
    maxItems: int = Field(8, ge=1, le=50)


class SelectedProductSchema(BaseModel):
    productId: str
    quantity: int
    reasoning: str


class PackageRecommendationResponse(BaseModel):
    selectedProducts: List[SelectedProductSchema]
    totalPriceFils: int
    packageReasoning: str
    source: Source


class StyleMatchRequest(BaseModel):
    productId: str
    styleTag: StylePreference
    productName: str = ""
    productCategory: FurnitureCategory = "OTHER"
    productMaterials: Optional[List[str]] = None
    productColors: Optional[List[str]] = None


class StyleMatchResponse(BaseModel):
    productId: str
    styleTag: str
    score: float
    reasoning: str
    source: Source


class RoomClassificationRequest(BaseModel):
    photoUrls: List[str] = Field(default_factory=list)
    roomName: Optional[str] = None


class RoomNameClassificationRequest(BaseModel):
    name: str


class RoomClassificationResponse(BaseModel):
    type: str
    confidence: float
    source: Source
