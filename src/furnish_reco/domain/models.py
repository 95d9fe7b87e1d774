from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Sequence, get_args

FurnitureCategory = Literal[
    "SOFA",
    "BED",
    "DINING_TABLE",
    "DINING_CHAIR",
    "DESK",
    "OFFICE_CHAIR",
    "WARDROBE",
    "DRESSER",
    "BOOKSHELF",
    "TV_UNIT",
    "COFFEE_TABLE",
    "SIDE_TABLE",
    "RUG",
    "CURTAIN",
    "LIGHTING",
    "MIRROR",
    "STORAGE",
    "OUTDOOR",
    "DECOR",
    "OTHER",
]

StylePreference = Literal[
    "modern",
    "traditional",
    "minimalist",
    "eclectic",
    "scandinavian",
    "industrial",
    "bohemian",
    "coastal",
    "mid_century",
    "contemporary",
    "rustic",
    "luxury",
]

RoomType = Literal[
    "LIVING_ROOM",
    "BEDROOM",
    "DINING_ROOM",
    "KITCHEN",
    "BATHROOM",
    "STUDY_OFFICE",
    "BALCONY",
    "OTHER",
]

Source = Literal["ai", "fallback"]

FURNITURE_CATEGORIES: tuple[str, ...] = get_args(FurnitureCategory)
STYLE_PREFERENCES: tuple[str, ...] = get_args(StylePreference)
ROOM_TYPES: tuple[str, ...] = get_args(RoomType)

DEFAULT_MAX_ITEMS = 8


@dataclass(frozen=True)
class AvailableProduct:
    id: str
    name: str
    category: str
    price_fils: int
    materials: Optional[Sequence[str]] = None
    colors: Optional[Sequence[str]] = None
    stock_quantity: Optional[int] = None


@dataclass(frozen=True)
class PackageRecommendationInput:
    budget_max_fils: int
    style_preferences: Sequence[str] = field(default_factory=list)
    available_products: Sequence[AvailableProduct] = field(default_factory=list)
    budget_min_fils: Optional[int] = None
    room_type: Optional[str] = None
    style_tag: Optional[str] = None
    max_items: int = DEFAULT_MAX_ITEMS


@dataclass(frozen=True)
class SelectedProduct:
    product_id: str
    quantity: int
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class PackageRecommendationOutput:
    selected_products: List[SelectedProduct]
    total_price_fils: int
    package_reasoning: str
    source: Source

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selectedProducts": [s.to_dict() for s in self.selected_products],
            "totalPriceFils": self.total_price_fils,
            "packageReasoning": self.package_reasoning,
            "source": self.source,
        }


@dataclass(frozen=True)
class StyleMatchInput:
    product_id: str
    style_tag: str
    product_name: str = ""
    product_category: str = "OTHER"
    product_materials: Optional[Sequence[str]] = None
    product_colors: Optional[Sequence[str]] = None


@dataclass(frozen=True)
class StyleMatchOutput:
    product_id: str
    style_tag: str
    score: float
    reasoning: str
    source: Source

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "styleTag": self.style_tag,
            "score": self.score,
            "reasoning": self.reasoning,
            "source": self.source,
        }


@dataclass(frozen=True)
class RoomClassificationOutput:
    type: str
    confidence: float
    source: Source

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "confidence": self.confidence,
            "source": self.source,
        }
