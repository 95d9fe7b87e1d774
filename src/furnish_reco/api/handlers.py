import logging
import uuid

from furnish_reco.api.schemas import (
    PackageRecommendationRequest,
    PackageRecommendationResponse,
    RoomClassificationRequest,
    RoomClassificationResponse,
    RoomNameClassificationRequest,
    StyleMatchRequest,
    StyleMatchResponse,
)
from furnish_reco.core.room_classifier import classify_room_type_by_name
from furnish_reco.domain.models import (
    AvailableProduct,
    PackageRecommendationInput,
    StyleMatchInput,
)
from furnish_reco.services.recommender import Recommender

logger = logging.getLogger(__name__)


def _to_input(req: PackageRecommendationRequest) -> PackageRecommendationInput:
    return PackageRecommendationInput(
        budget_min_fils=req.budgetMinFils,
        budget_max_fils=req.budgetMaxFils,
        style_preferences=list(req.stylePreferences),
        room_type=req.roomType,
        style_tag=req.styleTag,
        max_items=req.maxItems,
        available_products=[
            AvailableProduct(
                id=p.id,
                name=p.name,
                category=p.category,
                price_fils=p.priceFils,
                materials=p.materials,
                colors=p.colors,
                stock_quantity=p.stockQuantity,
            )
            for p in req.availableProducts
        ],
    )


def recommend_package(
    req: PackageRecommendationRequest, recommender: Recommender
) -> PackageRecommendationResponse:
    request_id = str(uuid.uuid4())
    logger.info(
        "package recommendation start request_id=%s candidates=%s budget_max=%s",
        request_id,
        len(req.availableProducts),
        req.budgetMaxFils,
    )

    result = recommender.generate_package_recommendation(_to_input(req))

    logger.info(
        "package recommendation done request_id=%s source=%s items_count=%s total_fils=%s",
        request_id,
        result.source,
        len(result.selected_products),
        result.total_price_fils,
    )
    return PackageRecommendationResponse.model_validate(result.to_dict())


def style_match(req: StyleMatchRequest, recommender: Recommender) -> StyleMatchResponse:
    result = recommender.get_style_match(
        StyleMatchInput(
            product_id=req.productId,
            style_tag=req.styleTag,
            product_name=req.productName,
            product_category=req.productCategory,
            product_materials=req.productMaterials,
            product_colors=req.productColors,
        )
    )
    return StyleMatchResponse.model_validate(result.to_dict())


def classify_room(
    req: RoomClassificationRequest, recommender: Recommender
) -> RoomClassificationResponse:
    result = recommender.resolve_room_type(req.photoUrls, req.roomName)
    return RoomClassificationResponse.model_validate(result.to_dict())


def classify_room_by_name(req: RoomNameClassificationRequest) -> RoomClassificationResponse:
    return RoomClassificationResponse.model_validate(classify_room_type_by_name(req.name).to_dict())
