import logging
import os
from datetime import datetime, timezone
from functools import lru_cache

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from furnish_reco.api import handlers
from furnish_reco.api.schemas import (
    PackageRecommendationRequest,
    PackageRecommendationResponse,
    RoomClassificationRequest,
    RoomClassificationResponse,
    RoomNameClassificationRequest,
    StyleMatchRequest,
    StyleMatchResponse,
)
from furnish_reco.core.config import load_ai_client_config
from furnish_reco.services.recommender import Recommender

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Furnish Reco Service", version="0.1.0")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log uncaught exceptions and answer 500."""
    logger.exception(
        "unhandled exception path=%s method=%s error=%s",
        request.url.path,
        request.method,
        exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_recommender() -> Recommender:
    # request handlers are user-facing, so they keep the default latency budget
    return Recommender(config=load_ai_client_config())


# ------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------
@app.get("/health")
def health(recommender: Recommender = Depends(get_recommender)):
    return {
        "status": "ok",
        "service": "furnish-reco",
        "aiConfigured": recommender.is_configured,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/recommendations/package", response_model=PackageRecommendationResponse)
def recommend_package(
    req: PackageRecommendationRequest,
    recommender: Recommender = Depends(get_recommender),
):
    return handlers.recommend_package(req, recommender)


@app.post("/style-match", response_model=StyleMatchResponse)
def style_match(req: StyleMatchRequest, recommender: Recommender = Depends(get_recommender)):
    return handlers.style_match(req, recommender)


@app.post("/room-classification", response_model=RoomClassificationResponse)
def room_classification(
    req: RoomClassificationRequest,
    recommender: Recommender = Depends(get_recommender),
):
    return handlers.classify_room(req, recommender)


@app.post("/room-classification/by-name", response_model=RoomClassificationResponse)
def room_classification_by_name(req: RoomNameClassificationRequest):
    return handlers.classify_room_by_name(req)
