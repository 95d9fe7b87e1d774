from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Generic, Optional, Sequence, TypeVar, Union

from furnish_reco.core.config import AIClientConfig
from furnish_reco.core.errors import AIServiceError
from furnish_reco.core.room_classifier import (
    classify_room_type_by_name,
    fallback_room_classification,
)
from furnish_reco.core.scoring import fallback_style_match
from furnish_reco.core.selection import select_package
from furnish_reco.domain.models import (
    PackageRecommendationInput,
    PackageRecommendationOutput,
    RoomClassificationOutput,
    StyleMatchInput,
    StyleMatchOutput,
)
from furnish_reco.infra.ai_service_client import AIServiceClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RemoteOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class RemoteFailed:
    error: Exception


RemoteOutcome = Union[RemoteOk[T], RemoteFailed]


class Recommender:
    """Public entry point for package recommendation, style match and room classification.

    The AI service is attempted when configured; any failure falls back to
    the local rule-based logic, so AI unavailability never raises.
    """

    def __init__(
        self,
        *,
        config: Optional[AIClientConfig] = None,
        client: Optional[AIServiceClient] = None,
    ) -> None:
        self._config = config or AIClientConfig()
        if client is None and self._config.is_configured:
            client = AIServiceClient(config=self._config)
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    # ------------------------------------------------------------
    # Package recommendation
    # ------------------------------------------------------------
    def try_remote_package_recommendation(
        self, req: PackageRecommendationInput
    ) -> RemoteOutcome[PackageRecommendationOutput]:
        return self._attempt(
            "package_recommendation",
            lambda: self._client.request_package_recommendation(req),
        )

    def generate_package_recommendation(
        self, req: PackageRecommendationInput
    ) -> PackageRecommendationOutput:
        if not isinstance(req, PackageRecommendationInput):
            raise TypeError("req must be a PackageRecommendationInput")
        if not self.is_configured:
            return select_package(req)

        outcome = self.try_remote_package_recommendation(req)
        if isinstance(outcome, RemoteOk):
            return outcome.value

        result = select_package(req)
        return replace(
            result,
            package_reasoning=(
                f"AI service unavailable ({_describe(outcome.error)}), "
                f"using rule-based fallback. {result.package_reasoning}"
            ),
        )

    # ------------------------------------------------------------
    # Style match
    # ------------------------------------------------------------
    def get_style_match(self, style_input: StyleMatchInput) -> StyleMatchOutput:
        if not self.is_configured:
            return fallback_style_match(style_input)

        outcome = self._attempt(
            "style_match", lambda: self._client.request_style_match(style_input)
        )
        if isinstance(outcome, RemoteOk):
            return outcome.value
        return fallback_style_match(style_input)

    # ------------------------------------------------------------
    # Room classification
    # ------------------------------------------------------------
    def classify_room_type(self, photo_urls: Sequence[str]) -> RoomClassificationOutput:
        if not self.is_configured:
            return fallback_room_classification(photo_urls)

        outcome = self._attempt(
            "room_classification",
            lambda: self._client.request_room_classification(photo_urls),
        )
        if isinstance(outcome, RemoteOk):
            return outcome.value
        return fallback_room_classification(photo_urls)

    def resolve_room_type(
        self, photo_urls: Sequence[str], room_name: Optional[str] = None
    ) -> RoomClassificationOutput:
        """Photo classification first, the room name heuristic when that yields OTHER."""
        result = None
        if photo_urls:
            result = self.classify_room_type(photo_urls)
            if result.type != "OTHER":
                return result

        if room_name:
            by_name = classify_room_type_by_name(room_name)
            if by_name.type != "OTHER" or result is None:
                return by_name

        return result or fallback_room_classification(photo_urls)

    def _attempt(self, operation: str, call: Callable[[], T]) -> RemoteOutcome[T]:
        try:
            return RemoteOk(call())
        except AIServiceError as exc:
            logger.warning(
                "ai %s failed, falling back status=%s error=%s",
                operation,
                exc.status_code,
                exc,
            )
            return RemoteFailed(exc)
        except Exception as exc:
            logger.exception("ai %s raised unexpectedly, falling back", operation)
            return RemoteFailed(exc)


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
