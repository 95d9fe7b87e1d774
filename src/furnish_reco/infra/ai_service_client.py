from __future__ import annotations

import http.client
import json
import logging
import time
import urllib.error
import urllib.request
from typing import Any, Mapping, Optional, Sequence

from furnish_reco.core.config import AIClientConfig
from furnish_reco.core.errors import (
    AIServiceClientError,
    AIServiceError,
    AIServiceResponseError,
    AIServiceRetryExhaustedError,
    AIServiceTransientError,
)
from furnish_reco.domain.models import (
    ROOM_TYPES,
    PackageRecommendationInput,
    PackageRecommendationOutput,
    RoomClassificationOutput,
    SelectedProduct,
    StyleMatchInput,
    StyleMatchOutput,
)
from furnish_reco.infra.ai_schemas import (
    parse_package_response,
    parse_room_classification_response,
    parse_style_match_response,
)
from furnish_reco.infra.prompts import (
    PACKAGE_GENERATION_PROMPT,
    ROOM_CLASSIFICATION_PROMPT,
    STYLE_MATCHING_PROMPT,
)

logger = logging.getLogger(__name__)

PACKAGE_RECOMMENDATION_PATH = "/v1/package-recommendation"
STYLE_MATCH_PATH = "/v1/style-match"
ROOM_CLASSIFICATION_PATH = "/v1/room-classification"

DEFAULT_ROOM_CONFIDENCE = 0.5

_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class AIServiceClient:
    """HTTP client for the external AI curation service.

    Every ``request_*`` method either returns an AI-sourced result or raises
    an ``AIServiceError`` subclass. Falling back is the caller's decision.
    """

    def __init__(self, *, config: AIClientConfig) -> None:
        if not config.service_url:
            raise ValueError("AIServiceClient requires a service_url")
        self._config = config

    def request_package_recommendation(
        self, req: PackageRecommendationInput
    ) -> PackageRecommendationOutput:
        user_message = json.dumps(
            {
                "budgetMinFils": req.budget_min_fils or 0,
                "budgetMaxFils": req.budget_max_fils,
                "stylePreferences": list(req.style_preferences),
                "roomType": req.room_type,
                "styleTag": req.style_tag,
                "maxItems": req.max_items,
                "products": [
                    {
                        "id": p.id,
                        "name": p.name,
                        "category": p.category,
                        "priceFils": p.price_fils,
                        "materials": list(p.materials or []),
                        "colors": list(p.colors or []),
                    }
                    for p in req.available_products
                ],
            }
        )
        payload = self._call_service(
            path=PACKAGE_RECOMMENDATION_PATH,
            system_prompt=PACKAGE_GENERATION_PROMPT,
            user_message=user_message,
        )

        parsed = parse_package_response(payload)
        if not parsed.ok:
            raise AIServiceResponseError(parsed.reason)

        prices = {p.id: p.price_fils for p in req.available_products}
        known = [s for s in parsed.value.selected_products if s.productId in prices]
        if not known:
            raise AIServiceResponseError(
                "AI returned product IDs not present in available products"
            )

        dropped = parsed.value.dropped_count + len(parsed.value.selected_products) - len(known)
        if dropped:
            logger.warning("ai package response dropped invalid selections count=%s", dropped)

        if len(known) > req.max_items:
            logger.warning(
                "ai package response over item cap selected=%s max_items=%s",
                len(known),
                req.max_items,
            )
            known = known[: req.max_items]

        # totals are always recomputed from the candidate pool
        total_price_fils = sum(prices[s.productId] * s.quantity for s in known)
        return PackageRecommendationOutput(
            selected_products=[
                SelectedProduct(
                    product_id=s.productId,
                    quantity=s.quantity,
                    reasoning=s.reasoning or "Selected by AI.",
                )
                for s in known
            ],
            total_price_fils=total_price_fils,
            package_reasoning=parsed.value.package_reasoning or "AI-curated package.",
            source="ai",
        )

    def request_style_match(self, style_input: StyleMatchInput) -> StyleMatchOutput:
        user_message = json.dumps(
            {
                "productId": style_input.product_id,
                "productName": style_input.product_name,
                "productCategory": style_input.product_category,
                "materials": list(style_input.product_materials or []),
                "colors": list(style_input.product_colors or []),
                "styleTag": style_input.style_tag,
            }
        )
        payload = self._call_service(
            path=STYLE_MATCH_PATH,
            system_prompt=STYLE_MATCHING_PROMPT,
            user_message=user_message,
        )

        parsed = parse_style_match_response(payload)
        if not parsed.ok:
            raise AIServiceResponseError(parsed.reason)

        return StyleMatchOutput(
            product_id=style_input.product_id,
            style_tag=style_input.style_tag,
            score=_clamp_round(parsed.value.score),
            reasoning=parsed.value.reasoning or "Scored by AI.",
            source="ai",
        )

    def request_room_classification(self, photo_urls: Sequence[str]) -> RoomClassificationOutput:
        payload = self._call_service(
            path=ROOM_CLASSIFICATION_PATH,
            system_prompt=ROOM_CLASSIFICATION_PROMPT,
            user_message=json.dumps({"photoUrls": list(photo_urls)}),
        )

        parsed = parse_room_classification_response(payload)
        if not parsed.ok:
            raise AIServiceResponseError(parsed.reason)

        room_type = parsed.value.type if parsed.value.type in ROOM_TYPES else "OTHER"
        confidence = parsed.value.confidence
        if confidence is None:
            confidence = DEFAULT_ROOM_CONFIDENCE
        return RoomClassificationOutput(
            type=room_type,
            confidence=_clamp_round(confidence),
            source="ai",
        )

    def _call_service(self, *, path: str, system_prompt: str, user_message: str) -> Any:
        url = f"{self._config.service_url}{path}"
        body = json.dumps({"systemPrompt": system_prompt, "userMessage": user_message}).encode(
            "utf-8"
        )
        timeout_sec = self._config.timeout_ms / 1000.0
        attempts = self._config.max_retries + 1
        last_error: Optional[AIServiceError] = None

        for attempt in range(attempts):
            if attempt > 0:
                _sleep_backoff(attempt, self._config)

            request = urllib.request.Request(url, data=body, headers=dict(_HEADERS), method="POST")
            try:
                with urllib.request.urlopen(request, timeout=timeout_sec) as res:
                    raw = res.read().decode("utf-8", errors="replace")
            except urllib.error.HTTPError as exc:
                status = exc.code
                response_body = _read_error_body(exc)
                message = f"AI service returned {status}: {exc.reason}"
                if 400 <= status < 500 and status != 429:
                    raise AIServiceClientError(message, status, response_body) from exc
                last_error = AIServiceTransientError(message, status, response_body)
            except (urllib.error.URLError, TimeoutError, ConnectionError, http.client.HTTPException) as exc:
                reason = getattr(exc, "reason", None) or exc
                last_error = AIServiceTransientError(f"AI service request failed: {reason}")
            else:
                return _decode_json(raw)

            logger.warning(
                "ai request failed path=%s attempt=%s/%s error=%s",
                path,
                attempt + 1,
                attempts,
                last_error,
            )

        raise AIServiceRetryExhaustedError(
            f"AI service request failed after {attempts} attempts: {last_error}",
            last_error.status_code if last_error else None,
            last_error.response_body if last_error else None,
        ) from last_error


def _decode_json(raw: str) -> Mapping[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AIServiceResponseError("AI service returned invalid JSON", 200, raw) from exc
    if not isinstance(payload, dict):
        raise AIServiceResponseError("AI service returned a non-object JSON body", 200, raw)
    return payload


def _read_error_body(exc: urllib.error.HTTPError) -> str:
    try:
        return exc.read().decode("utf-8", errors="replace")
    except (OSError, AttributeError):
        return "<unreadable>"


def _sleep_backoff(attempt: int, config: AIClientConfig) -> None:
    delay_ms = config.retry_delay_ms * (2 ** (attempt - 1))
    time.sleep(delay_ms / 1000.0)


def _clamp_round(value: float) -> float:
    return round(max(0.0, min(float(value), 1.0)), 2)
