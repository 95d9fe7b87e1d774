from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    ok: bool
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "ParseResult[T]":
        return cls(ok=False, reason=reason)


class AISelectedProduct(BaseModel):
    productId: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)
    reasoning: Optional[str] = None


class AIPackageResponse(BaseModel):
    selectedProducts: List[Any]
    packageReasoning: Optional[str] = None


class AIStyleMatchResponse(BaseModel):
    score: float
    reasoning: Optional[str] = None


class AIRoomClassificationResponse(BaseModel):
    type: str
    confidence: Optional[float] = None


@dataclass(frozen=True)
class ParsedPackage:
    selected_products: List[AISelectedProduct]
    package_reasoning: Optional[str]
    dropped_count: int


def parse_package_response(payload: Any) -> ParseResult[ParsedPackage]:
    """Validate the package envelope, then each selection on its own.

    Malformed selection entries are dropped rather than failing the whole
    response; the caller decides what an empty remainder means.
    """
    try:
        envelope = AIPackageResponse.model_validate(payload)
    except ValidationError as exc:
        return ParseResult.failure(f"invalid package response: {_first_error(exc)}")

    if not envelope.selectedProducts:
        return ParseResult.failure("AI returned empty or invalid product selection")

    valid: List[AISelectedProduct] = []
    for raw in envelope.selectedProducts:
        try:
            valid.append(AISelectedProduct.model_validate(raw))
        except ValidationError:
            continue

    if not valid:
        return ParseResult.failure("AI returned empty or invalid product selection")

    return ParseResult.success(
        ParsedPackage(
            selected_products=valid,
            package_reasoning=envelope.packageReasoning,
            dropped_count=len(envelope.selectedProducts) - len(valid),
        )
    )


def parse_style_match_response(payload: Any) -> ParseResult[AIStyleMatchResponse]:
    try:
        return ParseResult.success(AIStyleMatchResponse.model_validate(payload))
    except ValidationError as exc:
        return ParseResult.failure(f"invalid style match response: {_first_error(exc)}")


def parse_room_classification_response(payload: Any) -> ParseResult[AIRoomClassificationResponse]:
    try:
        return ParseResult.success(AIRoomClassificationResponse.model_validate(payload))
    except ValidationError as exc:
        return ParseResult.failure(f"invalid room classification response: {_first_error(exc)}")


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', 'invalid')}"
