from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2] / "src"
sys.path.append(str(ROOT))

from furnish_reco.core import errors  # noqa: E402


@pytest.mark.unit
def test_ai_service_errors_inherit_base() -> None:
    assert issubclass(errors.AIServiceError, errors.RecoError)
    assert issubclass(errors.AIServiceClientError, errors.AIServiceError)
    assert issubclass(errors.AIServiceTransientError, errors.AIServiceError)
    assert issubclass(errors.AIServiceRetryExhaustedError, errors.AIServiceError)
    assert issubclass(errors.AIServiceResponseError, errors.AIServiceError)


@pytest.mark.unit
def test_db_errors_inherit_base() -> None:
    assert issubclass(errors.DbError, errors.RecoError)


@pytest.mark.unit
def test_ai_service_error_carries_status_and_body() -> None:
    err = errors.AIServiceClientError("AI service returned 404: Not Found", 404, "missing")

    assert str(err) == "AI service returned 404: Not Found"
    assert err.status_code == 404
    assert err.response_body == "missing"


@pytest.mark.unit
def test_ai_service_error_status_is_optional() -> None:
    err = errors.AIServiceResponseError("empty selection")

    assert err.status_code is None
    assert err.response_body is None
