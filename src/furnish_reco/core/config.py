from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MAX_RETRIES = 2
DEFAULT_RETRY_DELAY_MS = 1_000
# worker jobs are not user-facing and can afford a longer wait
WORKER_TIMEOUT_MS = 45_000


@dataclass(frozen=True)
class AIClientConfig:
    service_url: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS

    @property
    def is_configured(self) -> bool:
        return bool(self.service_url)


@dataclass(frozen=True)
class WorkerConfig:
    database_url: str
    ai_client: AIClientConfig


def load_ai_client_config(
    *,
    timeout_ms: Optional[int] = None,
    max_retries: Optional[int] = None,
) -> AIClientConfig:
    """Build the AI client config from the environment.

    Explicit arguments win over env vars so each call site can pick the
    latency budget it needs.
    """
    service_url = os.getenv("AI_SERVICE_URL") or None
    if service_url:
        service_url = service_url.rstrip("/")
    return AIClientConfig(
        service_url=service_url,
        timeout_ms=timeout_ms
        if timeout_ms is not None
        else _int_env("AI_SERVICE_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        max_retries=max_retries
        if max_retries is not None
        else _int_env("AI_SERVICE_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        retry_delay_ms=_int_env("AI_SERVICE_RETRY_DELAY_MS", DEFAULT_RETRY_DELAY_MS),
    )


def load_worker_config() -> WorkerConfig:
    return WorkerConfig(
        database_url=_require("DATABASE_URL"),
        ai_client=load_ai_client_config(timeout_ms=WORKER_TIMEOUT_MS),
    )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid integer env var: {name}={value!r}") from exc
    if parsed < 0:
        raise ValueError(f"Env var must not be negative: {name}={parsed}")
    return parsed


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ValueError(f"Missing required env var: {name}")
    return value
