from __future__ import annotations

import argparse
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Protocol, Sequence

from dotenv import load_dotenv

from furnish_reco.core.config import WorkerConfig, load_worker_config
from furnish_reco.core.logging import get_logger
from furnish_reco.domain.models import AvailableProduct, PackageRecommendationInput
from furnish_reco.repos.db import db_connection, transaction
from furnish_reco.repos.package_repo import (
    NotificationRepo,
    PackageItemRow,
    PackageRepo,
    PackageRow,
    PreferenceRepo,
    PreferenceRow,
    ProductRepo,
)
from furnish_reco.services.recommender import Recommender

JOB_ID = "JOB-P-01"

DEFAULT_BUDGET_MAX_FILS = 500_000
CANDIDATE_POOL_LIMIT = 50
PACKAGE_MAX_ITEMS = 8
GENERATING = "GENERATING"


@dataclass(frozen=True)
class PackageGeneratePayload:
    package_id: str
    project_id: str
    user_id: str
    room_id: Optional[str] = None
    style_tag: Optional[str] = None


class PackageStore(Protocol):
    def fetch_package(self, *, package_id: str) -> Optional[PackageRow]: ...
    def mark_expired(self, *, package_id: str) -> int: ...
    def insert_items(self, *, package_id: str, items: Sequence[PackageItemRow]) -> int: ...
    def mark_ready(
        self,
        *,
        package_id: str,
        total_price_fils: int,
        style_tag: Optional[str],
        ai_model_version: str,
        generated_at: datetime,
    ) -> int: ...


class PreferenceStore(Protocol):
    def fetch_preference(self, *, user_id: str, project_id: str) -> Optional[PreferenceRow]: ...


class ProductStore(Protocol):
    def fetch_candidates(self, *, budget_max_fils: int, limit: int) -> List[AvailableProduct]: ...


class NotificationStore(Protocol):
    def create(self, *, user_id: str, type_: str, title: str, body: str) -> int: ...


def generate_package(
    payload: PackageGeneratePayload,
    *,
    recommender: Recommender,
    package_repo: PackageStore,
    preference_repo: PreferenceStore,
    product_repo: ProductStore,
    notification_repo: NotificationStore,
    conn=None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> dict:
    """Select products for a GENERATING package and move it to READY or EXPIRED.

    An empty selection is not an error: the package is expired and the user
    is not notified.
    """
    log = logger or logging.getLogger(__name__)
    log.info(
        "package generate start: package_id=%s project_id=%s",
        payload.package_id,
        payload.project_id,
    )

    pkg = package_repo.fetch_package(package_id=payload.package_id)
    if pkg is None:
        log.warning("package generate skip: package_id=%s reason=not_found", payload.package_id)
        return {"status": "skipped", "reason": "not_found"}
    if pkg.status != GENERATING:
        log.warning(
            "package generate skip: package_id=%s reason=status status=%s",
            payload.package_id,
            pkg.status,
        )
        return {"status": "skipped", "reason": "status"}

    preference = preference_repo.fetch_preference(
        user_id=payload.user_id, project_id=payload.project_id
    )
    budget_max = DEFAULT_BUDGET_MAX_FILS
    budget_min = None
    style_preferences: List[str] = []
    if preference is not None:
        if preference.budget_max_fils is not None:
            budget_max = preference.budget_max_fils
        budget_min = preference.budget_min_fils
        style_preferences = list(preference.style_preferences)

    try:
        candidates = product_repo.fetch_candidates(
            budget_max_fils=budget_max, limit=CANDIDATE_POOL_LIMIT
        )
        if not candidates:
            log.warning("package generate expire: package_id=%s reason=no_candidates", payload.package_id)
            package_repo.mark_expired(package_id=payload.package_id)
            return {"status": "expired", "reason": "no_candidates"}

        recommendation = recommender.generate_package_recommendation(
            PackageRecommendationInput(
                budget_min_fils=budget_min,
                budget_max_fils=budget_max,
                style_preferences=style_preferences,
                style_tag=payload.style_tag,
                available_products=candidates,
                max_items=PACKAGE_MAX_ITEMS,
            )
        )
        log.info(
            "package recommendation received: source=%s items_count=%s",
            recommendation.source,
            len(recommendation.selected_products),
        )

        if not recommendation.selected_products:
            log.warning("package generate expire: package_id=%s reason=empty_selection", payload.package_id)
            package_repo.mark_expired(package_id=payload.package_id)
            return {"status": "expired", "reason": "empty_selection"}

        prices = {p.id: p.price_fils for p in candidates}
        items = [
            PackageItemRow(
                product_id=sel.product_id,
                quantity=sel.quantity,
                unit_price_fils=prices.get(sel.product_id, 0),
            )
            for sel in recommendation.selected_products
        ]
        ai_model_version = "ai-v1" if recommendation.source == "ai" else "fallback-v1"

        def _persist() -> None:
            package_repo.insert_items(package_id=payload.package_id, items=items)
            package_repo.mark_ready(
                package_id=payload.package_id,
                total_price_fils=recommendation.total_price_fils,
                style_tag=payload.style_tag or (style_preferences[0] if style_preferences else None),
                ai_model_version=ai_model_version,
                generated_at=datetime.now(timezone.utc),
            )
            notification_repo.create(
                user_id=payload.user_id,
                type_="PACKAGE_READY",
                title="Your furnishing package is ready!",
                body=(
                    f"We've curated {len(items)} items within your budget. "
                    "Review and customize your package now."
                ),
            )

        if conn is not None:
            with transaction(conn):
                _persist()
        else:
            _persist()
    except Exception:
        log.exception("package generate failed: package_id=%s", payload.package_id)
        # an aborted transaction rejects every statement until rolled back
        if conn is not None:
            conn.rollback()
        package_repo.mark_expired(package_id=payload.package_id)
        return {"status": "expired", "reason": "error"}

    log.info(
        "package generate done: package_id=%s items_count=%s total_fils=%s source=%s",
        payload.package_id,
        len(items),
        recommendation.total_price_fils,
        recommendation.source,
    )
    return {
        "status": "ready",
        "items_count": len(items),
        "total_price_fils": recommendation.total_price_fils,
        "source": recommendation.source,
    }


def run_job(
    *, config: WorkerConfig, payload: PackageGeneratePayload, run_id: str | None = None
) -> dict:
    job_run_id = run_id or uuid.uuid4().hex
    logger = get_logger(job_id=JOB_ID, run_id=job_run_id)
    recommender = Recommender(config=config.ai_client)
    logger.info("package generate ai_configured=%s", recommender.is_configured)

    with db_connection(database_url=config.database_url) as conn:
        return generate_package(
            payload,
            recommender=recommender,
            package_repo=PackageRepo(conn=conn),
            preference_repo=PreferenceRepo(conn=conn),
            product_repo=ProductRepo(conn=conn),
            notification_repo=NotificationRepo(conn=conn),
            conn=conn,
            logger=logger,
        )


def main() -> int:
    parser = argparse.ArgumentParser(description="JOB-P-01 Furnishing package generation")
    parser.add_argument("--package-id", dest="package_id", required=True)
    parser.add_argument("--project-id", dest="project_id", required=True)
    parser.add_argument("--user-id", dest="user_id", required=True)
    parser.add_argument("--room-id", dest="room_id", default=None)
    parser.add_argument("--style-tag", dest="style_tag", default=None)
    parser.add_argument("--run-id", dest="run_id", default=None)
    args = parser.parse_args()

    load_dotenv()
    config = load_worker_config()
    run_job(
        config=config,
        payload=PackageGeneratePayload(
            package_id=args.package_id,
            project_id=args.project_id,
            user_id=args.user_id,
            room_id=args.room_id,
            style_tag=args.style_tag,
        ),
        run_id=args.run_id,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
