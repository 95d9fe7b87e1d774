from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Protocol, Sequence

from furnish_reco.domain.models import AvailableProduct


class Cursor(Protocol):
    def execute(self, query: str, params: Sequence[object] | None = None) -> None: ...
    def executemany(self, query: str, params_seq: Sequence[Sequence[object]]) -> None: ...
    def fetchone(self) -> Optional[Sequence[object]]: ...
    def fetchall(self) -> Sequence[Sequence[object]]: ...
    @property
    def rowcount(self) -> int: ...
    def close(self) -> None: ...


class Connection(Protocol):
    def cursor(self) -> Cursor: ...
    def commit(self) -> None: ...


@dataclass(frozen=True)
class PackageRow:
    id: str
    status: str
    project_id: str


@dataclass(frozen=True)
class PreferenceRow:
    budget_min_fils: Optional[int]
    budget_max_fils: Optional[int]
    style_preferences: List[str]


@dataclass(frozen=True)
class PackageItemRow:
    product_id: str
    quantity: int
    unit_price_fils: int


class PackageRepo:
    def __init__(self, *, conn: Connection) -> None:
        self._conn = conn

    def fetch_package(self, *, package_id: str) -> Optional[PackageRow]:
        sql = 'select "id", "status", "projectId" from "Package" where "id" = %s'
        cur = self._conn.cursor()
        try:
            cur.execute(sql, (package_id,))
            row = cur.fetchone()
        finally:
            cur.close()
        if row is None:
            return None
        return PackageRow(id=str(row[0]), status=str(row[1]), project_id=str(row[2]))

    def mark_expired(self, *, package_id: str) -> int:
        sql = 'update "Package" set "status" = %s where "id" = %s'
        cur = self._conn.cursor()
        try:
            cur.execute(sql, ("EXPIRED", package_id))
            affected = cur.rowcount
        finally:
            cur.close()
        self._conn.commit()
        return affected

    def insert_items(self, *, package_id: str, items: Sequence[PackageItemRow]) -> int:
        if not items:
            return 0
        sql = (
            'insert into "PackageItem" ("id", "packageId", "productId", "quantity", "unitPriceFils") '
            "values (%s, %s, %s, %s, %s)"
        )
        params = [
            (str(uuid.uuid4()), package_id, item.product_id, item.quantity, item.unit_price_fils)
            for item in items
        ]
        cur = self._conn.cursor()
        try:
            cur.executemany(sql, params)
            affected = cur.rowcount
        finally:
            cur.close()
        return affected

    def mark_ready(
        self,
        *,
        package_id: str,
        total_price_fils: int,
        style_tag: Optional[str],
        ai_model_version: str,
        generated_at: datetime,
    ) -> int:
        sql = (
            'update "Package" set "status" = %s, "totalPriceFils" = %s, "styleTag" = %s, '
            '"aiModelVersion" = %s, "generatedAt" = %s where "id" = %s'
        )
        cur = self._conn.cursor()
        try:
            cur.execute(
                sql,
                ("READY", total_price_fils, style_tag, ai_model_version, generated_at, package_id),
            )
            affected = cur.rowcount
        finally:
            cur.close()
        return affected


class PreferenceRepo:
    def __init__(self, *, conn: Connection) -> None:
        self._conn = conn

    def fetch_preference(self, *, user_id: str, project_id: str) -> Optional[PreferenceRow]:
        sql = (
            'select "budgetMinFils", "budgetMaxFils", "stylePreferences" '
            'from "UserPreference" where "userId" = %s and "projectId" = %s limit 1'
        )
        cur = self._conn.cursor()
        try:
            cur.execute(sql, (user_id, project_id))
            row = cur.fetchone()
        finally:
            cur.close()
        if row is None:
            return None
        return PreferenceRow(
            budget_min_fils=row[0],
            budget_max_fils=row[1],
            style_preferences=_string_list(row[2]) or [],
        )


class ProductRepo:
    def __init__(self, *, conn: Connection) -> None:
        self._conn = conn

    def fetch_candidates(self, *, budget_max_fils: int, limit: int) -> List[AvailableProduct]:
        """Active, in-stock products within budget, cheapest first."""
        sql = (
            'select "id", "name", "category", "priceFils", "materials", "colors", "stockQuantity" '
            'from "RetailerProduct" '
            "where \"validationStatus\" = 'ACTIVE' and \"stockQuantity\" > 0 and \"priceFils\" <= %s "
            'order by "priceFils" asc '
            "limit %s"
        )
        cur = self._conn.cursor()
        try:
            cur.execute(sql, (budget_max_fils, limit))
            rows = cur.fetchall()
        finally:
            cur.close()
        return [
            AvailableProduct(
                id=str(row[0]),
                name=str(row[1]),
                category=str(row[2]),
                price_fils=int(row[3]),
                materials=_string_list(row[4]),
                colors=_string_list(row[5]),
                stock_quantity=row[6],
            )
            for row in rows
        ]


class NotificationRepo:
    def __init__(self, *, conn: Connection) -> None:
        self._conn = conn

    def create(self, *, user_id: str, type_: str, title: str, body: str) -> int:
        sql = (
            'insert into "Notification" ("id", "userId", "type", "title", "body") '
            "values (%s, %s, %s, %s, %s)"
        )
        cur = self._conn.cursor()
        try:
            cur.execute(sql, (str(uuid.uuid4()), user_id, type_, title, body))
            affected = cur.rowcount
        finally:
            cur.close()
        return affected


def _string_list(value: Any) -> Optional[List[str]]:
    # json columns come back as python lists; anything else is treated as absent
    if isinstance(value, list):
        return [str(v) for v in value]
    return None
