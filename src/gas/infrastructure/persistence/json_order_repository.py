"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from gas.domain.model.order import Order, OrderProductPivot
from gas.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "supplier_id": order.supplier_id,
            "discount": None if order.discount is None else str(order.discount),
            "products": [
                {"product_id": product_id, "discount_enabled": pivot.discount_enabled}
                for product_id, pivot in order.products.items()
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            supplier_id=raw["supplier_id"],
            discount=None if raw.get("discount") is None else Decimal(raw["discount"]),
            products={
                p["product_id"]: OrderProductPivot(discount_enabled=p["discount_enabled"])
                for p in raw.get("products", [])
            },
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
