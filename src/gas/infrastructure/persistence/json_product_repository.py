"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from gas.domain.exceptions import DuplicateEntityError, ValidationError
from gas.domain.model.product import OPTIONAL_QUANTITY_FIELDS, Product, Variant
from gas.domain.model.value_objects import Category, Measure, Money, Supplier
from gas.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def add(self, product: Product) -> None:
        if product.id is None:
            raise ValidationError(f"Product '{product.name}' has no identity")
        products = self._load()
        if product.id in products:
            raise DuplicateEntityError(f"Product '{product.id}' already exists")
        products[product.id] = product
        self._persist(products)

    def save(self, product: Product) -> None:
        products = self._load()
        if product.id not in products:
            raise ValidationError(f"Product '{product.name}' must be added before saving")
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _to_raw(p: Product) -> dict:
        raw = {
            "id": p.id,
            "name": p.name,
            "supplier": {"id": p.supplier.id, "name": p.supplier.name},
            "price": str(p.price.amount),
            "currency": p.price.currency,
            "discount": None if p.discount is None else str(p.discount),
            "measure": None if p.measure is None else {"id": p.measure.id, "name": p.measure.name},
            "category": None if p.category is None else {"id": p.category.id, "name": p.category.name},
            "transport": None if p.transport is None else str(p.transport.amount),
            "variable": p.variable,
            "variants": [
                {"id": v.id, "name": v.name, "values": list(v.values)} for v in p.variants
            ],
        }
        for name in OPTIONAL_QUANTITY_FIELDS:
            raw[name] = str(getattr(p, name))
        return raw

    @staticmethod
    def _to_domain(item: dict) -> Product:
        currency = item.get("currency", "EUR")
        measure = item.get("measure")
        category = item.get("category")
        return Product(
            id=item["id"],
            name=item["name"],
            supplier=Supplier(**item["supplier"]),
            price=Money(Decimal(item["price"]), currency),
            discount=None if item.get("discount") is None else Decimal(item["discount"]),
            measure=None if measure is None else Measure(**measure),
            category=None if category is None else Category(**category),
            transport=(
                None if item.get("transport") is None
                else Money(Decimal(item["transport"]), currency)
            ),
            variable=item.get("variable", False),
            variants=tuple(
                Variant(id=v["id"], name=v["name"], values=tuple(v["values"]))
                for v in item.get("variants", [])
            ),
            **{name: Decimal(item.get(name, "0")) for name in OPTIONAL_QUANTITY_FIELDS},
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
