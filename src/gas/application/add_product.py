"""Application service: Add Product use case.

New products get their identity right before they are first stored
(the "creating" step). Updates never go through here, so an identity
is never recomputed.
"""

from __future__ import annotations

import logging

from gas.application.dto import ProductSpec
from gas.domain.exceptions import DuplicateEntityError
from gas.domain.model.product import Product, Variant
from gas.domain.model.value_objects import Money, to_decimal
from gas.domain.repository.product_repository import ProductRepository
from gas.domain.service.slug_identity import SlugIdentityGenerator

logger = logging.getLogger(__name__)

# Attempts to store a product when concurrent creations keep taking
# the generated identity first
MAX_IDENTITY_ATTEMPTS = 5


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._identities = SlugIdentityGenerator(product_repo)

    def handle(self, spec: ProductSpec) -> Product:
        """Add a new product to a supplier's catalog."""
        product = Product.create(
            name=spec.name,
            supplier=spec.supplier,
            price=Money.of(spec.price),
            discount=spec.discount,
            measure=spec.measure,
            category=spec.category,
            max_available=to_decimal(spec.max_available, "max_available"),
            portion_quantity=to_decimal(spec.portion_quantity, "portion_quantity"),
            min_quantity=to_decimal(spec.min_quantity, "min_quantity"),
            max_quantity=to_decimal(spec.max_quantity, "max_quantity"),
            multiple=to_decimal(spec.multiple, "multiple"),
            transport=Money.of(spec.transport) if spec.transport else None,
            variable=spec.variable,
            variants=tuple(
                Variant(id=str(i), name=name, values=tuple(values))
                for i, (name, values) in enumerate(spec.variants.items(), start=1)
            ),
        )
        return self._store_new(product)

    def _store_new(self, product: Product) -> Product:
        for attempt in range(1, MAX_IDENTITY_ATTEMPTS + 1):
            created = self._on_creating(product)
            try:
                self._product_repo.add(created)
            except DuplicateEntityError:
                logger.warning(
                    "Identity %s was taken concurrently (attempt %d of %d)",
                    created.id, attempt, MAX_IDENTITY_ATTEMPTS,
                )
                continue
            logger.info("Created product %s", created.id)
            return created

        raise DuplicateEntityError(
            f"Could not find a free identity for product '{product.name}' "
            f"after {MAX_IDENTITY_ATTEMPTS} attempts"
        )

    def _on_creating(self, product: Product) -> Product:
        slug_id = self._identities.get_slug_id(product.supplier.id, product.name)
        return product.with_id(slug_id)
