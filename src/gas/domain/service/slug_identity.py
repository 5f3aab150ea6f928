"""Domain service: human-readable product identities.

Products are identified by ``<supplier_id>::<slug of the name>``, with a
``_<n>`` suffix when the same supplier already has a product with the
same slug. The lookup here is only a pre-check: two processes can pick
the same identity at the same time, and the repository's ``add()``
rejects the second one with DuplicateEntityError.
"""

from __future__ import annotations

import logging

from django.utils.text import slugify

from gas.domain.exceptions import ValidationError
from gas.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

IDENTITY_SEPARATOR = "::"
SUFFIX_SEPARATOR = "_"


def slugify_name(name: str) -> str:
    """Lower-case, ASCII-only, hyphenated form of a product name.

    Underscores become hyphens so a slug can never end in something
    that looks like a collision suffix.
    """
    return slugify(name.replace(SUFFIX_SEPARATOR, " "))


def base_identity(supplier_id: str, name: str) -> str:
    return f"{supplier_id}{IDENTITY_SEPARATOR}{slugify_name(name)}"


class SlugIdentityGenerator:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get_slug_id(self, supplier_id: str, name: str) -> str:
        """Return the first identity for this supplier and name not yet stored.

        Names with nothing left after slugifying (only punctuation, or
        only non-Latin letters) are rejected.
        """
        if not slugify_name(name):
            raise ValidationError(
                f"Product name '{name}' has no characters usable in an identity"
            )
        base = base_identity(supplier_id, name)
        candidate = base
        index = 1

        while self._product_repo.get_by_id(candidate) is not None:
            logger.debug("Product identity %s taken, trying suffix %d", candidate, index)
            candidate = f"{base}{SUFFIX_SEPARATOR}{index}"
            index += 1

        return candidate
