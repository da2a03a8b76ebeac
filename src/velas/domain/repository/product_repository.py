"""Abstract repository for the product catalog.

Besides lookups by id and name, the catalog answers "which products are
tagged with this category", which is what category price propagation and
its preview need. Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from velas.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_category(self, category_name: str) -> list[Product]:
        """Return products whose category matches case-insensitively."""

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
