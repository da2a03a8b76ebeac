"""Application service: Add Product use case."""

from __future__ import annotations

from velas.domain.exceptions import ValidationError
from velas.domain.model.product import Product
from velas.domain.model.value_objects import Money
from velas.domain.repository.category_price_repository import CategoryPriceRepository
from velas.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_price_repo: CategoryPriceRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_price_repo = category_price_repo

    def handle(
        self,
        name: str,
        price: str | None = None,
        category: str | None = None,
        quantity: int = 0,
    ) -> Product:
        """Add a new product to the catalog.

        Without an explicit price the product takes its category's
        standard price.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        category = category.strip() if category and category.strip() else None
        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=self._resolve_price(price, category),
            category=category,
            quantity=quantity,
        )
        self._product_repo.save(product)
        return product

    def _resolve_price(self, price: str | None, category: str | None) -> Money:
        if price is not None:
            return Money.of(price)
        if category is not None:
            record = self._category_price_repo.find_by_name(category)
            if record is not None:
                return record.price
        raise ValidationError("Price is required when the category has no standard price")
