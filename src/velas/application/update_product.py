"""Application service: Update Product Price use case."""

from __future__ import annotations

from velas.domain.exceptions import EntityNotFoundError
from velas.domain.model.product import MANUAL_ADJUSTMENT_REASON
from velas.domain.model.value_objects import Money
from velas.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str,
        reason: str = MANUAL_ADJUSTMENT_REASON,
    ) -> bool:
        """Update a product's price; returns False when the price is unchanged.

        This does NOT affect any existing sales — they captured a
        price snapshot at sale time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        price = Money.of(new_price)
        if price == product.price:
            return False
        product.change_price(price, reason=reason)
        self._product_repo.save(product)
        return True
