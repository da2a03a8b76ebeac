"""Application service: Quote Sale use case.

Resolves the cart and the customer, reads the current settings and asks
the pricing service for a preview. Nothing is written: a quote that is
never committed leaves no trace, and jar credits are not touched.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from velas.application.dto import CartItemSpec
from velas.application.get_settings import GetSettingsHandler
from velas.domain.exceptions import EntityNotFoundError
from velas.domain.model.value_objects import parse_percentage
from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.repository.product_repository import ProductRepository
from velas.domain.repository.settings_repository import SettingsRepository
from velas.domain.service.sale_pricing_service import (
    CartLine,
    PricingResult,
    SalePricingService,
)


class QuoteSaleHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        settings_repo: SettingsRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._settings_repo = settings_repo

    def handle(
        self,
        customer_id: str,
        item_specs: list[CartItemSpec],
        today: date | None = None,
        additional_discount_percent: str | Decimal = "0",
    ) -> PricingResult:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        cart: list[CartLine] = []
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")
            cart.append(CartLine(product=product, quantity=spec.quantity))

        # Fresh read on every quote so a settings change applies immediately.
        settings = GetSettingsHandler(self._settings_repo).handle()

        return SalePricingService().compute(
            cart=cart,
            customer=customer,
            settings=settings,
            today=today or date.today(),
            additional_discount_percent=parse_percentage(
                additional_discount_percent, "Additional discount"
            ),
        )
