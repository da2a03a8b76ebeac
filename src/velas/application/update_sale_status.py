"""Application service: Update Sale Status use case."""

from __future__ import annotations

from velas.application.cancel_sale import CancelSaleHandler
from velas.domain.exceptions import EntityNotFoundError, ValidationError
from velas.domain.model.sale import PaymentMethod, SaleStatus
from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.repository.sale_repository import SaleRepository


def parse_status(raw: str) -> SaleStatus:
    for status in SaleStatus:
        if raw.strip().lower() in (status.value.lower(), status.name.lower()):
            return status
    raise ValidationError(f"Unknown sale status '{raw}'")


def parse_payment_method(raw: str | None) -> PaymentMethod | None:
    if raw is None:
        return None
    for method in PaymentMethod:
        if raw.strip().lower() == method.value.lower():
            return method
    raise ValidationError(f"Unknown payment method '{raw}'")


class UpdateSaleStatusHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._sale_repo = sale_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        sale_id: int,
        status: str,
        payment_method: str | None = None,
    ) -> None:
        """Change a sale's status.

        Moving to Cancelled refunds redeemed jar credits; moving to Paid
        requires a payment method.
        """
        new_status = parse_status(status)
        method = parse_payment_method(payment_method)

        if new_status == SaleStatus.CANCELLED:
            CancelSaleHandler(self._sale_repo, self._customer_repo).handle(sale_id)
            return

        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")
        sale.change_status(new_status, method)
        self._sale_repo.save(sale)
