"""Application service: Cancel Sale use case.

Cancelling a committed sale refunds exactly the jar credits it redeemed.
"""

from __future__ import annotations

import logging

from velas.domain.exceptions import EntityNotFoundError
from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.repository.sale_repository import SaleRepository
from velas.domain.service.customer_credit_ledger import CustomerCreditLedger

logger = logging.getLogger(__name__)


class CancelSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._sale_repo = sale_repo
        self._customer_repo = customer_repo

    def handle(self, sale_id: int) -> int:
        """Cancel the sale; returns the number of credits refunded.

        The refund is taken back if the cancelled sale cannot be saved, so
        a retried cancellation never refunds the same credits twice.
        """
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")

        # Validates the transition before any credit moves.
        sale.cancel()

        ledger = CustomerCreditLedger(self._customer_repo)
        refunded = sale.jar_credits_used
        if refunded:
            ledger.adjust_credits(sale.customer_id, refunded)
        try:
            self._sale_repo.save(sale)
        except Exception:
            if refunded:
                logger.error(
                    "Saving cancelled sale #%s failed; taking back %d refunded jar credit(s)",
                    sale_id,
                    refunded,
                )
                ledger.adjust_credits(sale.customer_id, -refunded)
            raise

        logger.info("Sale #%s cancelled; %d jar credit(s) refunded", sale_id, refunded)
        return refunded
