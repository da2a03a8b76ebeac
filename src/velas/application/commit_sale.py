"""Application service: Commit Sale use case.

Persists a priced sale. When the sale is not cancelled and redeemed jar
credits, the credits are debited through the ledger *before* the sale is
saved; if saving fails the debit is refunded. A sale recorded as
cancelled redeems nothing and is priced without the jar discount.

A NegativeBalanceError here means the balance changed between quote and
commit (or a logic bug). It is logged and surfaced as a retry-able
ConcurrencyConflictError; nothing is persisted.
"""

from __future__ import annotations

import logging

from velas.application.dto import SaleDTO
from velas.domain.exceptions import ConcurrencyConflictError, NegativeBalanceError
from velas.domain.model.sale import PaymentMethod, Sale, SaleStatus
from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.repository.sale_repository import SaleRepository
from velas.domain.service.customer_credit_ledger import CustomerCreditLedger
from velas.domain.service.sale_pricing_service import PricingResult

logger = logging.getLogger(__name__)


class CommitSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._sale_repo = sale_repo
        self._ledger = CustomerCreditLedger(customer_repo)

    def handle(
        self,
        pricing: PricingResult,
        status: SaleStatus = SaleStatus.PENDING,
        payment_method: PaymentMethod | None = None,
        notes: str = "",
    ) -> SaleDTO:
        if status == SaleStatus.CANCELLED:
            # Nothing is debited, so the record must not show a jar discount.
            pricing = pricing.without_jar_credits()
        redeem = pricing.jar_credits_used

        sale = Sale.create(
            customer_id=pricing.customer_id,
            customer_name=pricing.customer_name,
            items=pricing.items,
            subtotal=pricing.subtotal,
            discount_amount=pricing.discount_amount,
            discount_percentage=pricing.discount_percentage,
            total_amount=pricing.total_amount,
            jar_credits_used=redeem,
            status=status,
            payment_method=payment_method,
            notes=self._compose_notes(notes, pricing),
        )

        if redeem:
            self._debit(pricing.customer_id, redeem)
        try:
            self._sale_repo.save(sale)
        except Exception:
            if redeem:
                logger.error(
                    "Saving sale for customer %s failed; refunding %d jar credit(s)",
                    pricing.customer_id,
                    redeem,
                )
                self._ledger.adjust_credits(pricing.customer_id, redeem)
            raise

        logger.info(
            "Sale #%s committed for %s: total %s (%d jar credit(s) redeemed)",
            sale.id,
            sale.customer_name,
            sale.total_amount,
            redeem,
        )
        return SaleDTO.from_sale(sale)

    def _debit(self, customer_id: str, credits: int) -> None:
        try:
            self._ledger.adjust_credits(customer_id, -credits)
        except NegativeBalanceError as exc:
            logger.error(
                "Jar credit invariant violated for customer %s: %s", customer_id, exc
            )
            raise ConcurrencyConflictError(
                "The customer's jar credits changed since the quote; "
                "quote the sale again and retry"
            ) from exc

    @staticmethod
    def _compose_notes(notes: str, pricing: PricingResult) -> str:
        summary = pricing.notes_summary()
        notes = notes.strip()
        if notes and summary:
            return f"{notes}\n{summary}"
        return notes or summary
