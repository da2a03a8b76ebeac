"""Application service: Adjust Jar Credits use case (manual edit)."""

from __future__ import annotations

from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.service.customer_credit_ledger import CustomerCreditLedger


class AdjustJarCreditsHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._ledger = CustomerCreditLedger(customer_repo)

    def handle(self, customer_id: str, delta: int) -> int:
        """Add *delta* jars (negative to remove); returns the new balance."""
        return self._ledger.adjust_credits(customer_id, delta)

    def set_balance(self, customer_id: str, credits: int) -> int:
        return self._ledger.set_credits(customer_id, credits)
