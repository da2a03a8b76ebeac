"""Domain service: Customer Credit Ledger.

Every change to a customer's jar credits goes through ``adjust_credits``:
manual edits, redemption on a sale, refunds on cancellation and the
initial balance of a new customer.

The read-modify-write is made atomic with a compare-and-swap on the prior
balance. A lost race is retried a bounded number of times, re-reading the
balance each time, before giving up with ``ConcurrencyConflictError``.
"""

from __future__ import annotations

import logging

from velas.domain.exceptions import (
    ConcurrencyConflictError,
    EntityNotFoundError,
    ValidationError,
)
from velas.domain.model.customer import Customer
from velas.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)

MAX_CAS_ATTEMPTS = 3


class CustomerCreditLedger:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def get_credits(self, customer_id: str) -> int:
        return self._load(customer_id).jar_credits

    def adjust_credits(self, customer_id: str, delta: int) -> int:
        """Add *delta* (possibly negative) to the balance and return the new one.

        Raises NegativeBalanceError if the balance would drop below zero;
        nothing is written in that case.
        """
        for attempt in range(1, MAX_CAS_ATTEMPTS + 1):
            customer = self._load(customer_id)
            new_balance = customer.credits_after(delta)
            if delta == 0:
                return new_balance
            if self._customer_repo.compare_and_set_credits(
                customer_id, customer.jar_credits, new_balance
            ):
                logger.info(
                    "Jar credits for customer %s: %d -> %d (%+d)",
                    customer_id,
                    customer.jar_credits,
                    new_balance,
                    delta,
                )
                return new_balance
            logger.warning(
                "Jar credit update for customer %s lost a race (attempt %d/%d)",
                customer_id,
                attempt,
                MAX_CAS_ATTEMPTS,
            )
        raise ConcurrencyConflictError(
            f"Jar credits of customer {customer_id} kept changing; try again"
        )

    def set_credits(self, customer_id: str, credits: int) -> int:
        """Manual edit: express the new balance as an adjustment."""
        if credits < 0:
            raise ValidationError("Jar credits cannot be negative")
        current = self.get_credits(customer_id)
        return self.adjust_credits(customer_id, credits - current)

    def _load(self, customer_id: str) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")
        return customer
