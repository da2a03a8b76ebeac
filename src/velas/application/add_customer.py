"""Application service: Add Customer use case.

The customer is saved with an empty balance first; any initial jar
credits are then booked through the credit ledger like every other
credit change.
"""

from __future__ import annotations

from datetime import date

from velas.domain.exceptions import ValidationError
from velas.domain.model.customer import Customer
from velas.domain.repository.customer_repository import CustomerRepository
from velas.domain.service.customer_credit_ledger import CustomerCreditLedger


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        birth_date: date | None = None,
        email: str = "",
        phone: str = "",
        initial_jar_credits: int = 0,
    ) -> Customer:
        if initial_jar_credits < 0:
            raise ValidationError("Initial jar credits cannot be negative")

        customer = Customer(
            id=self._customer_repo.next_id(),
            name=name.strip() if name else "",
            birth_date=birth_date,
            email=email.strip(),
            phone=phone.strip(),
        )
        self._customer_repo.save(customer)

        if initial_jar_credits:
            ledger = CustomerCreditLedger(self._customer_repo)
            customer.jar_credits = ledger.adjust_credits(customer.id, initial_jar_credits)
        return customer
