"""Unit tests for the CustomerCreditLedger domain service."""

import pytest

from velas.domain.exceptions import (
    ConcurrencyConflictError,
    EntityNotFoundError,
    NegativeBalanceError,
    ValidationError,
)
from velas.domain.model.customer import Customer
from velas.domain.service.customer_credit_ledger import CustomerCreditLedger
from tests.fakes import FakeCustomerRepository, RacingCustomerRepository


def _ledger(credits: int = 8):
    repo = FakeCustomerRepository([Customer(id="1", name="Ana", jar_credits=credits)])
    return CustomerCreditLedger(repo), repo


class TestAdjustCredits:

    def test_debit(self):
        ledger, repo = _ledger(8)
        assert ledger.adjust_credits("1", -2) == 6
        assert repo.credits_of("1") == 6

    def test_credit(self):
        ledger, repo = _ledger(0)
        assert ledger.adjust_credits("1", 3) == 3
        assert ledger.get_credits("1") == 3

    def test_debit_to_exactly_zero(self):
        ledger, repo = _ledger(8)
        assert ledger.adjust_credits("1", -8) == 0

    def test_negative_result_rejected_and_state_unchanged(self):
        ledger, repo = _ledger(2)
        with pytest.raises(NegativeBalanceError):
            ledger.adjust_credits("1", -3)
        assert repo.credits_of("1") == 2

    def test_unknown_customer(self):
        ledger, _ = _ledger()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ledger.adjust_credits("99", 1)

    def test_zero_delta_writes_nothing(self):
        ledger, repo = _ledger(4)
        assert ledger.adjust_credits("1", 0) == 4
        assert repo.cas_attempts == 0


class TestCompareAndSwap:

    def test_retries_after_lost_race(self):
        repo = RacingCustomerRepository(
            [Customer(id="1", name="Ana", jar_credits=5)], races=1
        )
        ledger = CustomerCreditLedger(repo)

        # The concurrent writer added one jar; our debit applies on top of it.
        assert ledger.adjust_credits("1", -2) == 4
        assert repo.credits_of("1") == 4
        assert repo.cas_attempts == 2

    def test_gives_up_after_bounded_attempts(self):
        repo = RacingCustomerRepository(
            [Customer(id="1", name="Ana", jar_credits=5)], races=10
        )
        ledger = CustomerCreditLedger(repo)

        with pytest.raises(ConcurrencyConflictError, match="try again"):
            ledger.adjust_credits("1", -1)
        assert repo.cas_attempts == 3

    def test_race_that_empties_balance_surfaces_negative_balance(self):
        repo = RacingCustomerRepository(
            [Customer(id="1", name="Ana", jar_credits=2)], races=1, bump=-2
        )
        ledger = CustomerCreditLedger(repo)

        with pytest.raises(NegativeBalanceError):
            ledger.adjust_credits("1", -2)
        assert repo.credits_of("1") == 0


class TestSetCredits:

    def test_set_expressed_as_adjustment(self):
        ledger, repo = _ledger(8)
        assert ledger.set_credits("1", 3) == 3
        assert repo.credits_of("1") == 3

    def test_negative_rejected(self):
        ledger, _ = _ledger(8)
        with pytest.raises(ValidationError, match="cannot be negative"):
            ledger.set_credits("1", -1)
