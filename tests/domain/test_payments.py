"""Tests for the payments domain."""

from decimal import Decimal

import pytest

from solidkit.domain.base import ContractViolationError, OperationFailedError
from solidkit.domain.payments import (
    CreditCardMethod,
    CreditCardPayment,
    PaymentProcessor,
    PaymentSource,
    RewardsMethod,
    RewardsPayment,
    to_amount,
)


class TestToAmount:
    """Test cases for amount conversion."""

    def test_quantises_to_cents(self):
        """Test that amounts are rounded half up to cents."""
        assert to_amount("10.005") == Decimal("10.01")
        assert to_amount(3) == Decimal("3.00")

    def test_invalid_amount_fails(self):
        """Test that a non-numeric amount is a validate failure."""
        with pytest.raises(OperationFailedError) as exc_info:
            to_amount("ten")

        assert exc_info.value.operation == "validate"

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_amount_fails(self, value):
        """Test that NaN and infinite amounts are validate failures."""
        with pytest.raises(OperationFailedError, match="invalid amount") as exc_info:
            to_amount(value)

        assert exc_info.value.operation == "validate"


class TestPaymentMethod:
    """Test cases for the gateway-shaped payment contract."""

    def test_rewards_gateway_does_nothing(self):
        """Test that only the card method does anything at the gateway."""
        assert CreditCardMethod().send_to_payment_gateway(Decimal("5")) == "card:sent 5.00 to gateway"
        assert RewardsMethod().send_to_payment_gateway(Decimal("5")) is None


class TestCreditCardPayment:
    """Test cases for CreditCardPayment."""

    def test_masks_card_number(self):
        """Test that only the last four digits are kept."""
        card = CreditCardPayment("4111 1111 1111 1234")

        assert card.last4 == "1234"
        assert card.validate(Decimal("25")) == "card:authorised 25.00 on ****1234"
        assert card.collect_payment(Decimal("25")) == "card:charged 25.00 to ****1234"

    def test_over_limit_fails(self):
        """Test that an amount above the card limit fails validation."""
        card = CreditCardPayment("4111111111111111", limit=Decimal("50"))

        with pytest.raises(OperationFailedError, match="exceeds card limit 50.00"):
            card.validate(Decimal("50.01"))

    def test_non_positive_amount_fails(self):
        """Test that a zero amount fails validation."""
        with pytest.raises(OperationFailedError):
            CreditCardPayment("4111111111111111").validate(Decimal("0"))

    def test_short_card_number_rejected(self):
        """Test that a card number needs at least four digits."""
        with pytest.raises(ValueError):
            CreditCardPayment("12")


class TestRewardsPayment:
    """Test cases for RewardsPayment."""

    def test_points_round_up(self):
        """Test that partial points are rounded up."""
        rewards = RewardsPayment(points=1000)

        assert rewards.points_for(Decimal("2.50")) == 250
        assert RewardsPayment(points=10, points_per_unit=3).points_for(Decimal("0.50")) == 2

    def test_reserve_and_redeem(self):
        """Test reserving and redeeming points for an amount."""
        rewards = RewardsPayment(points=5000)

        assert rewards.validate(Decimal("25")) == "rewards:reserved 2500 points"
        assert rewards.collect_payment(Decimal("25")) == "rewards:redeemed 2500 points"

    def test_insufficient_points_fail(self):
        """Test that validation fails when the balance is too low."""
        with pytest.raises(OperationFailedError, match="2500 points needed, 100 available"):
            RewardsPayment(points=100).validate(Decimal("25"))

    @pytest.mark.parametrize("points, per_unit", [(-1, 100), (10, 0)])
    def test_invalid_construction(self, points, per_unit):
        """Test that negative balances and zero rates are rejected."""
        with pytest.raises(ValueError):
            RewardsPayment(points=points, points_per_unit=per_unit)


class TestPaymentProcessor:
    """Test cases for PaymentProcessor."""

    def test_process_with_card(self):
        """Test processing a payment by card."""
        processor = PaymentProcessor(CreditCardPayment("4111111111111111"))

        assert processor.process("25.00") == [
            "card:authorised 25.00 on ****1111",
            "card:charged 25.00 to ****1111",
        ]

    def test_process_with_rewards(self):
        """Test processing a payment with points."""
        processor = PaymentProcessor(RewardsPayment(points=50000))

        assert processor.process("25.00") == [
            "rewards:reserved 2500 points",
            "rewards:redeemed 2500 points",
        ]

    @pytest.mark.parametrize("amount", ["NaN", "Infinity"])
    def test_non_finite_amount_is_operation_failure(self, amount):
        """Test that non-finite amounts fail before reaching the source."""
        with pytest.raises(OperationFailedError, match="invalid amount"):
            PaymentProcessor(CreditCardPayment("4111111111111111")).process(amount)

    def test_failed_validation_skips_collection(self):
        """Test that collection is skipped when validation fails."""
        collected = []

        class TrackingRewards(RewardsPayment):
            def collect_payment(self, amount):
                collected.append(amount)
                return super().collect_payment(amount)

        with pytest.raises(OperationFailedError):
            PaymentProcessor(TrackingRewards(points=1)).process("25.00")

        assert collected == []

    def test_gateway_method_is_not_a_payment_source(self):
        """Test that the gateway-shaped method is refused by the processor."""
        assert not isinstance(RewardsMethod(), PaymentSource)

        with pytest.raises(ContractViolationError):
            PaymentProcessor(RewardsMethod())
