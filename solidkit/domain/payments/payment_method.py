"""Payment contracts - Liskov Substitution lesson.

PaymentMethod is the problem contract: it asks every method to push money
through a payment gateway, which rewards points never do, so RewardsMethod
can only satisfy it with a method that does nothing. Callers can no longer
treat every PaymentMethod alike.

PaymentSource is the solution contract: validating and collecting a payment
mean something for cards and points alike, and each variant collects in
its own way.
"""
from abc import abstractmethod
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Any

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import OperationFailedError

CENTS = Decimal("0.01")


def to_amount(value: Any) -> Decimal:
    """Convert a value to a currency amount quantised to cents.

    Raises:
        OperationFailedError: If the value is not a finite number
    """
    try:
        amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except (ArithmeticError, ValueError) as e:
        raise OperationFailedError("validate", f"invalid amount {value!r}") from e
    if not amount.is_finite():
        raise OperationFailedError("validate", f"invalid amount {value!r}")
    return amount


class PaymentMethod(Capability):
    """Problem contract: one operation is meaningless for some methods."""

    @abstractmethod
    def validate(self, amount: Decimal) -> str:
        pass

    @abstractmethod
    def send_to_payment_gateway(self, amount: Decimal) -> str:
        pass


class CreditCardMethod(PaymentMethod):
    def validate(self, amount: Decimal) -> str:
        if to_amount(amount) <= 0:
            raise OperationFailedError("validate", "amount must be positive")
        return f"card:validated {to_amount(amount)}"

    def send_to_payment_gateway(self, amount: Decimal) -> str:
        return f"card:sent {to_amount(amount)} to gateway"


class RewardsMethod(PaymentMethod):
    def validate(self, amount: Decimal) -> str:
        if to_amount(amount) <= 0:
            raise OperationFailedError("validate", "amount must be positive")
        return f"rewards:validated {to_amount(amount)}"

    def send_to_payment_gateway(self, amount: Decimal) -> str:
        pass


class PaymentSource(Capability):
    """Port for anything that can pay for an order."""

    @abstractmethod
    def validate(self, amount: Decimal) -> str:
        """Check that the source can cover the amount.

        Raises:
            OperationFailedError: If the payment cannot be made
        """

    @abstractmethod
    def collect_payment(self, amount: Decimal) -> str:
        """Collect the amount from the source.

        Returns:
            Description of the simulated collection
        """


class CreditCardPayment(PaymentSource):
    """Pays by charging a credit card through the card gateway."""

    def __init__(self, card_number: str, limit: Decimal = Decimal("1000.00")):
        digits = "".join(ch for ch in str(card_number) if ch.isdigit())
        if len(digits) < 4:
            raise ValueError("card_number must contain at least four digits")
        self.last4 = digits[-4:]
        self.limit = to_amount(limit)

    def validate(self, amount: Decimal) -> str:
        amount = to_amount(amount)
        if amount <= 0:
            raise OperationFailedError("validate", "amount must be positive")
        if amount > self.limit:
            raise OperationFailedError("validate", f"{amount} exceeds card limit {self.limit}")
        return f"card:authorised {amount} on ****{self.last4}"

    def collect_payment(self, amount: Decimal) -> str:
        return f"card:charged {to_amount(amount)} to ****{self.last4}"


class RewardsPayment(PaymentSource):
    """Pays by redeeming loyalty points."""

    def __init__(self, points: int, points_per_unit: int = 100):
        if points < 0:
            raise ValueError("points must not be negative")
        if points_per_unit <= 0:
            raise ValueError("points_per_unit must be positive")
        self.points = points
        self.points_per_unit = points_per_unit

    def points_for(self, amount: Decimal) -> int:
        """Points needed to cover an amount, rounded up to a whole point."""
        needed = to_amount(amount) * self.points_per_unit
        return int(needed.to_integral_value(rounding=ROUND_CEILING))

    def validate(self, amount: Decimal) -> str:
        amount = to_amount(amount)
        if amount <= 0:
            raise OperationFailedError("validate", "amount must be positive")
        needed = self.points_for(amount)
        if needed > self.points:
            raise OperationFailedError(
                "validate", f"{needed} points needed, {self.points} available"
            )
        return f"rewards:reserved {needed} points"

    def collect_payment(self, amount: Decimal) -> str:
        return f"rewards:redeemed {self.points_for(amount)} points"
