"""Payment processing through an injected PaymentSource."""
from decimal import Decimal
from typing import List, Union

from solidkit.domain.base.consumer import Consumer
from solidkit.domain.payments.payment_method import PaymentSource, to_amount


class PaymentProcessor(Consumer):
    """Validates and collects a payment from whichever source it was given."""

    requires = PaymentSource

    def __init__(self, source: PaymentSource):
        super().__init__(source)

    def process(self, amount: Union[Decimal, int, float, str]) -> List[str]:
        """
        Process a payment.

        Collection only happens after validation succeeded.

        Args:
            amount: Amount to pay

        Returns:
            Effects of validation and collection, in order

        Raises:
            OperationFailedError: If validation or collection fails
        """
        amount = to_amount(amount)
        return self._run([
            ("validate", (amount,)),
            ("collect_payment", (amount,)),
        ])
