"""Payment authorization seam.

The booking flow only talks to ``PaymentGateway.authorize``; the simulated
gateway stands in for a real processor.
"""
import asyncio
import uuid
from typing import Optional

from hotel.core.config import PAYMENT_DELAY_SECONDS
from hotel.core.errors import PaymentError
from hotel.core.logging_config import get_logger
from hotel.schemas.payment import PaymentOutcome

logger = get_logger()


class PaymentGateway:
    async def authorize(self, amount: float) -> PaymentOutcome:
        raise NotImplementedError


class SimulatedPaymentGateway(PaymentGateway):
    """Waits ``delay`` seconds, then approves with a synthetic ``pay_`` id.

    ``decline_over`` declines amounts above it; ``decline_all`` declines
    everything; ``fail`` raises PaymentError as if the processor was down.
    """

    def __init__(
        self,
        delay: float = PAYMENT_DELAY_SECONDS,
        decline_over: Optional[float] = None,
        decline_all: bool = False,
        fail: bool = False,
    ):
        self.delay = delay
        self.decline_over = decline_over
        self.decline_all = decline_all
        self.fail = fail

    async def authorize(self, amount: float) -> PaymentOutcome:
        if self.delay:
            await asyncio.sleep(self.delay)

        if self.fail:
            raise PaymentError("Payment processor unavailable")

        transaction_id = f"pay_{uuid.uuid4().hex[:14]}"

        if self.decline_all or (self.decline_over is not None and amount > self.decline_over):
            logger.bind(log_type="payment").warning(f"Payment declined | amount={amount} | txn={transaction_id}")
            return PaymentOutcome(approved=False, transaction_id=transaction_id, reason="declined")

        logger.bind(log_type="payment").info(f"Payment authorized | amount={amount} | txn={transaction_id}")
        return PaymentOutcome(approved=True, transaction_id=transaction_id)
