"""Stripe payment intent creation."""

import logging

import stripe

from backend.core import config
from backend.core.exceptions import PaymentGatewayError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


def create_payment_intent(price: float) -> str:
    """Create a card-only payment intent for ``price`` and return its client secret."""
    try:
        intent = stripe.PaymentIntent.create(
            amount=to_minor_units(price),
            currency=config.PAYMENT_CURRENCY,
            payment_method_types=["card"],
            api_key=config.STRIPE_SECRET_KEY,
        )
    except stripe.StripeError as exc:
        logger.warning('Payment intent creation failed: %s', exc)
        raise PaymentGatewayError(str(exc) or None) from exc
    return intent.client_secret
