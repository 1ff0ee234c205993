"""JSON logging for the gateway, tagged with the order being serialized."""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from omnikassa.common.config import settings


order_ctx: ContextVar[dict[str, object]] = ContextVar("order", default={})

logger = logging.getLogger("omnikassa")


@contextmanager
def order_context(merchant_order_id: str, currency: str, amount: int):
    """Attach order id, currency and amount to records logged inside the block."""

    token = order_ctx.set({"merchant_order_id": merchant_order_id, "currency": currency, "amount": amount})
    try:
        yield
    finally:
        order_ctx.reset(token)


class OrderContextFilter(logging.Filter):
    """Copy the current order context onto each record; unset fields stay empty."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = order_ctx.get()
        record.service_name = settings.service_name
        record.merchant_order_id = context.get("merchant_order_id", "")
        record.currency = context.get("currency", "")
        record.amount = context.get("amount", "")
        return True


def configure_logging(level: str | None = None) -> logging.Handler:
    """Send `omnikassa` records as JSON to stdout.

    Only the library logger is touched; the host application's root logger
    is left alone.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(OrderContextFilter())
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(service_name)s "
            "%(merchant_order_id)s %(currency)s %(amount)s %(message)s"
        )
    )
    logger.handlers = [handler]
    logger.setLevel((level or settings.log_level).upper())
    logger.propagate = False
    return handler
