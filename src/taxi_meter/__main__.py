"""
Taxi meter demo entry point.

Runs the sample ride through a session, processes the payment and logs
the session summary.
"""

import argparse
import logging
import sys
from datetime import UTC, datetime

from .core.exceptions import ConfigurationError
from .meter_logging import log_session_context, setup_logging
from .payment import PaymentMethod
from .runner import log_summary, process_events
from .sample import sample_events, sample_session
from .settings import get_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the sample taxi ride through the meter")
    parser.add_argument(
        "--payment-method",
        choices=[m.value for m in PaymentMethod],
        default=PaymentMethod.CARD.value,
        help="Payment method used after the ride (default: card)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override LOG_LEVEL",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = get_settings()
        fare_config = settings.fare.to_fare_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message} {e.details}", file=sys.stderr)
        return 1

    overrides: dict[str, str] = {}
    if args.log_level:
        overrides["level"] = args.log_level
    if args.json_logs:
        overrides["format"] = "json"
    setup_logging(settings.logging.model_copy(update=overrides))

    session = sample_session(fare_config)
    process_result = process_events(session, sample_events(datetime.now(UTC)))

    payment_result = session.process_payment(PaymentMethod(args.payment_method), datetime.now(UTC))
    with log_session_context(session):
        for message in payment_result.log_messages:
            logger.info(message, extra={"new_total_fare": payment_result.new_total_fare})
        if not payment_result.success:
            logger.warning("Payment error: %s", payment_result.error)

    logger.info("Final fare: %d", process_result.final_fare)
    log_summary(session.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
