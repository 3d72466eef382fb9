import logging


class DefaultSessionFilter(logging.Filter):
    """Adds a placeholder session_id to records logged outside a ride."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = "-"
        return True
