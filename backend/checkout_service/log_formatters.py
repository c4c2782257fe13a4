"""
JSON log rendering for the stdlib logging configuration.

Records are rendered by structlog so that every ``extra`` passed to a
stdlib logger ends up as a top-level key of a single JSON line.
"""
import structlog


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Build the formatter referenced by ``LOGGING['formatters']['json']``."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso', utc=True),
            structlog.stdlib.ExtraAdder(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
    )
