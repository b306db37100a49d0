"""Structlog configuration for regcheck.

Progress events (descriptor fetches, the final summary) go to stdout;
warnings and errors go to stderr, so CI logs keep failures apart from
the per-user "fetching" trail.
"""

import logging
import sys

import structlog

from regcheck.config import CheckerConfig, LogFormat, RegistryPaths


class SplitStreamLogger:
    """Print info/debug lines to stdout and anything louder to stderr."""

    def __init__(self):
        self._out = structlog.PrintLogger(sys.stdout)
        self._err = structlog.PrintLogger(sys.stderr)

    def _stdout(self, message: str) -> None:
        self._out.msg(message)

    def _stderr(self, message: str) -> None:
        self._err.msg(message)

    debug = info = msg = log = _stdout
    warning = warn = error = err = critical = exception = fatal = failure = _stderr


def _split_stream_factory(*args) -> SplitStreamLogger:
    return SplitStreamLogger()


def configure_logging(config: CheckerConfig | None = None) -> None:
    """
    Configure structlog for one checker run.

    Args:
        config: CheckerConfig instance, uses defaults if None
    """
    if config is None:
        config = CheckerConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_split_stream_factory,
        cache_logger_on_first_use=True,
    )


def bind_run_context(config: CheckerConfig, paths: RegistryPaths) -> None:
    """Attach the execution context and input locations to every event of this run."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        ci=config.ci,
        registry=str(paths.registry_path),
    )


def clear_run_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, optionally tagged with the emitting component."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
