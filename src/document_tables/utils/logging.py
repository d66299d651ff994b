"""Structured logging for table edits.

Log lines carry the page and table being edited, taken from context
variables set by :class:`LogContext`, plus ``key=value`` pairs passed to the
individual call:

    logger = get_logger(__name__)

    with LogContext(page_id="{A1B2}", table_id="{T1}"):
        logger.debug("Added column", index=2, width="1.5")

    # [page_id={A1B2} table_id={T1}] Added column | index=2, width=1.5
"""

import logging
from contextvars import ContextVar, Token
from typing import Any

from document_tables.config import settings

_page_id_var: ContextVar[str | None] = ContextVar("page_id", default=None)
_table_id_var: ContextVar[str | None] = ContextVar("table_id", default=None)
_extra_context_var: ContextVar[dict[str, Any] | None] = ContextVar(
    "extra_context", default=None
)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_page_id() -> str | None:
    return _page_id_var.get()


def get_table_id() -> str | None:
    return _table_id_var.get()


def get_extra_context() -> dict[str, Any]:
    """Context values other than the page and table IDs."""
    return dict(_extra_context_var.get() or {})


def _context_prefix() -> str:
    parts = []
    for key, value in (("page_id", get_page_id()), ("table_id", get_table_id())):
        if value:
            parts.append(f"{key}={value}")
    parts.extend(f"{key}={value}" for key, value in get_extra_context().items())
    return f"[{' '.join(parts)}] " if parts else ""


class StructuredLogFormatter(logging.Formatter):
    """Formatter that prefixes each message with the active log context."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = _context_prefix()
        if not prefix:
            return super().format(record)

        message = record.msg
        record.msg = f"{prefix}{message}"
        try:
            return super().format(record)
        finally:
            record.msg = message


class StructuredLogger:
    """Wrapper around :class:`logging.Logger` taking keyword fields.

    Keyword arguments are rendered after the message as
    ``message | key=value, key=value``.
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _build_message(self, message: str, **kwargs: Any) -> str:
        if not kwargs:
            return message
        fields = ", ".join(f"{key}={value}" for key, value in kwargs.items())
        return f"{message} | {fields}"

    def _log(
        self, level: int, message: str, exc_info: bool = False, **kwargs: Any
    ) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(
                level, self._build_message(message, **kwargs), exc_info=exc_info
            )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        """Log an error, with the active traceback when ``exc_info`` is set."""
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


class LogContext:
    """Context manager that adds values to every log line inside it.

    ``page_id`` and ``table_id`` replace the current IDs; any other keyword
    is merged into the extra context of the enclosing block. Values are
    restored on exit, and the same instance can be entered again later.
    """

    def __init__(self, **kwargs: Any) -> None:
        self._values = kwargs
        self._tokens: list[tuple[ContextVar[Any], Token[Any]]] = []

    def __enter__(self) -> "LogContext":
        extra = dict(self._values)
        page_id = extra.pop("page_id", None)
        table_id = extra.pop("table_id", None)

        if page_id is not None:
            self._tokens.append((_page_id_var, _page_id_var.set(page_id)))
        if table_id is not None:
            self._tokens.append((_table_id_var, _table_id_var.set(table_id)))
        merged = {**get_extra_context(), **extra}
        self._tokens.append((_extra_context_var, _extra_context_var.set(merged)))
        return self

    def __exit__(self, *args: Any) -> None:
        while self._tokens:
            var, token = self._tokens.pop()
            var.reset(token)


def configure_logging(
    level: int | str | None = None,
    format_string: str | None = None,
    use_structured_formatter: bool = True,
) -> None:
    """Send log output to stderr through a single root handler.

    Args:
        level: Level as an int or a name like "INFO". Defaults to the
            configured level, or DEBUG when debug mode is on.
        format_string: Format for the handler, ``DEFAULT_FORMAT`` if None.
        use_structured_formatter: Prefix lines with the active log context.
    """
    if level is None:
        level = logging.DEBUG if settings.debug else settings.log_level_int
    elif isinstance(level, str):
        level = getattr(logging, level.upper())

    formatter_class = (
        StructuredLogFormatter if use_structured_formatter else logging.Formatter
    )
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter_class(format_string or DEFAULT_FORMAT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger(__name__).debug(
        "Configuration loaded: %s", settings.to_safe_dict()
    )


def get_logger(name: str) -> StructuredLogger:
    """Return a :class:`StructuredLogger` for ``name`` (usually ``__name__``)."""
    return StructuredLogger(name)
