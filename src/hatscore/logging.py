"""Centralized logging utilities for hatscore.

This module provides:
- Logging configuration from HatsConfig
- Safe preview utilities for long payloads (compiled queries, results)
- Secret redaction (API keys in gateway URLs, auth headers)
- Structured logging with chain_id / hat_id context
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from .config import HatsConfig, LogLevel

# Patterns for detecting secrets. When a pattern has a group, only the group
# is replaced. Hat ids and addresses are long hex strings and stay readable.
SECRET_PATTERNS = [
    r"(?i)gateway[\w.-]*\.thegraph\.com/api/([^/\s]+)",
    r"(?i)[?&](?:api[_-]?key|key|token)=([^&\s]+)",
    r'(?i)(?:password|passwd|secret|token|api[_-]?key|auth[_-]?token)\s*[:=]\s*["\']?([^"\'\s&]+)',
    r"(?i)(?:bearer|basic)\s+([a-zA-Z0-9+/=._-]+)",
]


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A single-line, truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    # Compiled queries span many lines; keep logs to one
    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


def redact_secrets(text: str, replacement: str = "[REDACTED]") -> str:
    """Redact secret patterns from text.

    Args:
        text: The text to redact
        replacement: String to replace secrets with (default: "[REDACTED]")

    Returns:
        Text with secrets redacted
    """
    if not isinstance(text, str):
        return text

    def _replace(match: re.Match[str]) -> str:
        if match.lastindex:
            start, end = match.span(1)
            offset = match.start()
            whole = match.group(0)
            return whole[: start - offset] + replacement + whole[end - offset :]
        return replacement

    result = text
    for pattern in SECRET_PATTERNS:
        result = re.sub(pattern, _replace, result)

    return result


def safe_log_value(value: Any, limit: int = 240, redact: bool = True) -> str:
    """Preview plus optional redaction; use this for anything from the network."""
    preview = safe_preview(value, limit=limit)
    if redact:
        preview = redact_secrets(preview)
    return preview


_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "chain_id", "hat_id",
    }
)


class HatsLogFormatter(logging.Formatter):
    """Formatter that adds chain/hat context and optional JSON output.

    This formatter:
    - Extracts chain_id and hat_id from log records (if available)
    - Formats logs as JSON or plain text
    - Previews extra fields and redacts secrets
    """

    def __init__(
        self,
        json_format: bool = True,
        redact_secrets: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.json_format = json_format
        self.redact_secrets = redact_secrets

    def format(self, record: logging.LogRecord) -> str:
        chain_id = getattr(record, "chain_id", None)
        hat_id = getattr(record, "hat_id", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if chain_id is not None:
            log_data["chain_id"] = chain_id
        if hat_id is not None:
            log_data["hat_id"] = hat_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = safe_log_value(value, redact=self.redact_secrets)

        if self.redact_secrets:
            log_data["message"] = redact_secrets(log_data["message"])

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if chain_id is not None:
            parts.append(f"chain_id={chain_id}")
        if hat_id is not None:
            parts.append(f"hat_id={hat_id}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class HatsLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds chain_id and hat_id to log records.

    Integer hat ids are rendered in their hex form.

    Usage:
        logger = get_hats_logger(__name__, chain_id=10)
        logger.info("Fetching hat", hat_id=hat_id)
    """

    def __init__(
        self,
        logger: logging.Logger,
        chain_id: Optional[int] = None,
        hat_id: Optional[int | str] = None,
    ):
        super().__init__(logger, {})
        self.chain_id = chain_id
        self.hat_id = hat_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        from .ids import hat_id_to_hex

        chain_id = kwargs.pop("chain_id", self.chain_id)
        hat_id = kwargs.pop("hat_id", self.hat_id)
        if isinstance(hat_id, int):
            hat_id = hat_id_to_hex(hat_id)

        extra = dict(kwargs.get("extra") or {})
        if chain_id is not None:
            extra["chain_id"] = chain_id
        if hat_id is not None:
            extra["hat_id"] = hat_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[HatsConfig] = None,
    json_format: Optional[bool] = None,
    redact_secrets: bool = True,
) -> None:
    """Configure root logging from a HatsConfig.

    Args:
        config: HatsConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json``
        redact_secrets: Whether to redact secrets (default: True)
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        HatsLogFormatter(
            json_format=config.log_json if json_format is None else json_format,
            redact_secrets=redact_secrets,
        )
    )
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_hats_logger(
    name: str,
    chain_id: Optional[int] = None,
    hat_id: Optional[int | str] = None,
) -> HatsLoggerAdapter:
    """Get a logger adapter carrying chain/hat context.

    Example:
        logger = get_hats_logger(__name__, chain_id=10)
        logger.debug("Query compiled", hat_id=hat_id)
    """
    return HatsLoggerAdapter(logging.getLogger(name), chain_id=chain_id, hat_id=hat_id)


__all__ = [
    "HatsLogFormatter",
    "HatsLoggerAdapter",
    "get_hats_logger",
    "redact_secrets",
    "safe_log_value",
    "safe_preview",
    "setup_logging",
]
