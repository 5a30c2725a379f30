"""
Simple logging system for Hive Feed Setup.
"""

import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Union

from loguru import logger as loguru_logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[component]} | {message}"


class SensitiveDataMasker:
    """
    Masks sensitive data before it reaches a sink.

    Patterns masked:
    - WIF private keys (first 4 and last 4 characters kept)
    - key=value secrets
    - Extra patterns supplied by the caller (fully replaced)
    """

    WIF_PATTERN = re.compile(r"\b5[HJK][1-9A-HJ-NP-Za-km-z]{49}\b")
    ASSIGNMENT_PATTERN = re.compile(
        r"\b((?:\w+_)?(?:private_key|signing_key|api_key|token|secret|password|key))=[^\s,]{8,}",
        flags=re.IGNORECASE,
    )

    def __init__(self, patterns: Optional[List[Pattern]] = None):
        self.patterns = patterns or []

    def mask(self, text: str) -> str:
        """
        Mask sensitive data.

        Example:
        - "5HueCGU8rMjx...TLvyTJ" -> "5Hue...vyTJ"
        - "HIVE_SIGNING_PRIVATE_KEY=5Hue..." -> "HIVE_SIGNING_PRIVATE_KEY=***"
        """
        masked = self.WIF_PATTERN.sub(lambda m: f"{m.group(0)[:4]}...{m.group(0)[-4:]}", text)
        masked = self.ASSIGNMENT_PATTERN.sub(r"\1=***", masked)

        for pattern in self.patterns:
            masked = pattern.sub("***", masked)

        return masked

    def mask_context(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Mask string values of a structured log context."""
        return {
            key: self.mask(value) if isinstance(value, str) else value
            for key, value in context.items()
        }


class ComponentLogger:
    """
    Component logger with plain format.

    Format: timestamp | level | component | message
    Every message and string context value passes through SensitiveDataMasker.
    """

    # Sinks are shared between every instance
    _sink_ids: List[int] = []

    def __init__(self, component: str, debug_mode: bool = False):
        self.component = component
        self.debug_mode = debug_mode
        self.masker = SensitiveDataMasker()

    @classmethod
    def configure(
        cls,
        log_file: Optional[Union[str, Path]] = None,
        debug_mode: bool = False,
    ) -> None:
        """
        Replace loguru's default stderr sink with the tool's sinks.

        - No sink at all unless asked: prompts must not interleave with log lines
        - log_file: rotating file sink with 10MB rotation
        - debug_mode: DEBUG level stderr sink
        """
        loguru_logger.remove()
        cls._sink_ids = []

        if log_file:
            cls._sink_ids.append(
                loguru_logger.add(
                    str(log_file),
                    format=LOG_FORMAT,
                    level="DEBUG" if debug_mode else "INFO",
                    rotation="10 MB",
                    compression="zip",
                    enqueue=True,
                )
            )

        if debug_mode:
            cls._sink_ids.append(loguru_logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG"))

    def log(self, level: str, message: str, **context):
        """Log a masked message with structured context."""
        safe_context = self.masker.mask_context(context)
        loguru_logger.bind(component=self.component, **safe_context).log(
            level, self.masker.mask(message)
        )

    def debug(self, message: str, **context):
        """Log at DEBUG level."""
        self.log("DEBUG", message, **context)

    def info(self, message: str, **context):
        """Log at INFO level."""
        self.log("INFO", message, **context)

    def warning(self, message: str, **context):
        """Log at WARNING level."""
        self.log("WARNING", message, **context)

    def error(self, message: str, include_trace: Optional[bool] = None, **context):
        """
        Log at ERROR level with optional stack trace.

        Args:
            message: Error message
            include_trace: Whether to attach the stack trace (None = follow debug_mode)
            **context: Additional context
        """
        should_include_trace = include_trace if include_trace is not None else self.debug_mode

        if should_include_trace:
            import traceback

            context["stack_trace"] = traceback.format_exc()

        self.log("ERROR", message, **context)


def _get_debug_mode() -> bool:
    """Read debug mode from the environment."""
    return os.getenv("HIVE_FEED_SETUP_DEBUG", "false").lower() == "true"


logger = ComponentLogger("hive_feed_setup", debug_mode=_get_debug_mode())
