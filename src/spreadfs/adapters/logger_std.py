"""Standard logger adapter."""

import json
import logging
import sys
from typing import Any

from ..ports.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """Standard Python logger implementation."""

    def __init__(self, name: str = "spreadfs", level: str = "INFO"):
        """Initialize logger."""
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Leave handler setup to the application when it configured logging itself
        if not self.logger.handlers and not logging.getLogger().handlers:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)

    def log_operation(
        self,
        op: str,
        path: str,
        durations: dict[str, float],
        count: int | None = None,
    ) -> None:
        """Log a timed store operation."""
        data: dict[str, Any] = {"op": op, "path": path, "durations": durations}
        if count is not None:
            data["count"] = count
        self.info(f"Operation: {op}", **data)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if kwargs:
            message = f"{message} {json.dumps(kwargs, default=str, sort_keys=True)}"
        self.logger.log(level, message)
