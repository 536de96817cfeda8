"""Colored pipeline logger — ANSI-colored console logging for model ingestion.

Provides a PipelineLogger with color-coded output per stage, making it easy
to trace an upload or a soft delete in the terminal.

Color scheme:
    🟢 Green   — Upload / Storage
    🟡 Yellow  — Validation
    🔵 Blue    — Registry linking
    🟣 Magenta — Backup relocation
    🟠 Cyan    — Viewer lookup
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


class PipelineStage:
    """Predefined pipeline stages with colors and icons."""

    UPLOAD = ("UPLOAD", _Colors.GREEN, "📁")
    VALIDATE = ("VALIDATE", _Colors.YELLOW, "🔎")
    STORAGE = ("STORAGE", _Colors.GREEN, "💾")
    LINK = ("LINK", _Colors.BLUE, "🔗")
    BACKUP = ("BACKUP", _Colors.MAGENTA, "📦")
    LOOKUP = ("LOOKUP", _Colors.CYAN, "🔭")
    ERROR = ("ERROR", _Colors.RED, "❌")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


class PipelineLogger:
    """Color-coded logger for the model ingestion pipeline.

    Usage:
        log = PipelineLogger("ModelUploadService")
        log.step_start(PipelineStage.UPLOAD, "Receiving bridge.glb")
        log.detail("client=acme-co")
        log.step_complete(PipelineStage.STORAGE, "Stored 1700000000000-bridge.glb")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _suffix(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._suffix(kwargs))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._suffix(kwargs))

    def step_warning(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a non-fatal divergence (e.g. a file already missing on relocate)."""
        label, color, _ = stage
        formatted = (
            f"{color}⚠ [{label}]{_Colors.RESET} "
            f"{_Colors.YELLOW}{message}{_Colors.RESET}"
        )
        self._logger.warning(formatted + self._suffix(kwargs))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        self._logger.info(formatted + self._suffix(kwargs))

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(PipelineStage.STORAGE, "Writing model"):
                stored = await storage.place(content, filename)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)
