"""Paced, sequence-numbered console output for classroom demos.

Every line is prefixed with ``[n]`` and followed by a short pause so an
audience can follow each step. Pacing is presentation only; nothing in the
labs depends on it.
"""

import json
import sys
import time
from collections.abc import Callable
from typing import Any, TextIO

from llm_labs.core.config import get_settings

MIN_SECTION_WIDTH = 20
MAX_SECTION_WIDTH = 120


def format_value(value: Any) -> str:
    """Render one log argument: containers as indented JSON, the rest via str()."""
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return str(value)


class ConsoleReporter:
    """Prints numbered log lines and banner sections with an optional delay."""

    def __init__(
        self,
        delay_ms: int | None = None,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Create a reporter.

        Args:
            delay_ms: Pause after each log line. Defaults to LOG_DELAY_MS.
            stream: Output stream. Defaults to stdout at print time.
            sleep: Sleep function, replaceable in tests.
        """
        self.delay_ms = get_settings().log_delay_ms if delay_ms is None else delay_ms
        self._stream = stream
        self._sleep = sleep
        self.sequence = 0

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def next_label(self) -> str:
        self.sequence += 1
        return f"[{self.sequence}]"

    def log_sync(self, *parts: Any) -> None:
        """Print a numbered line without pausing."""
        print(self.next_label(), *(format_value(p) for p in parts), file=self.stream)

    def log(self, *parts: Any, delay_ms: int | None = None) -> None:
        """Print a numbered line, then pause for ``delay_ms`` (or the default)."""
        self.log_sync(*parts)
        ms = self.delay_ms if delay_ms is None else delay_ms
        if ms > 0:
            self._sleep(ms / 1000)

    def section(
        self,
        title: str,
        width: int = 60,
        char: str = "-",
        delay_ms: int | None = None,
    ) -> None:
        """Print a three-line banner with the title centred.

        Width is clamped to 20-120 and a longer title is cut to fit. The
        border repeats ``char`` width times, so a multi-character fill gives
        a wider border than the title line.
        """
        width = max(MIN_SECTION_WIDTH, min(MAX_SECTION_WIDTH, width))
        visible = str(title or "").strip()[:width]

        total_spaces = width - len(visible)
        left = total_spaces // 2
        right = total_spaces - left

        border = char * width
        print(border, file=self.stream)
        print(f"{' ' * left}{visible}{' ' * right}", file=self.stream)
        print(border, file=self.stream)
        if delay_ms:
            self._sleep(delay_ms / 1000)


class SilentReporter(ConsoleReporter):
    """Reporter that counts lines but prints nothing."""

    def __init__(self) -> None:
        super().__init__(delay_ms=0)

    def log_sync(self, *parts: Any) -> None:
        self.next_label()

    def section(self, title: str, width: int = 60, char: str = "-", delay_ms: int | None = None) -> None:
        pass
