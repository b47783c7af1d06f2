# report_proxy.py
from __future__ import annotations

import logging
import time
from typing import Protocol, TextIO

from validators import Validator

logger = logging.getLogger(__name__)

DEFAULT_LOAD_DELAY = 2.0


class Report(Protocol):
    def display(self) -> None: ...


class RealReport:
    """Expensive report: loading happens in the constructor."""

    def __init__(
        self,
        report_name: str,
        *,
        load_delay: float = DEFAULT_LOAD_DELAY,
        stream: TextIO | None = None,
    ) -> None:
        self.report_name = Validator.require_non_empty("report_name", report_name)
        self._load_delay = Validator.non_negative_number("load_delay", load_delay)
        self._stream = stream
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"Loading report: {self.report_name}", file=self._stream)
        logger.debug("Simulating %.2fs load for %s", self._load_delay, self.report_name)
        time.sleep(self._load_delay)

    def display(self) -> None:
        print(f"Displaying report: {self.report_name}", file=self._stream)


class ReportProxy:
    """Virtual proxy: the real report is loaded on the first display()."""

    def __init__(
        self,
        report_name: str,
        *,
        load_delay: float = DEFAULT_LOAD_DELAY,
        stream: TextIO | None = None,
    ) -> None:
        self.report_name = Validator.require_non_empty("report_name", report_name)
        self._load_delay = Validator.non_negative_number("load_delay", load_delay)
        self._stream = stream
        self._real: RealReport | None = None

    @property
    def is_loaded(self) -> bool:
        return self._real is not None

    def display(self) -> None:
        if self._real is None:
            self._real = RealReport(
                self.report_name, load_delay=self._load_delay, stream=self._stream
            )
        self._real.display()
