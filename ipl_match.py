# ipl_match.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from observer import Subject
from validators import Validator

logger = logging.getLogger(__name__)


class IplMatch(Subject):
    """Cricket match whose score updates are pushed to every viewer."""

    @property
    def match_status(self) -> str | None:
        return self.current_state

    def update_match_score(self, status: str) -> None:
        logger.info("Match update: %s", status)
        self.update_state(status)


# ===== Viewers =====
# eq=False: two viewers with the same label are still different subscribers.


@dataclass(frozen=True, eq=False)
class TVDisplay:
    viewer_name: str
    stream: TextIO | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "viewer_name", Validator.require_non_empty("viewer_name", self.viewer_name)
        )

    def update(self, state: str) -> None:
        print(f"{self.viewer_name} on TV: Match Update - {state}", file=self.stream)


@dataclass(frozen=True, eq=False)
class MobileApp:
    app_name: str
    stream: TextIO | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "app_name", Validator.require_non_empty("app_name", self.app_name)
        )

    def update(self, state: str) -> None:
        print(f"{self.app_name} Mobile App: Match Update - {state}", file=self.stream)


@dataclass(frozen=True, eq=False)
class GoogleSearch:
    stream: TextIO | None = None

    def update(self, state: str) -> None:
        print(f"GoogleSearch: Match Update - {state}", file=self.stream)
