"""Typed user intents and the channel rendering surfaces publish them on."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSelected:
    category: str


@dataclass(frozen=True)
class SearchChanged:
    text: str


@dataclass(frozen=True)
class SortChanged:
    key: str


@dataclass(frozen=True)
class PageSelected:
    page: int


@dataclass(frozen=True)
class CardSelected:
    project_id: int


Intent = FilterSelected | SearchChanged | SortChanged | PageSelected | CardSelected
IntentHandler = Callable[[Intent], None]


class IntentChannel:
    """Synchronous publish/subscribe channel for intents.

    Handlers run in subscription order and each publish runs to completion
    before returning.
    """

    def __init__(self) -> None:
        self._handlers: list[IntentHandler] = []

    def subscribe(self, handler: IntentHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unsubscribe

    def publish(self, intent: Intent) -> None:
        logger.debug("Intent %r", intent)
        for handler in list(self._handlers):
            handler(intent)
