"""Reveal-on-scroll trigger.

Elements register a visibility threshold. Feeding the observer visibility
ratios (as an IntersectionObserver would) yields a single "became visible"
event per element; with ``once=False`` the element re-arms after it
scrolls out again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from . import content


@dataclass
class RevealEvent:
    element_id: str
    ratio: float


@dataclass
class _Target:
    threshold: float
    once: bool
    revealed: bool = False
    visible: bool = False


class RevealObserver:
    def __init__(self):
        self._targets: Dict[str, _Target] = {}
        self._subscribers: List[Callable[[RevealEvent], None]] = []

    def observe(self, element_id: str, threshold: float = 0.2, once: bool = True) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self._targets[element_id] = _Target(threshold=threshold, once=once)

    def unobserve(self, element_id: str) -> None:
        self._targets.pop(element_id, None)

    def subscribe(self, fn: Callable[[RevealEvent], None]) -> Callable[[], None]:
        self._subscribers.append(fn)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe

    def settings(self) -> Dict[str, Dict[str, object]]:
        """Per-element ``{"amount", "once"}``, the shape the page markup carries."""
        return {
            element_id: {"amount": target.threshold, "once": target.once}
            for element_id, target in self._targets.items()
        }

    def is_revealed(self, element_id: str) -> bool:
        target = self._targets.get(element_id)
        return bool(target and target.revealed)

    def update(self, element_id: str, visible_ratio: float) -> bool:
        """Report the visible fraction of an element; True when it just became visible."""
        target = self._targets.get(element_id)
        if target is None:
            return False

        visible = visible_ratio >= target.threshold and visible_ratio > 0
        crossed = visible and not target.visible
        target.visible = visible
        if not crossed or (target.once and target.revealed):
            return False

        target.revealed = True
        event = RevealEvent(element_id, visible_ratio)
        for fn in list(self._subscribers):
            fn(event)
        return True


def observer_for_sections() -> RevealObserver:
    """Observer preloaded with the page's section reveal settings."""
    observer = RevealObserver()
    for section_id, cfg in content.REVEAL.items():
        observer.observe(section_id, threshold=float(cfg["amount"]), once=bool(cfg["once"]))
    return observer
