"""Reflow notifications for width-dependent widgets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.signal import Signal

from linefit.core.debug_log import log

if TYPE_CHECKING:
    from textual.dom import DOMNode


class ReflowSignal(Signal[None]):
    """Published whenever container widths may have changed.

    Carries no payload. Subscribers re-sample their own width when notified.
    """

    def __init__(self, owner: DOMNode, name: str = "reflow") -> None:
        super().__init__(owner, name)
        self.published = 0

    def notify(self) -> None:
        self.published += 1
        log.debug("Reflow signal published", count=self.published)
        self.publish(None)
