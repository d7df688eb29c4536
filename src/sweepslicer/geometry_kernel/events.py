# -*- coding: utf-8 -*-
"""
Sweep Events
============

Event queue for the plane sweep. Every wedge contributes two events:

    ACTIVATE   at wedge.z_low
    DEACTIVATE at wedge.z_high

The queue is sorted by height, then ACTIVATE before DEACTIVATE, and is
otherwise stable. At a facet's middle vertex this activates the UPPER
wedge before the LOWER wedge is removed.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .static_class import EventKind
from .wedge import Wedge


@dataclass(frozen=True)
class SweepEvent:
    z: float
    kind: EventKind
    wedge: Wedge

    @property
    def wedge_id(self) -> int:
        return self.wedge.id

    def sort_key(self) -> Tuple[float, int]:
        return self.z, int(self.kind)


def events_for_wedge(wedge: Wedge) -> Tuple[SweepEvent, SweepEvent]:
    return (
        SweepEvent(wedge.z_low, EventKind.ACTIVATE, wedge),
        SweepEvent(wedge.z_high, EventKind.DEACTIVATE, wedge),
    )


def build_event_queue(wedges: Iterable[Wedge]) -> List[SweepEvent]:
    """Build the sorted event queue for a sequence of wedges.

    Args:
        wedges: Wedges in emission order (see ``classify_mesh``).

    Returns:
        Events sorted by (z, kind); ties keep emission order.
    """
    events: List[SweepEvent] = []
    for wedge in wedges:
        events.extend(events_for_wedge(wedge))
    # list.sort is stable
    events.sort(key=SweepEvent.sort_key)
    return events
