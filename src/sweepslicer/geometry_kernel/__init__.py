# -*- coding: utf-8 -*-

from .static_class import EventKind, Parity
from .wedge import Wedge, classify_facet, classify_mesh, rank_vertices, wedge_id
from .events import SweepEvent, build_event_queue, events_for_wedge
from .active_set import ActiveSet
from .intersection import intersect_edges, intersect_wedge, interpolate_edge

__all__ = [
    "ActiveSet",
    "EventKind",
    "Parity",
    "SweepEvent",
    "Wedge",
    "build_event_queue",
    "classify_facet",
    "classify_mesh",
    "events_for_wedge",
    "interpolate_edge",
    "intersect_edges",
    "intersect_wedge",
    "rank_vertices",
    "wedge_id",
]
