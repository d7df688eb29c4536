# -*- coding: utf-8 -*-
"""
Slicer Orchestrator
===================
Main entry point for the slicing pipeline.
Coordinating MeshData -> wedges -> event queue -> sweep -> segments.

The sweep plane moves upward in uniform steps. Before each slice, every
queued event strictly below the slice height is applied to the active set;
then every active wedge is cut at that height. A wedge therefore
contributes to slice z iff z_low < z <= z_high.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterator, List, Optional

import numpy as np
from tqdm import tqdm

from ..exceptions import UnknownEventKindError
from ..file_parser.mesh_data import MeshData
from ..geometry_kernel.active_set import ActiveSet
from ..geometry_kernel.events import SweepEvent, build_event_queue
from ..geometry_kernel.intersection import intersect_edges
from ..geometry_kernel.static_class import EventKind
from ..geometry_kernel.wedge import Wedge, classify_mesh
from .config import PROGRESS_MIN_ITEMS, SLICE_COUNT, Z_MAX, Z_MIN, SliceConfig
from .segment import Segment


class Slicer:
    """
    Plane-sweep slicer.

    Attributes:
        mesh (MeshData): The indexed mesh, read-only during slicing.
        wedges (List[Wedge]): Two wedges per facet, in facet order.
        events (List[SweepEvent]): Sorted activation / deactivation events.
    """

    def __init__(self, mesh: MeshData):
        self.mesh = mesh
        self.logger = logging.getLogger("Slicer")
        self.vertices = np.asarray(mesh.vertices, dtype=np.float64)
        self.wedges: List[Wedge] = classify_mesh(mesh)
        self.events: List[SweepEvent] = build_event_queue(self.wedges)
        self.last_active_set: Optional[ActiveSet] = None

    @staticmethod
    def _apply(event: SweepEvent, active: ActiveSet) -> None:
        if event.kind == EventKind.ACTIVATE:
            active.activate(event.wedge)
        elif event.kind == EventKind.DEACTIVATE:
            active.deactivate(event.wedge_id)
        else:
            raise UnknownEventKindError(f"Malformed event kind {event.kind!r} at z={event.z}")

    def _cut(self, active: ActiveSet, z: float) -> List[Segment]:
        wedges = active.wedges()
        if not wedges:
            return []
        points = intersect_edges(self.vertices, active.edge_table(), z)
        return [
            Segment(x1, y1, z, x2, y2, w.facet_id, w.parity)
            for w, (x1, y1, x2, y2) in zip(wedges, points.tolist())
        ]

    def iter_segments(
        self,
        z_min: float = Z_MIN,
        z_max: float = Z_MAX,
        slice_count: int = SLICE_COUNT,
        progress: bool = False,
    ) -> Iterator[Segment]:
        """
        Run the sweep and yield segments slice by slice.

        Args:
            z_min: Height of the first slice.
            z_max: Upper sweep bound.
            slice_count: Number of slices (>= 1).
            progress: Show a progress bar over slices.

        Yields:
            Segment: one per active wedge per slice. Segments of one slice are
            contiguous; their order within the slice is unspecified.

        Raises:
            ValueError: Invalid sweep parameters.
            UnknownEventKindError: An event of unknown kind was drained.
        """
        config = SliceConfig(z_min, z_max, slice_count)
        self.logger.info(
            f"Starting sweep z=[{config.z_min}, {config.z_max}) with {config.slice_count} slices, "
            f"{len(self.events)} events"
        )

        active = ActiveSet()
        self.last_active_set = active
        events = self.events
        cursor = 0
        emitted = 0
        heights = tqdm(
            config.heights(),
            desc="Slicing",
            unit="slice",
            leave=False,
            disable=not progress or len(events) < PROGRESS_MIN_ITEMS,
        )
        for z in heights:
            while cursor < len(events) and events[cursor].z < z:
                self._apply(events[cursor], active)
                cursor += 1
            segments = self._cut(active, z)
            emitted += len(segments)
            yield from segments

        if active.orphan_count:
            self.logger.debug(f"{active.orphan_count} orphan deactivation(s) ignored")
        self.logger.info(f"Slicing complete. Emitted {emitted} segments.")

    def slice_model(
        self,
        z_min: float = Z_MIN,
        z_max: float = Z_MAX,
        slice_count: int = SLICE_COUNT,
        progress: bool = False,
    ) -> List[Segment]:
        """Run the full sweep and collect every segment."""
        return list(self.iter_segments(z_min, z_max, slice_count, progress=progress))

    def slice_layers(
        self,
        z_min: float = Z_MIN,
        z_max: float = Z_MAX,
        slice_count: int = SLICE_COUNT,
        progress: bool = False,
    ) -> Dict[float, List[Segment]]:
        """
        Run the full sweep and group segments by slice height.

        Returns:
            Ordered mapping height -> segments, one entry per slice (empty
            slices included). Slices at equal heights (z_min == z_max) share
            one entry.
        """
        layers: Dict[float, List[Segment]] = OrderedDict(
            (z, []) for z in SliceConfig(z_min, z_max, slice_count).heights()
        )
        for seg in self.iter_segments(z_min, z_max, slice_count, progress=progress):
            layers[seg.z].append(seg)
        return layers

    def slice_layer(self, z: float) -> List[Segment]:
        """
        Process a single layer.

        Uses the same strict-less drain as the sweep, so a facet whose lowest
        vertex sits exactly at ``z`` is not included.
        """
        return self.slice_model(z, z, 1)
