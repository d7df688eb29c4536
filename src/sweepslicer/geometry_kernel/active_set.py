# -*- coding: utf-8 -*-
"""
Active Set
==========

Wedges whose height interval currently contains the sweep plane, keyed by
wedge id so a DEACTIVATE removes exactly the wedge its ACTIVATE inserted.

Owned by a single sweep; not shared.
"""

import logging
from typing import Dict, Iterator, List

import numpy as np

from .config import INDEX_DTYPE
from .wedge import Wedge


class ActiveSet:
    """
    Mapping wedge id -> Wedge.

    Attributes:
        orphan_count: Deactivations for ids that were never activated.
        duplicate_count: Activations that replaced an existing entry.
    """

    def __init__(self):
        self._wedges: Dict[int, Wedge] = {}
        self.orphan_count = 0
        self.duplicate_count = 0
        self.logger = logging.getLogger("ActiveSet")

    def activate(self, wedge: Wedge) -> None:
        """Insert a wedge; a repeated id replaces the earlier entry."""
        key = wedge.id
        if key in self._wedges:
            self.duplicate_count += 1
            self.logger.debug(f"Duplicate activation of wedge {key} (facet {wedge.facet_id}), later one kept")
        self._wedges[key] = wedge

    def deactivate(self, wedge_id: int) -> bool:
        """Remove a wedge by id.

        Returns:
            True if the wedge was present. An absent id is a no-op.
        """
        if self._wedges.pop(wedge_id, None) is None:
            self.orphan_count += 1
            self.logger.debug(f"Orphan deactivation of wedge {wedge_id} ignored")
            return False
        return True

    def wedges(self) -> List[Wedge]:
        """Snapshot of the active wedges."""
        return list(self._wedges.values())

    def edge_table(self) -> np.ndarray:
        """Returns a (k, 4) array of (a, b, c, d) vertex indices, same order as ``wedges()``."""
        return np.asarray(
            [(w.a, w.b, w.c, w.d) for w in self._wedges.values()], dtype=INDEX_DTYPE
        ).reshape(-1, 4)

    def __iter__(self) -> Iterator[Wedge]:
        return iter(self.wedges())

    def __len__(self) -> int:
        return len(self._wedges)

    def __contains__(self, wedge_id: int) -> bool:
        return wedge_id in self._wedges

    def __repr__(self):
        return f"ActiveSet(size={len(self)}, orphans={self.orphan_count})"
