from enum import IntEnum


class Parity(IntEnum):
    """Which half of a facet a wedge covers, split at the middle-height vertex."""
    LOWER = 0
    UPPER = 1


class EventKind(IntEnum):
    """Sweep event kinds. ACTIVATE sorts before DEACTIVATE at equal height."""
    ACTIVATE = 0
    DEACTIVATE = 1
