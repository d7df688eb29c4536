# -*- coding: utf-8 -*-
"""
Exceptions
==========

Error kinds raised by the parser and the sweep.

- MalformedMeshError: the input mesh (file or arrays) cannot be used.
- UnknownEventKindError: a sweep event carries an unknown kind; fatal.

Degenerate (horizontal) facets and orphan deactivations are not errors.
"""

from typing import Optional


class SweepSlicerError(Exception):
    """Base class for all sweepslicer errors."""


class MalformedMeshError(SweepSlicerError, ValueError):
    """Raised when mesh input violates the indexed-mesh invariants."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class UnknownEventKindError(SweepSlicerError, RuntimeError):
    """Raised when the sweep meets an event that is neither ACTIVATE nor DEACTIVATE."""
