# -*- coding: utf-8 -*-
"""
Sweepslicer File Parser Configuration
=====================================

Exposes the parser-related entries of ``DEFAULTS`` as module constants.

Attributes:
    FLOAT_DTYPE: numpy dtype of the vertex table.
    INDEX_DTYPE: numpy dtype of the facet table.
    PROGRESS_MIN_ITEMS: inputs shorter than this never show a progress bar.
"""

from ..default_config import DEFAULTS

FLOAT_DTYPE = DEFAULTS["FLOAT_DTYPE"]
INDEX_DTYPE = DEFAULTS["INDEX_DTYPE"]
PROGRESS_MIN_ITEMS = DEFAULTS["PROGRESS_MIN_ITEMS"]
