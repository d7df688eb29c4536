from typing import Any, Dict

import numpy as np

CONFIG_VERSION = "1.0.0"
DEFAULTS: Dict[str, Any] = {
    # Sweep Defaults
    "Z_MIN": -10.0,                 # lower sweep bound
    "Z_MAX": 100.0,                 # upper sweep bound
    "SLICE_COUNT": 200,             # number of slicing planes (N >= 1)

    # Parser / Storage Defaults
    "FLOAT_DTYPE": np.float32,      # vertex table precision
    "INDEX_DTYPE": np.int64,        # facet table index type

    # Progress Defaults
    "PROGRESS_MIN_ITEMS": 2000,     # tqdm is disabled below this many items

    # Output Defaults
    "OUTPUT_FORMAT": "xyz",         # "xyz" (two lines per segment) or "csv"
}
