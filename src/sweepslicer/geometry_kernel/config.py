from ..default_config import DEFAULTS

FLOAT_DTYPE = DEFAULTS["FLOAT_DTYPE"]
INDEX_DTYPE = DEFAULTS["INDEX_DTYPE"]

# Wedge ids are (facet_index << 1) | parity, stored in INDEX_DTYPE
WEDGE_ID_SHIFT = 1
