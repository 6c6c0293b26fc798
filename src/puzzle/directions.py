"""Direction catalog: maps orientation flags to unit step vectors."""

from typing import Dict, List, Tuple

from .models import Orientations


Direction = Tuple[int, int]

# One vector per flag, (d_row, d_col). "diagonal" is the down-right slope only;
# the down-left/up-right slope is not offered.
ORIENTATION_VECTORS: Dict[str, Direction] = {
    "horizontal": (0, 1),
    "vertical": (1, 0),
    "diagonal": (1, 1),
    "reverse_horizontal": (0, -1),
    "reverse_vertical": (-1, 0),
    "reverse_diagonal": (-1, -1),
}

# All eight octant directions, counter-clockwise from east, used when
# snapping free-hand selections.
OCTANTS: List[Direction] = [
    (0, 1), (-1, 1), (-1, 0), (-1, -1),
    (0, -1), (1, -1), (1, 0), (1, 1),
]


def directions_for(orientations: Orientations) -> List[Direction]:
    """Return one unit vector per enabled orientation flag, in catalog order."""
    return [
        vector
        for name, vector in ORIENTATION_VECTORS.items()
        if getattr(orientations, name)
    ]
