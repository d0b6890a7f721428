from typing import Tuple


class LinearScale:
    """Maps a value domain onto a pixel range, e.g. ``[0, 110] → [500, 0]``."""

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = domain
        self.range  = range_

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return r0
        return r0 + (value - d0) * (r1 - r0) / (d1 - d0)
