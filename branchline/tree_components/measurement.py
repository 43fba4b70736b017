from typing import NamedTuple


class Measurement(NamedTuple):
    minimum: int
    maximum: int


def measure(width: int, max_width: int) -> Measurement:
    fitted = min(width, max_width)
    return Measurement(fitted, fitted)
