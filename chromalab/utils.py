import math
from numbers import Real
from typing import Any, Optional, Sequence, Tuple
from collections.abc import Sized


def is_number(value: Any) -> bool:
    """Real numbers, numpy scalars included; bools are not numbers here."""
    return isinstance(value, Real) and not isinstance(value, bool)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (``round`` goes to even)."""
    return int(math.floor(value + 0.5))


def unpack(args: Sequence[Any]) -> Tuple[Any, ...]:
    """
    Flatten constructor arguments into one component tuple.

    ``(1, 2, 3)`` and ``([1, 2, 3],)`` both give ``(1, 2, 3)``; a single
    non-sequence argument is returned as a 1-tuple.
    """
    if len(args) >= 3:
        return tuple(args)
    if len(args) == 1 and not isinstance(args[0], (str, bytes)) and isinstance(args[0], Sized):
        return tuple(args[0])
    return tuple(args)


def trailing_mode(args: Sequence[Any]) -> Optional[str]:
    """Return the lowercased last argument if it is a mode string following other arguments."""
    if len(args) < 2:
        return None
    last = args[-1]
    if isinstance(last, str):
        return last.lower()
    return None
