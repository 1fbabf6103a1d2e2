from __future__ import annotations

import numbers

from ndvec.swap_log import RevertMode


def is_valid_index(index: object, size: int) -> bool:
    """Check that `index` is an integer in [0, size). Negative indices never wrap."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 0 <= int(index) < size

def resolve_revert_mode(mode: RevertMode | str) -> RevertMode:
    """
    Coerce a mode given as a member or its string value.

    Raises:
        ValueError: If `mode` is not one of the RevertMode values.
    """
    try:
        return RevertMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in RevertMode)
        raise ValueError(f"Unsupported revert mode: {mode!r}. "
                         f"'mode' must be one of: {valid}.") from None
