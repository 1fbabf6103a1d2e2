"""
Axis Container
==============
An N-dimensional vector: a fixed number of axes, each a fixed-length float32
buffer, plus a log of the axis swaps applied so far.

    [x: [0.0, ... x60], y: [0.0, ... x60], z: [...], ..., n: [...]]

Axes are reordered with `swap` and the original order is recovered with
`revert`, which replays the swap log backwards.

Error policy:
    get     -> None when out of range
    mutate  -> no-op when out of range (logged at DEBUG)
    swap    -> IndexError when out of range (container left untouched)
"""
from __future__ import annotations

import logging
import numbers
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from ndvec import config
from ndvec.swap_log import RevertMode, SwapLog, SwapRecord
from ndvec.utils import is_valid_index, resolve_revert_mode

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class NDVec:
    """
    Indexed container of `dim` axes with a reversible permutation log.
    """
    def __init__(self, dim: int, revert_mode: RevertMode | str = config.DEFAULT_REVERT_MODE) -> None:
        """
        Initialize every axis with 0.0.

        Args:
            dim: Number of axes. Fixed for the lifetime of the container.
            revert_mode: Default policy for `revert` (see RevertMode).

        Raises:
            TypeError: If `dim` is not an integer.
            ValueError: If `dim` is negative or `revert_mode` is unknown.
        """
        if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
            raise TypeError(f"'dim' must be an integer, got {type(dim).__name__}.")
        if dim < 0:
            raise ValueError(f"'dim' must be non-negative, got {dim}.")

        self._data: npt.NDArray[np.float32] = np.zeros((int(dim), config.AXIS_LENGTH), dtype=config.AXIS_DTYPE)
        self._history = SwapLog()
        self.revert_mode = resolve_revert_mode(revert_mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dim={self.dim}, swaps={len(self._history)})"

    def __len__(self) -> int:
        return self.dim

    @property
    def dim(self) -> int:
        """Number of axes."""
        return self._data.shape[0]

    @property
    def history(self) -> Tuple[SwapRecord, ...]:
        """Recorded swaps, oldest first."""
        return self._history.records

    def swap(self, a_ind: int, b_ind: int) -> None:
        """
        Exchange the axes at positions `a_ind` and `b_ind` and record the swap.

        Raises:
            IndexError: If either position is out of range.
        """
        for index in (a_ind, b_ind):
            if not is_valid_index(index, self.dim):
                msg = f"Axis index {index!r} out of range for {self.dim} axes."
                logger.warning(msg)
                raise IndexError(msg)

        self._swap_rows(int(a_ind), int(b_ind))
        self._history.append(SwapRecord(int(a_ind), int(b_ind)))

    def mutate(self, axis: int, position: int, value: float) -> None:
        """Change the value in an axis at a certain position. Out of range is ignored."""
        if not (is_valid_index(axis, self.dim) and is_valid_index(position, config.AXIS_LENGTH)):
            logger.debug(f"Ignoring mutate at axis={axis!r}, position={position!r}: out of range.")
            return
        self._data[axis, position] = value

    def get(self, axis: int, position: int) -> Optional[float]:
        """Value at an axis at a certain position, or None if out of range."""
        if not (is_valid_index(axis, self.dim) and is_valid_index(position, config.AXIS_LENGTH)):
            return None
        return float(self._data[axis, position])

    def revert(self, mode: RevertMode | str | None = None) -> None:
        """
        Undo the recorded swaps, most recent first, to get the original axis order.

        Args:
            mode: REPLAY keeps the log, so calling revert again re-applies the
                same inverse sequence. CONSUME clears it. Defaults to
                `self.revert_mode`.
        """
        mode = self.revert_mode if mode is None else resolve_revert_mode(mode)

        for record in self._history.reversed_records():
            inverse = record.inverse()
            self._swap_rows(inverse.a, inverse.b)
        logger.debug(f"Reverted {len(self._history)} swaps ({mode.value}).")

        if mode is RevertMode.CONSUME:
            self._history.clear()

    def axis(self, index: int) -> npt.NDArray[np.float32]:
        """
        Read-only view of the axis currently at `index`.

        Raises:
            IndexError: If `index` is out of range.
        """
        if not is_valid_index(index, self.dim):
            raise IndexError(f"Axis index {index!r} out of range for {self.dim} axes.")
        view = self._data[int(index)].view()
        view.flags.writeable = False
        return view

    def to_array(self) -> npt.NDArray[np.float32]:
        """Copy of all axes as a (dim, AXIS_LENGTH) array."""
        return self._data.copy()

    def _swap_rows(self, a: int, b: int) -> None:
        self._data[[a, b]] = self._data[[b, a]]
