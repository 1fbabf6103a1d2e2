"""
Configuration
=============
Central registry for the global constants of the package.

Exports:
    AXIS_LENGTH (int): Number of slots in every axis.
    AXIS_DTYPE: NumPy dtype of the axis buffers.
    DEFAULT_REVERT_MODE (RevertMode): Revert policy used when none is given.
"""
import numpy as np

from ndvec.swap_log import RevertMode


# Global Constants
AXIS_LENGTH: int = 60
AXIS_DTYPE = np.float32
DEFAULT_REVERT_MODE: RevertMode = RevertMode.REPLAY
