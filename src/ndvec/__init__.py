"""
NDVec
=====
A minimal N-dimensional vector container: fixed-length float32 axes that can be
swapped, mutated, read, and reverted to their original order.
"""
from ndvec.container import NDVec
from ndvec.logging_config import setup_logging
from ndvec.swap_log import RevertMode, SwapLog, SwapRecord

__version__ = "0.1.0"

__all__ = ["NDVec", "RevertMode", "SwapLog", "SwapRecord", "setup_logging"]
