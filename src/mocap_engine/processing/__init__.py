"""Pure marker-data transforms: solving, estimation, smoothing, fusion, sync.

Every function here is stateless and returns new frames or sequences.
"""

from mocap_engine.processing.estimator import fill_missing
from mocap_engine.processing.filters import smooth
from mocap_engine.processing.fusion import fuse, fuse_sequences
from mocap_engine.processing.solver import solve
from mocap_engine.processing.sync import SyncResult, align, find_offset, motion_magnitudes

__all__ = [
    "solve",
    "fill_missing",
    "smooth",
    "fuse",
    "fuse_sequences",
    "align",
    "find_offset",
    "motion_magnitudes",
    "SyncResult",
]
