"""Largest Triangle Three Buckets downsampling for time series."""

from .config import Settings, settings, setup_logging
from .downsampler import bucket_bounds, downsample, select_indices
from .models import DataPoint
from .series import downsample_signals
from .table import downsample_table

__version__ = "1.0.0"

__all__ = [
    "DataPoint",
    "Settings",
    "bucket_bounds",
    "downsample",
    "downsample_signals",
    "downsample_table",
    "select_indices",
    "settings",
    "setup_logging",
]
