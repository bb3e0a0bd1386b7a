"""Utility functions for profingest."""

from profingest.utils.decompress import inflate
from profingest.utils.encoding import detect_encoding
from profingest.utils.singleflight import SingleFlight

__all__ = ["detect_encoding", "inflate", "SingleFlight"]
