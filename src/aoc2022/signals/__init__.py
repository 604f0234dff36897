from .markers import (
    MESSAGE_MARKER_SIZE,
    PACKET_MARKER_SIZE,
    MarkerConfig,
    NoMarkerError,
    find_marker,
)
from .puzzle import TITLE, solve

__all__ = [
    "MESSAGE_MARKER_SIZE",
    "PACKET_MARKER_SIZE",
    "TITLE",
    "MarkerConfig",
    "NoMarkerError",
    "find_marker",
    "solve",
]
