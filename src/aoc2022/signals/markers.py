from __future__ import annotations

from dataclasses import dataclass

PACKET_MARKER_SIZE = 4
MESSAGE_MARKER_SIZE = 14


class NoMarkerError(LookupError):
    code = "E_SIGNAL_MARKER_MISSING"

    def __init__(self, marker_size: int, stream_length: int) -> None:
        super().__init__(
            f"{self.code}: no run of {marker_size} distinct characters "
            f"in a datastream of length {stream_length}"
        )
        self.marker_size = marker_size
        self.stream_length = stream_length


@dataclass(frozen=True, slots=True)
class MarkerConfig:
    packet_marker_size: int = PACKET_MARKER_SIZE
    message_marker_size: int = MESSAGE_MARKER_SIZE

    def __post_init__(self) -> None:
        if self.packet_marker_size < 1:
            raise ValueError("packet_marker_size must be >= 1")
        if self.message_marker_size < 1:
            raise ValueError("message_marker_size must be >= 1")


def find_marker(stream: str, marker_size: int) -> int:
    """Return how many characters are consumed up to the end of the first marker."""
    if marker_size < 1:
        raise ValueError("marker_size must be >= 1")
    for start in range(len(stream) - marker_size + 1):
        if len(set(stream[start : start + marker_size])) == marker_size:
            return start + marker_size
    raise NoMarkerError(marker_size, len(stream))
