"""
Error types raised across mp3fan.

The traversal engine raises these internally; only the CLI decides
how they map onto process exit codes.
"""


class Mp3FanError(Exception):
    """Base class for all mp3fan errors"""


class InvalidFrameNumberError(Mp3FanError, ValueError):
    """Raised when a frame ordinal below 1 is requested"""

    def __init__(self, frame_number):
        self.frame_number = frame_number
        super().__init__(f"Invalid frame number: {frame_number} (must be greater than 0)")


class BufferReadError(Mp3FanError, OSError):
    """Raised when the input file cannot be read into memory"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class FrameReadError(Mp3FanError):
    """
    Raised when no frame can be decoded at an offset where one must be.

    This is stream corruption, never a "not found" condition.
    """

    def __init__(self, offset: int, ordinal: int, frames_decoded: int = 0):
        self.offset = offset
        self.ordinal = ordinal
        self.frames_decoded = frames_decoded
        super().__init__(
            f"Frame read error: frame {ordinal} at offset {offset} "
            f"(decoded {frames_decoded} frames before corruption)"
        )
