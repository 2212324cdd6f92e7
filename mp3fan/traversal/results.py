from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mp3fan.errors import FrameReadError
from mp3fan.mapping.sections import Frame, Tag
from mp3fan.traversal.histogram import ByteLengthHistogram, total


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


@dataclass
class Extraction:
    """Leading tags and the first frame of a buffer."""

    tags: List[Tag] = field(default_factory=list)
    first_frame: Optional[Frame] = None


@dataclass
class FrameLookup:
    """Outcome of looking up one frame by its 1-based ordinal."""

    status: LookupStatus
    ordinal: int
    frame: Optional[Frame] = None
    error: Optional[FrameReadError] = None
    frames_seen: int = 0

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass
class Summary:
    """Byte-length histograms of tags and frames."""

    file_size: int
    tag_histogram: ByteLengthHistogram = field(default_factory=dict)
    frame_histogram: ByteLengthHistogram = field(default_factory=dict)
    error: Optional[FrameReadError] = None

    @property
    def tag_total(self) -> int:
        return total(self.tag_histogram)

    @property
    def frame_total(self) -> int:
        return total(self.frame_histogram)


__all__ = [
    "LookupStatus",
    "Extraction",
    "FrameLookup",
    "Summary",
]
