"""
Traversal Engine and Aggregator

Walks an MP3 buffer frame by frame and folds units into histograms.
"""

from .engine import (
    extract_tags_and_first_frame,
    iter_frames,
    lookup_frame,
    summarize
)

from .histogram import (
    ByteLengthHistogram,
    fold,
    total,
    build_histogram
)

from .results import (
    LookupStatus,
    Extraction,
    FrameLookup,
    Summary
)

__all__ = [
    'extract_tags_and_first_frame',
    'iter_frames',
    'lookup_frame',
    'summarize',
    'ByteLengthHistogram',
    'fold',
    'total',
    'build_histogram',
    'LookupStatus',
    'Extraction',
    'FrameLookup',
    'Summary'
]
