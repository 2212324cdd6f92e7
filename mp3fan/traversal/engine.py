"""Frame-by-frame traversal of an MP3 buffer."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

from mp3fan.errors import FrameReadError, InvalidFrameNumberError
from mp3fan.mapping.decoder import Mp3Decoder
from mp3fan.mapping.sections import Frame, Tag
from mp3fan.traversal.histogram import build_histogram, fold
from mp3fan.traversal.results import Extraction, FrameLookup, LookupStatus, Summary

ProgressCallback = Callable[[int, int], None]


def extract_tags_and_first_frame(buffer, decoder: Optional[Mp3Decoder] = None) -> Extraction:
    decoder = decoder or Mp3Decoder()
    extraction = Extraction()
    for unit in decoder.read_tags(buffer):
        if isinstance(unit, Tag):
            extraction.tags.append(unit)
        else:
            extraction.first_frame = unit
            break
    return extraction


def iter_frames(
    buffer,
    start_offset: int,
    decoder: Optional[Mp3Decoder] = None,
    *,
    first_ordinal: int = 2,
    last_ordinal: Optional[int] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> Iterator[Tuple[int, Frame]]:
    """
    Yield (ordinal, frame) pairs from start_offset until the buffer ends.

    Stops early once last_ordinal has been yielded. Raises FrameReadError
    when no frame decodes at an offset reached by following next_offset.
    """
    decoder = decoder or Mp3Decoder()
    buffer_length = len(buffer)
    offset = start_offset
    ordinal = first_ordinal

    while offset < buffer_length and (last_ordinal is None or ordinal <= last_ordinal):
        frame = decoder.read_frame(buffer, offset)
        if frame is None:
            raise FrameReadError(offset, ordinal, frames_decoded=ordinal - 1)

        yield ordinal, frame

        offset = frame.section.next_offset
        ordinal += 1
        if on_progress is not None:
            on_progress(min(offset, buffer_length), buffer_length)


def lookup_frame(buffer, frame_number: int, decoder: Optional[Mp3Decoder] = None) -> FrameLookup:
    if frame_number < 1:
        raise InvalidFrameNumberError(frame_number)

    decoder = decoder or Mp3Decoder()
    first_frame = extract_tags_and_first_frame(buffer, decoder).first_frame
    if first_frame is None:
        return FrameLookup(LookupStatus.NOT_FOUND, frame_number, frames_seen=0)

    if frame_number == 1:
        return FrameLookup(LookupStatus.FOUND, 1, frame=first_frame, frames_seen=1)

    frames_seen = 1
    try:
        for ordinal, frame in iter_frames(
            buffer,
            first_frame.section.next_offset,
            decoder,
            last_ordinal=frame_number,
        ):
            frames_seen = ordinal
            if ordinal == frame_number:
                return FrameLookup(LookupStatus.FOUND, ordinal, frame=frame, frames_seen=frames_seen)
    except FrameReadError as e:
        return FrameLookup(LookupStatus.CORRUPT, frame_number, error=e, frames_seen=frames_seen)

    return FrameLookup(LookupStatus.NOT_FOUND, frame_number, frames_seen=frames_seen)


def summarize(
    buffer,
    decoder: Optional[Mp3Decoder] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> Summary:
    decoder = decoder or Mp3Decoder()
    extraction = extract_tags_and_first_frame(buffer, decoder)
    summary = Summary(file_size=len(buffer), tag_histogram=build_histogram(extraction.tags))

    if extraction.first_frame is None:
        return summary

    frame_histogram = build_histogram([extraction.first_frame])
    try:
        for _, frame in iter_frames(
            buffer,
            extraction.first_frame.section.next_offset,
            decoder,
            on_progress=on_progress,
        ):
            fold(frame_histogram, frame)
    except FrameReadError as e:
        summary.error = e
        return summary

    summary.frame_histogram = frame_histogram
    return summary


__all__ = [
    "extract_tags_and_first_frame",
    "iter_frames",
    "lookup_frame",
    "summarize",
]
