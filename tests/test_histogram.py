from mp3fan.mapping.decoder import Mp3Decoder
from mp3fan.traversal.histogram import build_histogram, fold, total

from conftest import PADDED_FRAME_HEADER, make_frame


def _frames(data):
    decoder = Mp3Decoder()
    frames, offset = [], 0
    while offset < len(data):
        frame = decoder.read_frame(data, offset)
        frames.append(frame)
        offset = frame.section.next_offset
    return frames


def test_fold_counts_by_byte_length():
    frames = _frames(make_frame() + make_frame(PADDED_FRAME_HEADER, 105) + make_frame())
    histogram = {}
    for frame in frames:
        fold(histogram, frame)
    assert histogram == {104: 2, 105: 1}
    assert list(histogram) == [104, 105]


def test_total_matches_units_folded():
    frames = _frames(make_frame() * 5 + make_frame(PADDED_FRAME_HEADER, 105) * 2)
    histogram = build_histogram(frames)
    assert total(histogram) == len(frames) == 7


def test_empty_histogram():
    assert build_histogram([]) == {}
    assert total({}) == 0
