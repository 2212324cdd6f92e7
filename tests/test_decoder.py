import pytest
from pydantic import ValidationError

from mp3fan.mapping.decoder import Mp3Decoder
from mp3fan.mapping.sections import Frame, Section, Tag

from conftest import PADDED_FRAME_HEADER, make_frame, make_id3v2, make_xing_frame


def test_read_tags_stops_at_first_frame(tagged_mp3):
    units = Mp3Decoder().read_tags(tagged_mp3)
    assert len(units) == 2
    tag, frame = units
    assert isinstance(tag, Tag)
    assert tag.kind == 'ID3v2'
    assert tag.section == Section(type="tag", offset=0, byte_length=50, next_offset=50)
    assert isinstance(frame, Frame)
    assert frame.section == Section(type="frame", offset=50, byte_length=104, next_offset=154)


def test_read_tags_with_xing_tag():
    data = make_id3v2() + make_xing_frame() + make_frame() * 3
    units = Mp3Decoder().read_tags(data)
    assert [type(u).__name__ for u in units] == ['Tag', 'Tag', 'Frame']
    assert units[1].kind == 'Xing'
    assert units[1].section.byte_length == 104
    assert units[2].section.offset == 154


def test_read_tags_skips_leading_junk():
    data = b"\x00\x01\x02junk" + make_frame() * 2
    units = Mp3Decoder().read_tags(data)
    assert len(units) == 1
    assert units[0].section.offset == 7


def test_read_tags_ignores_false_sync_in_junk():
    # a lone valid header followed by garbage is not taken as the first frame
    data = make_frame()[:104] + b"\x01" * 20 + make_frame() * 2
    units = Mp3Decoder().read_tags(data)
    assert units[0].section.offset == 124


def test_read_tags_empty_buffer():
    assert Mp3Decoder().read_tags(b"") == []


def test_read_tags_only_tag():
    units = Mp3Decoder().read_tags(make_id3v2())
    assert len(units) == 1
    assert isinstance(units[0], Tag)


def test_read_frame(tagged_mp3):
    decoder = Mp3Decoder()
    frame = decoder.read_frame(tagged_mp3, 154)
    assert frame.section.offset == 154
    assert frame.header.bitrate == 32
    assert frame.sample_length == 1152
    assert decoder.read_frame(tagged_mp3, 10) is None
    assert decoder.read_frame(tagged_mp3, len(tagged_mp3)) is None


def test_read_last_frame(tagged_mp3):
    frame = Mp3Decoder().read_last_frame(tagged_mp3)
    assert frame.section.offset == 50 + 2 * 104
    assert frame.section.next_offset == len(tagged_mp3)


def test_read_last_frame_mixed_sizes():
    data = make_frame() + make_frame(PADDED_FRAME_HEADER, 105)
    frame = Mp3Decoder().read_last_frame(data)
    assert frame.section.offset == 104
    assert frame.section.byte_length == 105


def test_read_last_frame_without_frames():
    assert Mp3Decoder().read_last_frame(make_id3v2()) is None
    assert Mp3Decoder().read_last_frame(b"") is None


def test_section_rejects_inconsistent_next_offset():
    with pytest.raises(ValidationError):
        Section(type="frame", offset=10, byte_length=104, next_offset=100)
    with pytest.raises(ValidationError):
        Section(type="frame", offset=0, byte_length=0, next_offset=0)
