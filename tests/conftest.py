import struct

import pytest

# MPEG1 Layer III, 32 kbps, 44100 Hz, mono, no CRC : 144 * 32000 // 44100 = 104 bytes
FRAME_HEADER = bytes([0xFF, 0xFB, 0x10, 0xC0])
PADDED_FRAME_HEADER = bytes([0xFF, 0xFB, 0x12, 0xC0])
FRAME_SIZE = 104
TAG_SIZE = 50


def syncsafe(n):
    return bytes([(n >> 21) & 0x7F, (n >> 14) & 0x7F, (n >> 7) & 0x7F, n & 0x7F])


def make_frame(header=FRAME_HEADER, size=FRAME_SIZE):
    return header + bytes(size - len(header))


def make_id3v2(total_length=TAG_SIZE, title=b"Hello"):
    body = b"TIT2" + struct.pack(">I", len(title) + 1) + b"\x00\x00" + b"\x00" + title
    size = total_length - 10
    return b"ID3\x03\x00\x00" + syncsafe(size) + body.ljust(size, b"\x00")


def make_xing_frame(frame_count=3, byte_count=312):
    # mono MPEG1 side info is 17 bytes
    body = (
        bytes(17)
        + b"Xing"
        + struct.pack(">I", 0x03)
        + struct.pack(">I", frame_count)
        + struct.pack(">I", byte_count)
        + b"LAME3.100"
    )
    return (FRAME_HEADER + body).ljust(FRAME_SIZE, b"\x00")


@pytest.fixture
def tagged_mp3():
    """One 50 byte ID3v2 tag followed by three 104 byte frames"""
    return make_id3v2() + make_frame() * 3


@pytest.fixture
def corrupt_mp3():
    """Tag, two frames, then 104 bytes that are not a frame, then a frame"""
    return make_id3v2() + make_frame() * 2 + bytes(FRAME_SIZE) + make_frame()


@pytest.fixture
def mp3_file(tmp_path, tagged_mp3):
    path = tmp_path / "song.mp3"
    path.write_bytes(tagged_mp3)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MP3FAN_PROGRESS", "MP3FAN_COLOR", "MP3FAN_INSPECT_DEPTH", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
