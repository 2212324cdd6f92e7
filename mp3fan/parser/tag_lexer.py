import io
import struct
from typing import Optional

from mutagen import MutagenError
from mutagen.id3 import ID3

from mp3fan.parser.frame_lexer import FrameLexer, side_info_size

ID3V2_HEADER_SIZE = 10
ID3V2_FOOTER_SIZE = 10

XING_FRAMES_FLAG = 0x01
XING_BYTES_FLAG = 0x02
XING_TOC_FLAG = 0x04
XING_QUALITY_FLAG = 0x08
XING_TOC_SIZE = 100


def decode_syncsafe(data: bytes) -> Optional[int]:
    """Decodes a 4 byte syncsafe integer, None if any byte has its high bit set"""
    value = 0
    for b in data:
        if b & 0x80:
            return None
        value = (value << 7) | b
    return value


class TagToken:
    def __init__(self, kind: str, offset: int, byte_length: int, fields: dict):
        self.kind = kind
        self.offset = offset
        self.byte_length = byte_length
        self.fields = fields

    def __repr__(self):
        return f"TagToken(Kind:[{self.kind}] , Offset:[{self.offset}] , LEN:[{self.byte_length}])"


class Id3v2Lexer:
    def __init__(self, data):
        self.data = memoryview(data)

    def lex_at(self, pos) -> Optional[TagToken]:
        """
        Header Pattern : 'ID3' MAJOR REV FLAGS SIZE(4, syncsafe)
        """
        if pos < 0 or pos + ID3V2_HEADER_SIZE > len(self.data):
            return None

        header = self.data[pos:pos + ID3V2_HEADER_SIZE].tobytes()
        if header[:3] != b"ID3":
            return None

        major, revision, flags = header[3], header[4], header[5]
        if major not in (2, 3, 4) or revision == 0xFF:
            return None

        size = decode_syncsafe(header[6:10])
        if size is None:
            return None

        has_footer = major == 4 and bool(flags & 0x10)
        byte_length = ID3V2_HEADER_SIZE + size + (ID3V2_FOOTER_SIZE if has_footer else 0)

        fields = {
            'header': {
                'major_version': major,
                'minor_revision': revision,
                'flags_octet': flags,
                'unsynchronisation_flag': bool(flags & 0x80),
                'extended_header_flag': bool(flags & 0x40),
                'experimental_indicator_flag': bool(flags & 0x20),
                'footer_present_flag': has_footer,
                'size': size,
            },
            'frames': self.decode_frames(pos, byte_length),
        }
        return TagToken('ID3v2', pos, byte_length, fields)

    def decode_frames(self, pos, byte_length) -> list:
        raw = self.data[pos:pos + byte_length].tobytes()
        try:
            tags = ID3(io.BytesIO(raw), load_v1=False)
        except MutagenError:
            # body unreadable, the tag still spans byte_length
            return []

        frames = []
        for frame in tags.values():
            _, _, content = frame.pprint().partition("=")
            frames.append({'id': frame.FrameID, 'content': content})
        return frames


class XingLexer:
    """
    Xing / Info tags live inside the first audio frame, after the side information
    """
    def __init__(self, data):
        self.data = memoryview(data)
        self.frames = FrameLexer(data)

    def read_u32(self, pos) -> Optional[int]:
        if pos + 4 > len(self.data):
            return None
        return struct.unpack(">I", self.data[pos:pos + 4].tobytes())[0]

    def lex_at(self, pos) -> Optional[TagToken]:
        frame = self.frames.lex_at(pos)
        if frame is None:
            return None

        version_bits = int(frame.fields['mpeg_audio_version_bits'], 2)
        channel_mode_bits = int(frame.fields['channel_mode_bits'], 2)
        marker_pos = pos + 4 + side_info_size(version_bits, channel_mode_bits)
        marker = self.data[marker_pos:marker_pos + 4].tobytes()
        if marker not in (b"Xing", b"Info"):
            return None

        cursor = marker_pos + 4
        flags = self.read_u32(cursor)
        if flags is None:
            return None
        cursor += 4

        fields = {
            'identifier': marker.decode('ascii'),
            'flags': flags,
            'frames': None,
            'bytes': None,
            'has_toc': bool(flags & XING_TOC_FLAG),
            'quality': None,
            'encoder': None,
        }
        if flags & XING_FRAMES_FLAG:
            fields['frames'] = self.read_u32(cursor)
            cursor += 4
        if flags & XING_BYTES_FLAG:
            fields['bytes'] = self.read_u32(cursor)
            cursor += 4
        if flags & XING_TOC_FLAG:
            cursor += XING_TOC_SIZE
        if flags & XING_QUALITY_FLAG:
            fields['quality'] = self.read_u32(cursor)
            cursor += 4

        encoder = self.data[cursor:cursor + 9].tobytes()
        if encoder[:4] in (b"LAME", b"Lavf", b"Lavc"):
            fields['encoder'] = encoder.decode('latin1').rstrip("\x00 ")

        return TagToken(fields['identifier'], pos, frame.byte_length, fields)
