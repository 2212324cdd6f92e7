# mp3fan/mapping/decoder.py
"""
Decoder Adapter - lexer output to unit models

Wraps the frame and tag lexers behind the three operations the
traversal engine consumes:

    read_tags(buffer)            leading tags plus the first frame
    read_frame(buffer, offset)   exactly one frame at offset
    read_last_frame(buffer)      final frame of the buffer

Every read returns a Tag/Frame model or None; it never raises on bad data.
"""

from typing import List, Optional

from mp3fan.mapping.sections import Frame, FrameHeader, Section, StructuralUnit, Tag
from mp3fan.parser.frame_lexer import HEADER_SIZE, FrameHeaderToken, FrameLexer
from mp3fan.parser.tag_lexer import Id3v2Lexer, TagToken, XingLexer


def _tag_from_token(token: TagToken) -> Tag:
    section = Section(
        type="tag",
        offset=token.offset,
        byte_length=token.byte_length,
        next_offset=token.offset + token.byte_length,
    )
    return Tag(section=section, kind=token.kind, payload=token.fields)


def _frame_from_token(token: FrameHeaderToken) -> Frame:
    section = Section(
        type="frame",
        offset=token.offset,
        byte_length=token.byte_length,
        next_offset=token.next_offset,
    )
    return Frame(
        section=section,
        header=FrameHeader(**token.fields),
        sample_length=token.sample_length,
    )


class Mp3Decoder:
    """
    Stateless MP3 decoder

    Usage:
        decoder = Mp3Decoder()
        units = decoder.read_tags(data)
        frame = decoder.read_frame(data, units[-1].section.next_offset)
    """

    def read_frame(self, buffer, offset: int) -> Optional[Frame]:
        """
        Decode exactly one frame starting at offset

        Args:
            buffer: bytes-like MP3 data
            offset: Position of the frame header

        Returns:
            Frame or None if no valid header is at offset
        """
        token = FrameLexer(buffer).lex_at(offset)
        if token is None:
            return None
        return _frame_from_token(token)

    def _read_first_frame(self, buffer, offset: int) -> Optional[Frame]:
        # while scanning junk, a sync word only counts if another frame
        # (or the end of the buffer) follows it
        lexer = FrameLexer(buffer)
        token = lexer.lex_at(offset)
        if token is None:
            return None
        if token.next_offset < len(buffer) and lexer.lex_at(token.next_offset) is None:
            return None
        return _frame_from_token(token)

    def _read_id3v2(self, buffer, offset: int) -> Optional[Tag]:
        token = Id3v2Lexer(buffer).lex_at(offset)
        return _tag_from_token(token) if token else None

    def _read_xing(self, buffer, offset: int) -> Optional[Tag]:
        token = XingLexer(buffer).lex_at(offset)
        return _tag_from_token(token) if token else None

    def read_tags(self, buffer, offset: int = 0) -> List[StructuralUnit]:
        """
        Decode every tag from offset on, up to and including the first frame

        Returns:
            List of Tag models, ending with the first Frame if one exists
        """
        readers = (self._read_id3v2, self._read_xing, self._read_first_frame)
        units: List[StructuralUnit] = []
        buffer_length = len(buffer)

        while offset < buffer_length:
            unit = None
            for reader in readers:
                unit = reader(buffer, offset)
                if unit is not None:
                    break

            if unit is None:
                offset += 1
                continue

            units.append(unit)
            if isinstance(unit, Frame):
                break
            offset = unit.section.next_offset

        return units

    def read_last_frame(self, buffer) -> Optional[Frame]:
        """
        Scan backwards for the last frame that fits inside the buffer
        """
        lexer = FrameLexer(buffer)
        buffer_length = len(buffer)
        for offset in range(buffer_length - HEADER_SIZE, -1, -1):
            token = lexer.lex_at(offset)
            if token is not None and token.next_offset <= buffer_length:
                return _frame_from_token(token)
        return None


__all__ = [
    'Mp3Decoder',
]
