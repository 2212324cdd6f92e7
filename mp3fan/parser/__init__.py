"""
Byte-level lexers for MP3 data

Frame headers, ID3v2 tags and Xing/Info tags.
"""

from .file_loader import (
    read_binary_file,
    format_hexdump
)

from .frame_lexer import (
    FrameHeaderToken,
    FrameLexer
)

from .tag_lexer import (
    TagToken,
    Id3v2Lexer,
    XingLexer
)

__all__ = [
    'read_binary_file',
    'format_hexdump',
    'FrameHeaderToken',
    'FrameLexer',
    'TagToken',
    'Id3v2Lexer',
    'XingLexer'
]
