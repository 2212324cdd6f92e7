"""
Unit Models and Decoder Adapter

Bridges lexer output to the traversal engine.
"""

from .sections import (
    Section,
    FrameHeader,
    Tag,
    Frame,
    StructuralUnit
)

from .decoder import Mp3Decoder

__all__ = [
    'Section',
    'FrameHeader',
    'Tag',
    'Frame',
    'StructuralUnit',
    'Mp3Decoder'
]
