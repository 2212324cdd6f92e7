"""
Byte-length histograms

A histogram is a plain insertion-ordered dict mapping a unit's
byte length to the number of units seen with that length.
"""

from typing import Dict, Iterable

from mp3fan.mapping.sections import StructuralUnit

ByteLengthHistogram = Dict[int, int]


def fold(histogram: ByteLengthHistogram, unit: StructuralUnit) -> None:
    """Count one unit under its section byte length"""
    byte_length = unit.section.byte_length
    histogram[byte_length] = histogram.get(byte_length, 0) + 1


def total(histogram: ByteLengthHistogram) -> int:
    """Number of units folded into the histogram"""
    return sum(histogram.values())


def build_histogram(units: Iterable[StructuralUnit]) -> ByteLengthHistogram:
    histogram: ByteLengthHistogram = {}
    for unit in units:
        fold(histogram, unit)
    return histogram


__all__ = [
    'ByteLengthHistogram',
    'fold',
    'total',
    'build_histogram',
]
