"""
Report Generation

Console rendering of tags, frames and histograms.
"""

from .console_report import (
    ConsoleReport,
    Inspector,
    print_error
)

from .progress import ProgressRenderer

__all__ = [
    'ConsoleReport',
    'Inspector',
    'print_error',
    'ProgressRenderer'
]
