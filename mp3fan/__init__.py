"""
mp3fan - MP3 file inspector

Reports metadata tags, frame headers and frame-size statistics.
"""

from mp3fan.config import VERSION as __version__

__all__ = ['__version__']
