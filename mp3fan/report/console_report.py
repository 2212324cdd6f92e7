"""
Console Report - human readable output for mp3fan

Renders tags, frames and byte-length histograms the way the CLI
prints them. Objects are shown in a compact, coloured, inspect-like
form; colour is dropped entirely when disabled.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterable, List, Optional, TextIO

from colorama import Fore, Style
from pydantic import BaseModel

from mp3fan.config import DEFAULT_INSPECT_DEPTH, HEADING_WIDTH
from mp3fan.traversal.histogram import ByteLengthHistogram, total

LINE_WIDTH = 72
INDENT = "  "

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class Colors:
    """Color palette for inspect-style rendering"""
    NUMBER = Fore.YELLOW
    BOOLEAN = Fore.YELLOW
    STRING = Fore.GREEN
    NULL = Style.BRIGHT
    SPECIAL = Fore.CYAN
    ERROR = Fore.RED
    RESET = Style.RESET_ALL


def visible_width(text: str) -> int:
    """Printable width ignoring ANSI codes"""
    return len(_ANSI_RE.sub("", text))


def format_number(value: int) -> str:
    return f"{value:,}"


class Inspector:
    """Renders nested values like a debugger would"""

    def __init__(self, color: bool = True, depth: int = DEFAULT_INSPECT_DEPTH):
        self.color = color
        self.depth = depth

    def paint(self, text: str, color: str) -> str:
        if self.color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def inspect(self, value: Any) -> str:
        return self._format(value, 0)

    def _format(self, value: Any, level: int) -> str:
        if isinstance(value, BaseModel):
            body = self._format(value.model_dump(), level)
            return f"{type(value).__name__} {body}"
        if value is None:
            return self.paint("null", Colors.NULL)
        if isinstance(value, bool):
            return self.paint(str(value).lower(), Colors.BOOLEAN)
        if isinstance(value, (int, float)):
            return self.paint(str(value), Colors.NUMBER)
        if isinstance(value, str):
            return self.paint(repr(value), Colors.STRING)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.paint(f"<Buffer {bytes(value[:16]).hex(' ')}{' ...' if len(value) > 16 else ''}>", Colors.SPECIAL)
        if isinstance(value, dict):
            if level >= self.depth:
                return self.paint("[Object]", Colors.SPECIAL)
            entries = [f"{key}: {self._format(item, level + 1)}" for key, item in value.items()]
            return self._wrap("{", entries, "}", level)
        if isinstance(value, (list, tuple)):
            if level >= self.depth:
                return self.paint("[Array]", Colors.SPECIAL)
            entries = [self._format(item, level + 1) for item in value]
            return self._wrap("[", entries, "]", level)
        return self.paint(repr(value), Colors.SPECIAL)

    def _wrap(self, opening: str, entries: List[str], closing: str, level: int) -> str:
        if not entries:
            return opening + closing
        single = f"{opening} {', '.join(entries)} {closing}"
        if "\n" not in single and visible_width(single) + len(INDENT) * level <= LINE_WIDTH:
            return single
        inner = INDENT * (level + 1)
        lines = [f"{inner}{entry}" for entry in entries]
        return opening + "\n" + ",\n".join(lines) + "\n" + INDENT * level + closing


class ConsoleReport:
    """
    Console printer for the CLI commands

    Usage:
        report = ConsoleReport(color=False)
        report.print_unit(frame, "First Frame")
        report.print_summary("Frame", {104: 3})
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True,
                 depth: int = DEFAULT_INSPECT_DEPTH):
        self.stream = stream
        self.inspector = Inspector(color=color, depth=depth)

    def _out(self) -> TextIO:
        # resolved per call so redirected stdout is honoured
        return self.stream if self.stream is not None else sys.stdout

    def line(self, text: str = "") -> None:
        print(text, file=self._out())

    def print_heading(self, heading: str) -> None:
        self.line("=" * HEADING_WIDTH)
        self.line(f" {heading}")
        self.line("=" * HEADING_WIDTH)

    def print_tags(self, tags: Iterable[BaseModel]) -> None:
        tags = list(tags)
        self.print_heading("Tags")
        if tags:
            self.line(self.inspector.inspect(tags) + "\n")
        else:
            self.line("not exist")

    def print_unit(self, unit: Optional[BaseModel], description: str) -> None:
        self.print_heading(description)
        if unit is not None:
            self.line(self.inspector.inspect(unit) + "\n")
        else:
            self.line("not exist\n")

    def print_file_size(self, file_size: int) -> None:
        self.line(f"File size: {format_number(file_size)} byte\n")

    def print_summary(self, kind: str, histogram: ByteLengthHistogram) -> None:
        self.print_heading(f"{kind} Summary")
        for byte_length, count in histogram.items():
            self.line(f"Frames of {format_number(byte_length)} byte: {format_number(count)}")
        self.line(f"total Frames: {format_number(total(histogram))}\n")

    def print_hexdump(self, lines: Iterable[str]) -> None:
        for text in lines:
            self.line(text)
        self.line()


def print_error(message: str, color: bool = False) -> None:
    """Diagnostics go to stderr"""
    if color:
        message = f"{Colors.ERROR}{message}{Colors.RESET}"
    print(message, file=sys.stderr)


__all__ = [
    'Inspector',
    'ConsoleReport',
    'print_error',
    'format_number',
    'visible_width',
]
