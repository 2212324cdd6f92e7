#!/usr/bin/env python3
"""mp3fan command-line workflows and reusable helpers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional

from colorama import just_fix_windows_console
from pydantic import ValidationError

from mp3fan.config import PROGRAM_NAME, VERSION, Settings
from mp3fan.errors import BufferReadError, InvalidFrameNumberError
from mp3fan.mapping.decoder import Mp3Decoder
from mp3fan.mapping.sections import Frame
from mp3fan.parser.file_loader import format_hexdump, read_binary_file
from mp3fan.report.console_report import ConsoleReport, print_error
from mp3fan.report.progress import ProgressRenderer
from mp3fan.traversal.engine import extract_tags_and_first_frame, lookup_frame, summarize
from mp3fan.traversal.results import Extraction, FrameLookup, LookupStatus, Summary

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class InfoResult:
    """Detail view of one file."""

    extraction: Extraction
    last_frame: Optional[Frame]


def run_info(path: str, decoder: Optional[Mp3Decoder] = None) -> InfoResult:
    decoder = decoder or Mp3Decoder()
    buffer = read_binary_file(path)
    extraction = extract_tags_and_first_frame(buffer, decoder)
    return InfoResult(extraction=extraction, last_frame=decoder.read_last_frame(buffer))


def run_summary(path: str, settings: Optional[Settings] = None) -> Summary:
    settings = settings or Settings()
    buffer = read_binary_file(path)
    progress = ProgressRenderer(enabled=settings.progress)
    try:
        return summarize(buffer, on_progress=progress)
    finally:
        progress.finish()


def run_frame(path: str, frame_number: int) -> tuple:
    if frame_number < 1:
        raise InvalidFrameNumberError(frame_number)
    buffer = read_binary_file(path)
    return lookup_frame(buffer, frame_number), buffer


def _print_info(result: InfoResult, report: ConsoleReport) -> int:
    report.print_tags(result.extraction.tags)
    report.print_unit(result.extraction.first_frame, "First Frame")
    report.print_unit(result.last_frame, "Last Frame")
    return EXIT_OK


def _print_summary(summary: Summary, report: ConsoleReport, color: bool) -> int:
    report.print_file_size(summary.file_size)
    report.print_summary("Tag", summary.tag_histogram)
    if summary.error is not None:
        print_error(str(summary.error), color)
        return EXIT_FAILURE
    report.print_summary("Frame", summary.frame_histogram)
    return EXIT_OK


def _print_frame(lookup: FrameLookup, buffer, report: ConsoleReport, color: bool,
                 hexdump: bool = False) -> int:
    if lookup.status is LookupStatus.CORRUPT:
        print_error(str(lookup.error), color)
        return EXIT_FAILURE

    if lookup.status is LookupStatus.NOT_FOUND:
        if lookup.frames_seen == 0:
            report.line("Frame not found in the file.")
        else:
            report.line(f"Frame number {lookup.ordinal} not found in the file.")
        return EXIT_OK

    report.print_unit(lookup.frame, f"Frame {lookup.ordinal}")
    if hexdump:
        section = lookup.frame.section
        report.print_hexdump(format_hexdump(
            buffer[section.offset:section.next_offset], base_offset=section.offset
        ))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s <command> [args]",
        description="Inspect tags, frame headers and frame sizes of MP3 files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mp3fan info song.mp3
  mp3fan summary song.mp3
  mp3fan frame song.mp3 42 --hexdump
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar for frame walks")

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.required = True

    info = commands.add_parser(
        "info",
        help="Display detail information about the tag and the first and last frames of an MP3 file",
    )
    info.add_argument("file", help="Path to the MP3 file")

    summary = commands.add_parser(
        "summary", help="Display summary of the byte lengths by type for an MP3 file"
    )
    summary.add_argument("file", help="Path to the MP3 file")

    frame = commands.add_parser(
        "frame", help="Display detailed information for the specified frame of an MP3 file"
    )
    frame.add_argument("file", help="Path to the MP3 file")
    frame.add_argument("frame_number", metavar="frameNumber", type=int,
                       help="Frame number to display information")
    frame.add_argument("--hexdump", action="store_true", help="Also dump the raw frame bytes")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValidationError as e:
        print_error(f"Invalid environment settings: {e}")
        return EXIT_FAILURE

    if args.progress:
        settings.progress = True
    color = settings.color and not args.no_color and sys.stdout.isatty()
    if color:
        just_fix_windows_console()
    report = ConsoleReport(color=color, depth=settings.inspect_depth)

    try:
        if args.command == "info":
            return _print_info(run_info(args.file), report)

        if args.command == "summary":
            return _print_summary(run_summary(args.file, settings), report, color)

        if args.command == "frame":
            lookup, buffer = run_frame(args.file, args.frame_number)
            return _print_frame(lookup, buffer, report, color, hexdump=args.hexdump)
    except InvalidFrameNumberError:
        print_error("Please specify a valid frame number (greater than 0).", color)
        return EXIT_FAILURE
    except BufferReadError as e:
        print_error(str(e), color)
        return EXIT_FAILURE

    parser.print_help()
    return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
