import io

from mp3fan.config import Settings
from mp3fan.parser.file_loader import format_hexdump
from mp3fan.report.console_report import ConsoleReport, Inspector, visible_width
from mp3fan.report.progress import ProgressRenderer


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_inspect_plain_values():
    inspector = Inspector(color=False)
    assert inspector.inspect({'a': 1, 'b': 'x', 'c': None, 'd': True}) == "{ a: 1, b: 'x', c: null, d: true }"
    assert inspector.inspect([]) == "[]"


def test_inspect_depth_limit():
    inspector = Inspector(color=False, depth=1)
    assert inspector.inspect({'a': {'b': 1}, 'c': [1]}) == "{ a: [Object], c: [Array] }"


def test_inspect_wraps_long_objects():
    inspector = Inspector(color=False)
    text = inspector.inspect({f"key_{i}": "value" * 3 for i in range(6)})
    lines = text.splitlines()
    assert lines[0] == "{"
    assert lines[1] == "  key_0: 'valuevaluevalue',"
    assert lines[-1] == "}"


def test_inspect_colors():
    text = Inspector(color=True).inspect({'n': 5})
    assert "\x1b[" in text
    assert visible_width(text) == len("{ n: 5 }")


def test_report_heading_and_missing_unit():
    stream = io.StringIO()
    report = ConsoleReport(stream=stream, color=False)
    report.print_unit(None, "Last Frame")
    assert stream.getvalue() == (
        "====================================\n"
        " Last Frame\n"
        "====================================\n"
        "not exist\n\n"
    )


def test_report_summary_block():
    stream = io.StringIO()
    ConsoleReport(stream=stream, color=False).print_summary("Frame", {417: 2500, 418: 12})
    lines = stream.getvalue().splitlines()
    assert lines[3:] == [
        "Frames of 417 byte: 2,500",
        "Frames of 418 byte: 12",
        "total Frames: 2,512",
        "",
    ]


def test_hexdump_lines():
    assert format_hexdump(b"ABC", base_offset=16) == ["00000010 41 42 43" + " " * 39 + " |ABC|"]
    lines = format_hexdump(bytes(range(20)))
    assert len(lines) == 2
    assert lines[1].startswith("00000010 10 11 12 13")


def test_progress_disabled_without_tty():
    stream = io.StringIO()
    progress = ProgressRenderer(enabled=True, stream=stream)
    progress(50, 100)
    progress.finish()
    assert stream.getvalue() == ""


def test_progress_draws_on_tty():
    stream = FakeTTY()
    progress = ProgressRenderer(enabled=True, stream=stream)
    progress(50, 100)
    progress(100, 100)
    out = stream.getvalue()
    assert " 50.00%" in out
    assert "100.00%" in out
    assert out.endswith("\n")


def test_settings_from_env():
    assert Settings.from_env({}) == Settings(progress=False, color=True, inspect_depth=10)
    assert Settings.from_env({"MP3FAN_PROGRESS": "yes"}).progress is True
    assert Settings.from_env({"NO_COLOR": ""}).color is False
    assert Settings.from_env({"MP3FAN_COLOR": "0"}).color is False
    assert Settings.from_env({"MP3FAN_INSPECT_DEPTH": "3"}).inspect_depth == 3
