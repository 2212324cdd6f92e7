# here is the code of the mp3 file loader

from pathlib import Path
from typing import Union

from mp3fan.errors import BufferReadError


def read_binary_file(filepath: Union[str, Path]) -> bytes:
    try:
        with open(filepath, 'rb') as f:
            return f.read()
    except OSError as e:
        raise BufferReadError(str(filepath), e.strerror or str(e)) from e


def format_hexdump(data, base_offset: int = 0, width: int = 16) -> list:
    """
    Hexdump lines : OFFSET  HEX BYTES  |ASCII|
    """
    lines = []
    for off in range(0, len(data), width):
        chunk = data[off:off + width]
        hex_byte = " ".join(f"{b:02X}" for b in chunk)
        pad = (width - len(chunk)) * 3
        ascii_repr = "".join((chr(b) if 32 <= b < 127 else ".") for b in chunk)
        lines.append(f"{base_offset + off:08X} {hex_byte}{' ' * pad} |{ascii_repr}|")
    return lines

