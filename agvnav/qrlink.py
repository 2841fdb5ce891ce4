"""Line-based link carrying marker readings from the camera."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT_RANGE = 2**32
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass
class QrData:
    """One marker reading: marker id, image position and angle."""

    id: int
    x: int
    y: int
    angle: float


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _index_of(text: str, char: str, start: int) -> int:
    if start >= len(text):
        return -1
    return text.find(char, start)


def _substring(text: str, left: int, right: int | None = None) -> str:
    if right is None:
        right = len(text)
    left %= _UINT_RANGE
    right %= _UINT_RANGE
    if left > right:
        left, right = right, left
    if left >= len(text):
        return ""
    return text[left:min(right, len(text))]


def parse_qr_line(line: str) -> QrData:
    """Parse an "id,x,y,angle" line; missing or bad fields follow lenient rules.

    Each field is read as a leading integer (0 when absent); the angle is
    read as an integer too.
    """
    c1 = _index_of(line, ",", 0)
    c2 = _index_of(line, ",", c1 + 1)
    c3 = _index_of(line, ",", c2 + 1)
    return QrData(
        id=_to_int(_substring(line, 0, c1)),
        x=_to_int(_substring(line, c1 + 1, c2)),
        y=_to_int(_substring(line, c2 + 1, c3)),
        angle=float(_to_int(_substring(line, c3 + 1))),
    )


class QrLink:
    """Buffers incoming bytes and hands them out as parsed readings."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def feed(self, data: bytes | str) -> None:
        """Append received data to the buffer."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.extend(data)

    def available(self) -> bool:
        return bool(self._buffer)

    def read(self) -> QrData:
        """Take one line (up to a newline, or all that is buffered) and parse it.

        With nothing buffered the line is empty and every field reads as 0.
        """
        end = self._buffer.find(b"\n")
        if end < 0:
            raw = bytes(self._buffer)
            self._buffer.clear()
        else:
            raw = bytes(self._buffer[:end])
            del self._buffer[: end + 1]
        return parse_qr_line(raw.decode("utf-8", errors="replace"))