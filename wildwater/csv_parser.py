"""Parsing of semicolon-separated water network lines."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from wildwater.avl import MAX_ID_LEN

MAX_LINE_LENGTH = 1024
FIELD_DELIMITER = ";"
MISSING = -1.0

_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_LINE_END = re.compile(r"[\r\n]")


class LineType(IntEnum):
    """Kind of network line."""

    UNKNOWN = 0
    PLANT = 1
    CAPTURE = 2
    STORAGE_INBOUND = 3
    MAIN_DISTRIBUTION = 4
    SECONDARY_DISTRIBUTION = 5
    CONNECTION = 6


@dataclass
class Segment:
    """One parsed line: identifiers are empty when missing, numbers -1.0."""

    plant_id: str = ""
    upstream_id: str = ""
    downstream_id: str = ""
    volume_or_capacity: float = MISSING
    leak_percentage: float = MISSING
    type: LineType = LineType.CAPTURE


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float(token: Optional[str]) -> float:
    """Read the leading number of a token; None or '-' gives -1.0, no number 0.0."""
    if token is None or token == "-":
        return MISSING
    match = _NUMBER.match(token)
    if match is None:
        return 0.0
    return _to_float32(float(match.group(1)))


def _identifier(token: str) -> str:
    return "" if token == "-" else token[: MAX_ID_LEN - 1]


def parse_csv_line(line: Optional[str]) -> Segment:
    """Parse one line into a Segment; raise ValueError if empty or too long."""
    if line is None or not line or len(line) >= MAX_LINE_LENGTH:
        raise ValueError("line is empty or too long")

    text = _LINE_END.split(line, maxsplit=1)[0]
    tokens = [t.lstrip(" ") for t in text.split(FIELD_DELIMITER) if t]

    def column(index: int) -> Optional[str]:
        return tokens[index] if index < len(tokens) else None

    segment = Segment(
        plant_id=_identifier(column(0) or "-"),
        upstream_id=_identifier(column(1) or "-") if column(1) is not None else "",
        downstream_id=_identifier(column(2)) if column(2) is not None else "",
        volume_or_capacity=parse_float(column(3)),
        leak_percentage=parse_float(column(4)),
    )
    if column(0) is not None:
        segment.plant_id = _identifier(column(0))
    if column(1) is not None:
        segment.upstream_id = _identifier(column(1))

    if (
        segment.volume_or_capacity != MISSING
        and not segment.downstream_id
        and segment.leak_percentage == MISSING
    ):
        segment.type = LineType.PLANT
    else:
        segment.type = LineType.CAPTURE
    return segment