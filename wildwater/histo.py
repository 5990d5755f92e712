"""Per-plant volume histograms built from network data."""

from __future__ import annotations

import math
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from wildwater.avl import PlantNode, PlantTree
from wildwater.csv_parser import (
    LineType,
    Segment,
    _to_float32,
    parse_csv_line,
)


class HistoMode(Enum):
    """Which plant quantity a histogram reports."""

    MAX = "max"
    SRC = "src"
    REAL = "real"


class HistoError(Exception):
    """Raised when histogram data cannot be read or written."""


_FILENAMES = {
    HistoMode.MAX: "vol_max.dat",
    HistoMode.SRC: "vol_captation.dat",
    HistoMode.REAL: "vol_traitement.dat",
}

_HEADERS = {
    HistoMode.MAX: "identifier;max volume (k.m3)",
    HistoMode.SRC: "identifier;source volume (k.m3)",
    HistoMode.REAL: "identifier;real volume (k.m3)",
}


def _resolve_mode(mode: Union[str, HistoMode]) -> HistoMode:
    try:
        return HistoMode(mode)
    except ValueError:
        raise HistoError(f"unknown mode {mode!r}") from None


def _metric(node: PlantNode, mode: HistoMode) -> int:
    if mode is HistoMode.MAX:
        return node.max_capacity
    if mode is HistoMode.SRC:
        return node.total_captured
    return node.real_treated


def update_plant_metrics(tree: PlantTree, segment: Segment) -> None:
    """Fold one parsed line into the plant it concerns."""
    if segment.plant_id:
        return
    if segment.type is LineType.PLANT:
        key = segment.upstream_id
    elif segment.type is LineType.CAPTURE:
        key = segment.downstream_id
    else:
        return
    if not key:
        return

    plant = tree.insert(key)
    volume = segment.volume_or_capacity
    if not (volume > 0 and math.isfinite(volume)):
        return

    if segment.type is LineType.PLANT:
        plant.max_capacity = int(volume)
        return

    captured = int(volume)
    plant.total_captured += captured
    if segment.leak_percentage >= 0:
        loss = _to_float32(segment.leak_percentage / 100.0)
        kept = _to_float32(1.0 - loss)
        treated = _to_float32(_to_float32(float(captured)) * kept)
        plant.real_treated += int(treated) if math.isfinite(treated) else 0
    else:
        plant.real_treated += captured


def build_plant_tree(lines: Iterable[str]) -> PlantTree:
    """Build the plant tree from lines, skipping those that cannot be parsed."""
    tree = PlantTree()
    for line in lines:
        try:
            segment = parse_csv_line(line)
        except ValueError:
            continue
        update_plant_metrics(tree, segment)
    return tree


def format_histo_results(tree: PlantTree, mode: Union[str, HistoMode]) -> str:
    """Render the histogram file: a header, then positive values by descending id."""
    resolved = _resolve_mode(mode)
    rows = [_HEADERS[resolved]]
    for node in tree.descending():
        value = _metric(node, resolved)
        if value > 0:
            rows.append(f"{node.id};{value}")
    return "\n".join(rows) + "\n"


def write_histo_results(
    tree: PlantTree,
    mode: Union[str, HistoMode],
    directory: Union[str, Path, None] = None,
) -> Path:
    """Write the histogram file for ``mode`` and return its path."""
    resolved = _resolve_mode(mode)
    filename = _FILENAMES[resolved]
    path = Path(directory) / filename if directory is not None else Path(filename)
    content = format_histo_results(tree, resolved)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise HistoError(f"cannot create output file {path}: {exc}") from exc
    print(f"Fichier '{filename}' généré avec succès.")
    return path


def handle_histo_data(
    mode: Union[str, HistoMode],
    data_filename: str,
    directory: Union[str, Path, None] = None,
) -> Path:
    """Read data (``-`` for standard input), build the histogram and write it."""
    resolved = _resolve_mode(mode)
    if data_filename == "-":
        tree = build_plant_tree(sys.stdin)
    else:
        try:
            with open(data_filename, encoding="utf-8", errors="replace") as stream:
                tree = build_plant_tree(stream)
        except OSError as exc:
            raise HistoError(f"cannot open data file {data_filename}: {exc}") from exc
    return write_histo_results(tree, resolved, directory)


_ = Optional