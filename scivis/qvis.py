"""Reader for QVis ``.dat`` volume descriptions and their raw voxel files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

import numpy as np

from scivis.volume import Volume

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_EIGHT_BIT_FORMATS = {"char", "uchar", "byte"}


class QVisFileError(Exception):
    """Raised when a QVis description or its data cannot be read."""


@dataclass(frozen=True)
class DatLine:
    """One ``key: value`` line, trimmed and lower-cased."""

    id: str = ""
    value: str = ""


def parse_dat_line(line):
    """Split a line at its first colon; lines without one give empty fields."""
    key, sep, value = line.partition(":")
    if not sep:
        return DatLine()
    return DatLine(key.strip().lower(), value.strip().lower())


def _parse_int(token):
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(token)
    number = int(match.group())
    if number < 0:
        raise ValueError(token)
    return number


def _parse_float(token):
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ValueError(token)
    return float(match.group())


def _read_raw(raw_filename, volume, needs_conversion):
    try:
        with open(raw_filename, "rb") as raw_file:
            raw = raw_file.read()
    except OSError:
        raise QVisFileError(f"Unable to read file {raw_filename}") from None

    if not needs_conversion:
        return np.frombuffer(raw, dtype=np.uint8).copy()

    # Anything that is not 8 bit is taken to be 16 bit little endian.
    count = volume.voxel_count
    buffer = raw[: count * 2].ljust(count * 2, b"\0")
    values = np.frombuffer(buffer, dtype="<u2").astype(np.int64)
    if count == 0:
        return np.zeros(0, dtype=np.uint8)
    low, high = int(values.min()), int(values.max())
    return (((values - low) * 255) // (1 + high - low)).astype(np.uint8)


def load_qvis(filename):
    """Load the volume described by a QVis ``.dat`` file."""
    try:
        with open(filename, encoding="latin-1") as dat_file:
            lines = dat_file.read().splitlines()
    except OSError:
        raise QVisFileError(f"Unable to read file {filename}") from None

    volume = Volume()
    needs_conversion = False
    raw_filename = ""
    parent = os.path.dirname(os.fspath(filename))

    for line in lines:
        entry = parse_dat_line(line)
        if entry.id == "objectfilename":
            raw_filename = f"{parent}/{entry.value}" if parent else entry.value
        elif entry.id == "resolution":
            tokens = entry.value.split()
            if len(tokens) != 3:
                raise QVisFileError("invalid resolution tag")
            try:
                volume.width, volume.height, volume.depth = (
                    _parse_int(t) for t in tokens
                )
            except ValueError:
                raise QVisFileError("invalid resolution tag") from None
        elif entry.id == "slicethickness":
            tokens = entry.value.split()
            if len(tokens) != 3:
                raise QVisFileError("invalid slicethickness tag")
            try:
                volume.scale = tuple(_parse_float(t) for t in tokens)
                volume.normalize_scale()
            except ValueError:
                raise QVisFileError("invalid slicethickness tag") from None
        elif entry.id == "format":
            if entry.value not in _EIGHT_BIT_FORMATS:
                needs_conversion = True
        elif entry.id == "endianess":
            if entry.value != "little":
                raise QVisFileError(
                    "only little endian data supported by this mini-reader"
                )

    if not raw_filename:
        raise QVisFileError("object filename not found")

    volume.data = _read_raw(raw_filename, volume, needs_conversion)
    try:
        volume.compute_normals()
    except ValueError:
        raise QVisFileError("raw data is smaller than the resolution") from None
    return volume