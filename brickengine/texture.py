"""Loading of uncompressed Targa images into top-to-bottom RGBA pixels."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Union

_HEADER = struct.Struct("<12sHHBB")


class TargaError(ValueError):
    """The data is not a readable Targa image."""


def convert_to_32bit(data: bytes, width: int, height: int) -> bytes:
    """Expand 24-bit pixels to 32-bit, flipping row order, alpha fixed at 255."""
    row_in = width * 3
    if len(data) < row_in * height:
        raise TargaError("not enough pixel data for a 24-bit image")
    rows = []
    for y in range(height):
        row = data[y * row_in:(y + 1) * row_in]
        out = bytearray(b"\xff" * (width * 4))
        out[0::4] = row[0::3]
        out[1::4] = row[1::3]
        out[2::4] = row[2::3]
        rows.append(bytes(out))
    return b"".join(reversed(rows))


@dataclass(frozen=True)
class Texture:
    """Image as RGBA bytes, one row after another."""

    width: int
    height: int
    data: bytes

    @staticmethod
    def from_bytes(data: bytes) -> Texture:
        """Decode an uncompressed 32-bit (or 24-bit) Targa image."""
        if len(data) < _HEADER.size:
            raise TargaError("truncated Targa header")
        _, width, height, bpp, _ = _HEADER.unpack_from(data)
        body = data[_HEADER.size:]
        if bpp != 32:
            size = width * height * 3
            if len(body) < size:
                raise TargaError("truncated 24-bit image data")
            image = convert_to_32bit(body[:size], width, height)
        else:
            size = width * height * 4
            if len(body) < size:
                raise TargaError("truncated 32-bit image data")
            image = body[:size]

        row_len = width * 4
        rows = []
        for j in range(height):
            start = (height - 1 - j) * row_len
            row = image[start:start + row_len]
            out = bytearray(row_len)
            out[0::4] = row[2::4]
            out[1::4] = row[1::4]
            out[2::4] = row[0::4]
            out[3::4] = row[3::4]
            rows.append(bytes(out))
        return Texture(width, height, b"".join(rows))

    @staticmethod
    def from_file(path: Union[str, os.PathLike]) -> Texture:
        """Read and decode a Targa file."""
        with open(path, "rb") as handle:
            return Texture.from_bytes(handle.read())