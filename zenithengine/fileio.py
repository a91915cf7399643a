"""Reading and writing resource files."""

from __future__ import annotations

import os
import struct

from zenithengine.exceptions import ResourceNotFoundError, ZenithError

# Marker appended after the payload by write_binary.
_END_MARKER = struct.pack("<i", 1)


class CannotOpenFileError(ZenithError):
    """A file could not be opened for writing."""

    type_name = "Cannot Open File"

    def __init__(self, path, *, line: int | None = None, file: str | None = None) -> None:
        super().__init__(line=line, file=file)
        self.path = os.fspath(path)

    def _details(self) -> list[str]:
        return [f"[Problem File] {self.path}"]


class CannotWriteFileError(ZenithError):
    """Writing to an opened file failed."""

    type_name = "Cannot Write File"

    def __init__(self, path, *, line: int | None = None, file: str | None = None) -> None:
        super().__init__(line=line, file=file)
        self.path = os.fspath(path)

    def _details(self) -> list[str]:
        return [f"[Problem File] {self.path}"]


def read_text(path) -> str:
    """Return the whole content of a text file."""
    try:
        with open(path, encoding="utf-8") as stream:
            return stream.read()
    except OSError as exc:
        raise ResourceNotFoundError(os.fspath(path)) from exc


def read_binary(path) -> bytes:
    """Return the whole content of a binary file."""
    try:
        with open(path, "rb") as stream:
            return stream.read()
    except OSError as exc:
        raise ResourceNotFoundError(os.fspath(path)) from exc


def write_binary(path, data) -> None:
    """Write ``data`` followed by a 4-byte end marker to ``path``."""
    try:
        stream = open(path, "wb")
    except OSError as exc:
        raise CannotOpenFileError(path) from exc
    try:
        with stream:
            stream.write(data)
            stream.write(_END_MARKER)
    except OSError as exc:
        raise CannotWriteFileError(path) from exc