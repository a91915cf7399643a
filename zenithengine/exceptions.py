"""Engine error types that remember where they were raised."""

from __future__ import annotations

import inspect


def _origin_frame(error: BaseException):
    """Return the first frame outside the constructors of ``error``."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back if frame is not None else None
        while (
            caller is not None
            and caller.f_code.co_name == "__init__"
            and caller.f_locals.get("self") is error
        ):
            caller = caller.f_back
        return caller
    finally:
        del frame


class ZenithError(Exception):
    """Base class of all engine errors.

    The file and line of origin are taken from the code that raised the
    error unless they are given explicitly.
    """

    type_name = "Engine Exception"

    def __init__(self, *, line: int | None = None, file: str | None = None) -> None:
        super().__init__()
        if line is None or file is None:
            caller = _origin_frame(self)
            try:
                if line is None:
                    line = caller.f_lineno if caller is not None else 0
                if file is None:
                    file = caller.f_code.co_filename if caller is not None else ""
            finally:
                del caller
        self.line = line
        self.file = file

    def origin_string(self) -> str:
        """Describe the file and line where the error was raised."""
        return f"[File] {self.file}\n[Line] {self.line}"

    def _details(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return "\n".join([self.type_name, *self._details(), self.origin_string()])


class ResourceNotFoundError(ZenithError):
    """A file or other resource the engine needs does not exist."""

    type_name = "Resource Not Found"

    def __init__(self, path: str, *, line: int | None = None, file: str | None = None) -> None:
        super().__init__(line=line, file=file)
        self.path = str(path)

    def _details(self) -> list[str]:
        return [f"[Missing File] {self.path}"]


class InitializationError(ZenithError):
    """A subsystem could not be initialised."""

    type_name = "Initialization Error"

    def __init__(self, details: str, *, line: int | None = None, file: str | None = None) -> None:
        super().__init__(line=line, file=file)
        self.details = details

    def _details(self) -> list[str]:
        return [f"[Error Details] {self.details}"]