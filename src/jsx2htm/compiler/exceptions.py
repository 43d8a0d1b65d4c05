"""Compiler diagnostics."""

from typing import Optional


class Jsx2HtmError(Exception):
    """Base class for build-time compile failures."""

    def __init__(
        self,
        message: str,
        file_path: str = "",
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        location = self.file_path or "<source>"
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{location}: {self.message}"

    def with_file(self, file_path: str) -> "Jsx2HtmError":
        """Return a copy of this error attributed to file_path."""
        return type(self)(self.message, file_path, self.line, self.column)


class UnsupportedConstruct(Jsx2HtmError):
    """A child or attribute form that a flat template cannot represent."""


class JsxSyntaxError(Jsx2HtmError):
    """The host source could not be parsed."""
