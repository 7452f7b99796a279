# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Structured errors for identifier handling and orbit catalog queries.

Each exception keeps its context as attributes; the message is built from
those attributes only when the exception is rendered.
"""


class MissingArgument(ValueError):
    """A required argument was not supplied (None)."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"missing required argument: {self.name}"


class InvalidRange(ValueError):
    """A numeric identifier lies outside its closed bounds."""

    def __init__(self, kind, value: int, lower: int, upper: int):
        super().__init__(kind, value, lower, upper)
        self.kind = kind
        self.value = value
        self.lower = lower
        self.upper = upper

    def __str__(self) -> str:
        return (
            f"{self.kind.label} {self.value} outside valid range "
            f"[{self.lower}, {self.upper}]"
        )


class DecodeError(ValueError):
    """A string does not match the grammar of its identifier kind."""

    def __init__(self, kind, text: str, reason: str):
        super().__init__(kind, text, reason)
        self.kind = kind
        self.text = text
        self.reason = reason

    @property
    def range_error(self) -> InvalidRange | None:
        """The validator error this decode failure was raised from, if any."""
        cause = self.__cause__
        return cause if isinstance(cause, InvalidRange) else None

    def __str__(self) -> str:
        return f"cannot decode {self.kind.label} from {self.text!r}: {self.reason}"


class MalformedDate(ValueError):
    """A date string is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, text, reason: str):
        super().__init__(text, reason)
        self.text = text
        self.reason = reason

    def __str__(self) -> str:
        return f"malformed date {self.text!r}: {self.reason}"


class AdapterError(ConnectionError):
    """An orbit catalog query failed.

    Attributes:
        detail: The catalog's own diagnostic.
        path: Path number being queried, when known.
        status: Catalog status code or exception name, when available.
    """

    def __init__(self, detail: str, path: int | None = None, status: str | None = None):
        super().__init__(detail, path, status)
        self.detail = detail
        self.path = path
        self.status = status

    def for_path(self, path: int) -> "AdapterError":
        """Copy of this error annotated with the failing path."""
        return AdapterError(self.detail, path=int(path), status=self.status)

    def __str__(self) -> str:
        where = f" for path {self.path}" if self.path is not None else ""
        status = f" [{self.status}]" if self.status else ""
        return f"orbit catalog query failed{where}{status}: {self.detail}"
