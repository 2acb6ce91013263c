# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HRML exceptions."""

from __future__ import annotations


class HrmlError(Exception):
    """Base exception for HRML errors."""

    pass


class ParseError(HrmlError):
    """Raised when the input does not follow the HRML line grammar.

    Args:
        message: Human readable description.
        line_number: 1-based position of the offending line, if known.
        line: The offending line, if known.
        block: Input section the line belongs to ('header', 'structure'
            or 'query'), if known.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        block: str | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        self.block = block
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        where = f"line {self.line_number}"
        if self.block:
            where = f"{self.block} {where}"
        return f"{where}: {self.message}"


class MalformedTagError(ParseError):
    """Raised when an opening tag line does not yield a name plus key/value pairs."""

    pass


class MalformedQueryError(ParseError):
    """Raised when a query line has no '~' attribute separator."""

    pass


class UnbalancedTagsError(ParseError):
    """Raised when opening and closing lines do not pair up."""

    pass


class MismatchedTagError(ParseError):
    """Raised in strict mode when a closing tag names a different tag."""

    pass


class HeaderError(ParseError):
    """Raised when the leading line counts are missing or invalid."""

    pass
