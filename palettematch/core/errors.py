#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettematch/core/errors.py


class PaletteMatchError(Exception):
    """Base class for every failure raised by the matching core."""


class MalformedColorError(PaletteMatchError, ValueError):
    """
    Raised when a color is not exactly six hex digits after an optional
    leading '#' is stripped.
    """

    def __init__(self, value, reason: str = "expected 6 hex digits"):
        self.value = value
        self.reason = reason
        super().__init__(f"malformed color {value!r}: {reason}")


class InvalidCatalogError(PaletteMatchError, ValueError):
    """Raised when a catalog has no entries to match against."""

    def __init__(self, message: str = "catalog is empty"):
        super().__init__(message)
