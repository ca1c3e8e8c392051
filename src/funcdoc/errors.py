# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Error types for source loading and parsing."""


class ExtractionError(RuntimeError):
    """Represent a file-scoped extraction failure."""


class LoadFailure(ExtractionError):
    """Represent a source file that could not be read or decoded."""


class ParseFailure(ExtractionError):
    """Represent a source file that could not be parsed into a syntax tree."""
