"""Exception hierarchy raised by documentize."""

from __future__ import annotations


class DocumentizeError(RuntimeError):
    """Base class for every fatal documentize error."""


class ConfigError(DocumentizeError):
    """Raised when the configuration file cannot be parsed or is invalid."""


class DuplicateAttributeError(DocumentizeError):
    """Raised when a tag declares the same attribute twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Duplicate attribute "{name}" found. This is not valid HTML.')
        self.name = name


class AmbiguousMetaError(DocumentizeError):
    """Raised when a component carries more than one marker tag."""

    def __init__(self, marker: str, count: int) -> None:
        super().__init__(f"Multiple meta tags with '{marker}' found ({count}).")
        self.marker = marker
        self.count = count


class AmbiguousScriptError(DocumentizeError):
    """Raised when a component has more than one script of the same kind."""


class AmbiguousSymbolError(DocumentizeError):
    """Raised when a name is declared both as an interface and as a type alias."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'Ambiguous symbol: "{name}". Found both an interface and a type alias.'
        )
        self.name = name


class InvalidHeadingLevel(DocumentizeError, ValueError):
    """Raised when a heading is created outside levels 1 to 6."""

    def __init__(self, level: object) -> None:
        super().__init__(
            f"Invalid heading level: {level!r}. Expected a number between 1 and 6."
        )
        self.level = level


class InvalidColumnAlignment(DocumentizeError, ValueError):
    """Raised while rendering a table column with an unknown alignment."""

    def __init__(self, alignment: object) -> None:
        super().__init__(
            f"Invalid column alignment: {alignment!r}. Expected one of 'left', 'right'."
        )
        self.alignment = alignment


__all__ = [
    "AmbiguousMetaError",
    "AmbiguousScriptError",
    "AmbiguousSymbolError",
    "ConfigError",
    "DocumentizeError",
    "DuplicateAttributeError",
    "InvalidColumnAlignment",
    "InvalidHeadingLevel",
]
