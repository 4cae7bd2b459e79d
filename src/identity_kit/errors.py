# src/identity_kit/errors.py


class IdentityKitError(Exception):
    """Base class for all identity-kit errors."""


class RecordConstructionError(IdentityKitError):
    """A record factory cannot produce a record from the given fields."""


class ArchiveError(IdentityKitError):
    """Base class for archive problems."""


class ArchiveReadError(ArchiveError):
    """The archive source cannot be opened or read."""


class ArchiveParseError(ArchiveError):
    """Fatal problem while turning archive lines into records."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.source = source
        self.line_number = line_number
        if source is not None and line_number is not None:
            message = f"{message} (in {source} around line {line_number})"
        elif source is not None:
            message = f"{message} (in {source})"
        super().__init__(message)


class NestingTooDeepError(ArchiveParseError):
    """A block nests deeper than the configured maximum."""
