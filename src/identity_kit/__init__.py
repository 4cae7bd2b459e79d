# Archive
from .archive import (
    AbbreviationRegistry,
    ArchiveConfig,
    ArchiveReadResult,
    PlainArchive,
    default_registry,
)

# Diagnostics
from .diagnostics import Diagnostic, Diagnostics

# Errors
from .errors import (
    ArchiveError,
    ArchiveParseError,
    ArchiveReadError,
    IdentityKitError,
    NestingTooDeepError,
    RecordConstructionError,
)

# Models
from .models import (
    Collection,
    EmailIdentity,
    Emails,
    Item,
    Location,
    Locations,
    Person,
    System,
    Systems,
    Users,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Archive
    "AbbreviationRegistry",
    "ArchiveConfig",
    "ArchiveReadResult",
    "PlainArchive",
    "default_registry",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    # Errors
    "ArchiveError",
    "ArchiveParseError",
    "ArchiveReadError",
    "IdentityKitError",
    "NestingTooDeepError",
    "RecordConstructionError",
    # Models
    "Collection",
    "EmailIdentity",
    "Emails",
    "Item",
    "Location",
    "Locations",
    "Person",
    "System",
    "Systems",
    "Users",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
