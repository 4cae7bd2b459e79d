# src/identity_kit/archive/__init__.py

"""Plain-text archive reader.

Turns an indentation structured text document into identity records.

Example:
    >>> from identity_kit.archive import PlainArchive
    >>>
    >>> archive = PlainArchive("friends")
    >>> result = archive.read_string('''
    ... user markov
    ...   location home
    ...      country NL
    ... ''')
    >>> archive.find_role("users", "markov").find_role("locations", "home").country
    'NL'
"""

from .abbreviations import AbbreviationRegistry, default_registry
from .builder import build_record
from .config import ArchiveConfig
from .lines import LineReader, LogicalLine
from .parser import BlockParser, ReferenceAttempt, split_keyword
from .plain import ArchiveReadResult, PlainArchive
from .tabs import DEFAULT_TAB_WIDTH, expand_indentation

__all__ = [
    # Facade
    "PlainArchive",
    "ArchiveReadResult",
    # Config
    "ArchiveConfig",
    # Registry
    "AbbreviationRegistry",
    "default_registry",
    # Parsing
    "BlockParser",
    "ReferenceAttempt",
    "split_keyword",
    "build_record",
    # Lines
    "LineReader",
    "LogicalLine",
    "DEFAULT_TAB_WIDTH",
    "expand_indentation",
]
