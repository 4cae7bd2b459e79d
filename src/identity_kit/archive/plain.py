# src/identity_kit/archive/plain.py

import io
import logging
import os
from collections.abc import Iterable
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from time import monotonic
from typing import IO, ClassVar, cast

from pydantic import PrivateAttr

from identity_kit.diagnostics import Diagnostic, Diagnostics
from identity_kit.errors import ArchiveParseError, ArchiveReadError
from identity_kit.models import Collection, Item, Person
from identity_kit.observability import names
from identity_kit.observability.base import MetricsHook, NoOpMetricsHook

from .abbreviations import AbbreviationRegistry, default_registry
from .config import ArchiveConfig
from .lines import LineReader
from .parser import BlockParser, ReferenceAttempt

logger = logging.getLogger(__name__)

ArchiveSource = str | os.PathLike[str] | IO[str] | Iterable[str]


@dataclass(frozen=True)
class ArchiveReadResult:
    source: str
    records: list[Item] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    references: list[ReferenceAttempt] = field(default_factory=list)


class PlainArchive(Item):
    """
    Reads identity records from the plain-text archive format.

    Top-level records are stored in the archive's own role collections,
    so a user named "markov" ends up in `archive.collection("users")`.

    Example:
        >>> archive = PlainArchive("friends")
        >>> result = archive.read(".friends")
        >>> archive.find_role("users", "markov")
    """

    kind: ClassVar[str] = "archive"

    name: str = "archive"

    _config: ArchiveConfig = PrivateAttr()
    _registry: AbbreviationRegistry = PrivateAttr()
    _metrics_hook: MetricsHook = PrivateAttr()
    _tab_width: int = PrivateAttr()
    _index: dict[str, Item] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        name: str = "archive",
        *,
        config: ArchiveConfig | None = None,
        registry: AbbreviationRegistry | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        super().__init__(name=name)
        self._config = config if config is not None else ArchiveConfig()
        self._registry = (
            registry
            if registry is not None
            else default_registry(
                only=self._config.only, extra=self._config.extra_kinds()
            )
        )
        self._metrics_hook = metrics_hook
        self._tab_width = self._config.tab_width

    @property
    def registry(self) -> AbbreviationRegistry:
        return self._registry

    @property
    def default_tab_width(self) -> int:
        return self._tab_width

    @default_tab_width.setter
    def default_tab_width(self, width: int) -> None:
        if width < 1:
            raise ValueError("tab_width must be >= 1")
        self._tab_width = width

    def abbreviation(self, keyword: str) -> type[Item] | None:
        return self._registry.resolve(keyword)

    def abbreviations(self) -> list[str]:
        return self._registry.list()

    def read(
        self, source: ArchiveSource, *, tab_width: int | None = None
    ) -> ArchiveReadResult:
        """
        Read records from a file name, a text file object or a sequence of
        lines, and add every top-level record to this archive.

        Raises:
            ArchiveReadError: The source cannot be opened or read.
            ArchiveParseError: A record cannot be built or stored.
        """
        width = tab_width if tab_width is not None else self._tab_width
        start = monotonic()

        try:
            with ExitStack() as stack:
                label, lines = self._open(source, stack)
                logger.info("Reading archive data from %s", label)

                if not lines:
                    return ArchiveReadResult(source=label)

                diagnostics = Diagnostics()
                reader = LineReader(
                    lines, tab_width=width, source=label, diagnostics=diagnostics
                )
                parser = BlockParser(
                    reader,
                    self._registry,
                    diagnostics=diagnostics,
                    max_depth=self._config.max_depth,
                    metrics_hook=self._metrics_hook,
                )

                records: list[tuple[int, Item]] = []
                try:
                    while True:
                        starter = reader.peek()
                        if starter is None:
                            break
                        reader.advance()
                        logger.debug("Adding %s", starter.text.strip())

                        record = parser.parse_block(starter, starter.indent)
                        if record is not None:
                            records.append((starter.line_number, record))

                    # Nothing is stored unless the whole source parsed.
                    self._store(records, label)
                except ArchiveParseError:
                    logger.error("Cannot read archive %s", label)
                    raise
                finally:
                    self._metrics_hook.increment(names.ARCHIVE_LINES_READ, reader.lines_read)
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self._metrics_hook.record_latency(names.ARCHIVE_READ_DURATION, elapsed_ms)

        logger.info("Loaded %d records from %s", len(records), label)

        return ArchiveReadResult(
            source=label,
            records=[record for _, record in records],
            diagnostics=list(diagnostics),
            references=list(parser.references),
        )

    def read_string(self, text: str, *, tab_width: int | None = None) -> ArchiveReadResult:
        return self.read(io.StringIO(text).readlines(), tab_width=tab_width)

    def parent_of(self, item: Item) -> Item | None:
        """Resolve the parent handle of any item held by this archive."""
        if item.parent_uid is None:
            return None
        found = self._index.get(item.parent_uid)
        if found is None:
            self._index = {each.uid: each for each in self.walk()}
            found = self._index.get(item.parent_uid)
        if found is None or not found.holds(item):
            return None
        return found

    def user_of(self, item: Item) -> Person | None:
        """The nearest enclosing person of `item`, or `item` itself."""
        current: Item | None = item
        while current is not None:
            if isinstance(current, Person):
                return current
            current = self.parent_of(current)
        return None

    def _store(self, records: list[tuple[int, Item]], label: str) -> None:
        """Add top-level records; on failure the archive is left as it was."""
        saved = self.collections()
        saved_roles = {each.uid: each.roles() for each in saved}

        for line_number, record in records:
            try:
                self.insert_child(record.kind, record)
            except (KeyError, TypeError) as exc:
                self._restore(saved, saved_roles)
                self._metrics_hook.increment(
                    names.ARCHIVE_ERRORS_TOTAL, labels={"kind": record.kind}
                )
                raise ArchiveParseError(
                    f"Cannot add a {record.kind} to archive '{self.name}': {exc}",
                    source=label,
                    line_number=line_number,
                ) from exc

        self._index = {}

    def _restore(self, saved: list[Collection], saved_roles: dict[str, list[Item]]) -> None:
        for each in self.collections():
            if not any(each is kept for kept in saved):
                each.parent_uid = None

        self._collections = {each.name: each for each in saved}
        for each in saved:
            each.parent_uid = self.uid
            for role in each.roles():
                each.remove_role(role)
            for role in saved_roles[each.uid]:
                each.add_role(role)

    def _open(self, source: ArchiveSource, stack: ExitStack) -> tuple[str, list[str]]:
        if isinstance(source, (str, os.PathLike)):
            path = Path(source)
            label = f"file {path}"
            try:
                f = stack.enter_context(open(path, encoding="utf-8"))
                return label, f.readlines()
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read archive from %s: %s", label, exc)
                raise ArchiveReadError(f"Cannot read archive from {label}: {exc}") from exc

        if hasattr(source, "readlines"):
            label = str(getattr(source, "name", type(source).__name__))
            try:
                return label, list(cast(IO[str], source).readlines())
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read archive from %s: %s", label, exc)
                raise ArchiveReadError(f"Cannot read archive from {label}: {exc}") from exc

        return "lines", list(cast(Iterable[str], source))
