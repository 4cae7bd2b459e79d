# src/identity_kit/archive/parser.py

import logging
import re
from dataclasses import dataclass

from identity_kit.diagnostics import Diagnostic, Diagnostics
from identity_kit.errors import NestingTooDeepError
from identity_kit.models import Item
from identity_kit.observability import names
from identity_kit.observability.base import MetricsHook, NoOpMetricsHook

from .abbreviations import AbbreviationRegistry
from .builder import build_record
from .lines import LineReader, LogicalLine

logger = logging.getLogger(__name__)

_KEYWORD = re.compile(r"(\w+)\s*(.*?)\s*$")
_REFERENCE = re.compile(r"^\s*(\w*)\s*(\w+)\s*=\s*(.*)")


def split_keyword(text: str) -> tuple[str, str] | None:
    """Split a line into its leading keyword and the trimmed remainder."""
    match = _KEYWORD.search(text)
    if match is None:
        return None
    return match.group(1), match.group(2)


@dataclass(frozen=True)
class ReferenceAttempt:
    """A `[group] name = lookup` line; lookups are not resolved."""

    group: str
    name: str
    lookup: str
    line_number: int


class BlockParser:
    """
    Recursive descent over logical lines, driven by indentation only.

    A line opens a nested block when the line right after it is indented
    deeper than the line itself. The block ends at the first line indented
    no deeper than its starter; that line is left for the caller.
    """

    def __init__(
        self,
        reader: LineReader,
        registry: AbbreviationRegistry,
        *,
        diagnostics: Diagnostics,
        max_depth: int | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.reader = reader
        self.registry = registry
        self.diagnostics = diagnostics
        self.max_depth = max_depth
        self.metrics_hook = metrics_hook
        self.references: list[ReferenceAttempt] = []

    def parse_block(
        self, starter: LogicalLine, starter_indent: int, depth: int = 0
    ) -> Item | None:
        if self.max_depth is not None and depth > self.max_depth:
            raise NestingTooDeepError(
                f"Block nests deeper than {self.max_depth} levels",
                source=self.reader.source,
                line_number=starter.line_number,
            )

        split = split_keyword(starter.text)
        keyword, name = split if split is not None else ("", "")
        kind = self.registry.resolve(keyword)
        skip = kind is None

        fields: list[tuple[str, str]] = []
        children: list[Item] = []

        while True:
            line = self.reader.peek()
            if line is None or line.indent <= starter_indent:
                break

            self.reader.advance()
            if skip:
                continue

            following = self.reader.peek()
            next_indent = following.indent if following is not None else -1

            if line.indent < next_indent:
                child = self.parse_block(line, line.indent, depth + 1)
                if child is not None:
                    children.append(child)
                continue

            reference = _REFERENCE.match(line.text)
            if reference:
                self._record_reference(reference, line)
                continue

            field = split_keyword(line.text)
            if field is None:
                self._drop_line(line)
                continue
            fields.append(field)

        if kind is None:
            logger.debug(
                "Skipped block '%s' at line %d", keyword, starter.line_number
            )
            self.metrics_hook.increment(
                names.ARCHIVE_SKIPPED_BLOCKS_TOTAL, labels={"keyword": keyword}
            )
            return None

        if not fields and not children:
            return None

        return build_record(
            kind,
            name,
            fields,
            children,
            source=self.reader.source,
            line_number=starter.line_number,
            diagnostics=self.diagnostics,
            metrics_hook=self.metrics_hook,
        )

    def _record_reference(self, match: re.Match[str], line: LogicalLine) -> None:
        group, name, lookup = match.group(1), match.group(2), match.group(3).strip()
        self.references.append(
            ReferenceAttempt(
                group=group, name=name, lookup=lookup, line_number=line.line_number
            )
        )
        logger.debug(
            "Reference %s %s = %s at line %d not resolved",
            group,
            name,
            lookup,
            line.line_number,
        )
        self.metrics_hook.increment(names.ARCHIVE_REFERENCES_TOTAL)

    def _drop_line(self, line: LogicalLine) -> None:
        diagnostic = Diagnostic(
            f"Cannot find a field name in '{line.text.strip()}'",
            self.reader.source,
            line.line_number,
        )
        logger.warning("%s", diagnostic)
        self.diagnostics.emit(diagnostic)
        self.metrics_hook.increment(names.ARCHIVE_DIAGNOSTICS_TOTAL)
