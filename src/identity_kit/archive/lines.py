# src/identity_kit/archive/lines.py

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from identity_kit.diagnostics import Diagnostic, Diagnostics

from .tabs import DEFAULT_TAB_WIDTH, expand_indentation, leading_whitespace

logger = logging.getLogger(__name__)

_CONTINUATION = re.compile(r"\\\s*$")
_TABSTOP = re.compile(r"^\s*tabstop\s*=\s*(\d+)")


@dataclass(frozen=True)
class LogicalLine:
    text: str
    line_number: int
    indent: int


class LineReader:
    """
    Pulls logical lines out of raw archive lines.

    - Comment and blank lines are dropped, also inside a continuation
    - A trailing backslash joins the next raw line
    - `tabstop = N` lines change the tab width and are never returned
    - `peek()` looks ahead one logical line; `advance()` consumes it
    """

    def __init__(
        self,
        lines: Sequence[str],
        *,
        tab_width: int = DEFAULT_TAB_WIDTH,
        source: str = "lines",
        diagnostics: Diagnostics | None = None,
    ) -> None:
        if tab_width < 1:
            raise ValueError("tab_width must be >= 1")

        self._lines = [line.rstrip("\r\n") for line in lines]
        self._cursor = 0
        self._pending: LogicalLine | None = None
        self.tab_width = tab_width
        self.source = source
        self.diagnostics = diagnostics

    @property
    def lines_read(self) -> int:
        return self._cursor

    def peek(self) -> LogicalLine | None:
        if self._pending is None:
            self._pending = self._assemble()
        return self._pending

    def advance(self) -> LogicalLine:
        if self._pending is None:
            raise RuntimeError("advance() called without a peeked line")
        line, self._pending = self._pending, None
        return line

    def _assemble(self) -> LogicalLine | None:
        text = ""
        start: int | None = None

        while self._cursor < len(self._lines):
            raw = self._lines[self._cursor]
            self._cursor += 1

            stripped = raw.lstrip()
            if not stripped or stripped.startswith("#"):
                continue

            if start is None:
                start = self._cursor
            text += raw

            continued = _CONTINUATION.search(text)
            if continued:
                text = text[: continued.start()]
                continue

            directive = _TABSTOP.match(text)
            if directive:
                self._set_tab_width(int(directive.group(1)), start)
                text = ""
                start = None
                continue

            break

        # A continuation still open at the end yields what was collected.
        if start is None or not text.strip():
            return None

        indent = expand_indentation(leading_whitespace(text), self.tab_width)
        return LogicalLine(text=text, line_number=start, indent=indent)

    def _set_tab_width(self, width: int, line_number: int) -> None:
        if width < 1:
            message = f"Ignoring tabstop {width}, keeping {self.tab_width}"
            logger.warning("%s (in %s line %d)", message, self.source, line_number)
            if self.diagnostics is not None:
                self.diagnostics.emit(Diagnostic(message, self.source, line_number))
            return

        logger.debug("Tab width set to %d at line %d", width, line_number)
        self.tab_width = width
