# src/identity_kit/diagnostics.py

"""Non-fatal problems reported while building records.

A `Diagnostics` sink is handed explicitly to whoever may want to complain,
so no global warning handler is ever swapped.
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Diagnostic:
    message: str
    source: str | None = None
    line_number: int | None = None

    def located(self, source: str, line_number: int) -> "Diagnostic":
        return replace(self, source=source, line_number=line_number)

    def __str__(self) -> str:
        if self.source is None:
            return self.message
        if self.line_number is None:
            return f"{self.message} (found in {self.source})"
        return f"{self.message} (found in {self.source} around line {self.line_number})"


class Diagnostics:
    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def warn(self, message: str) -> Diagnostic:
        diagnostic = Diagnostic(message)
        self._items.append(diagnostic)
        return diagnostic

    def emit(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))
