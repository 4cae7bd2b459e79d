# src/identity_kit/archive/abbreviations.py

import logging
from collections.abc import Iterable, Mapping

from identity_kit.models import EmailIdentity, Emails, Item, Location, Person, System

logger = logging.getLogger(__name__)

DEFAULT_ABBREVIATIONS: dict[str, type[Item]] = {
    "user": Person,
    "email": EmailIdentity,
    "location": Location,
    "system": System,
    "list": Emails,
}


class AbbreviationRegistry:
    """Maps archive keywords to the record kind which builds them."""

    def __init__(self, abbreviations: Mapping[str, type[Item]] | None = None) -> None:
        self._kinds: dict[str, type[Item]] = {}
        for keyword, kind in (abbreviations or {}).items():
            self.register(keyword, kind)

    def resolve(self, keyword: str) -> type[Item] | None:
        return self._kinds.get(keyword)

    def register(self, keyword: str, kind: type[Item] | None) -> type[Item] | None:
        """Add or override `keyword`; a `None` kind removes it."""
        if kind is None:
            return self.unregister(keyword)

        if not (isinstance(kind, type) and issubclass(kind, Item)):
            raise TypeError(f"{kind!r} is not usable as record kind for '{keyword}'")

        previous = self._kinds.get(keyword)
        self._kinds[keyword] = kind
        logger.debug("Registered abbreviation: %s -> %s", keyword, kind.__name__)
        return previous

    def unregister(self, keyword: str) -> type[Item] | None:
        removed = self._kinds.pop(keyword, None)
        if removed is not None:
            logger.debug("Removed abbreviation: %s", keyword)
        return removed

    def list(self) -> list[str]:
        return sorted(self._kinds)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


def default_registry(
    only: Iterable[str] | None = None,
    extra: Mapping[str, type[Item]] | None = None,
) -> AbbreviationRegistry:
    """
    Registry with the built-in keywords plus `extra`.

    When `only` is given, every other keyword is left out.
    """
    wanted = set(only) if only is not None else None
    registry = AbbreviationRegistry()

    for source in (DEFAULT_ABBREVIATIONS, extra or {}):
        for keyword, kind in source.items():
            if wanted is None or keyword in wanted:
                registry.register(keyword, kind)

    for keyword in sorted(wanted or ()):
        if keyword not in registry:
            logger.warning("Option 'only' specifies undefined abbreviation '%s'", keyword)

    return registry
