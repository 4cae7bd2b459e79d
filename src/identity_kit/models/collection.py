# src/identity_kit/models/collection.py

import logging
from collections.abc import Iterator
from typing import ClassVar

from pydantic import PrivateAttr

from .email import EmailIdentity
from .item import Item
from .location import Location
from .person import Person
from .system import System

logger = logging.getLogger(__name__)


class Collection(Item):
    """A set of roles of one record kind, keyed by role name."""

    kind: ClassVar[str] = "collection"
    item_type: ClassVar[type[Item]] = Item

    _roles: dict[str, Item] = PrivateAttr(default_factory=dict)

    def insert_child(self, kind: str, child: Item) -> Item:
        return self.add_role(child)

    def add_role(self, role: Item) -> Item:
        """Add `role`; a role with the same name is replaced."""
        if not isinstance(role, self.item_type):
            raise TypeError(
                f"Wrong type of role for {type(self).__name__}: "
                f"requires a {self.item_type.__name__} but got a {type(role).__name__}"
            )

        role.parent_uid = self.uid
        self._roles[role.name] = role
        logger.debug("Added role %s to collection %s", role.name, self.name)
        return role

    def remove_role(self, role: Item | str) -> Item | None:
        name = role if isinstance(role, str) else role.name
        removed = self._roles.pop(name, None)
        if removed is not None:
            removed.parent_uid = None
        return removed

    def rename_role(self, role: Item | str, new_name: str) -> Item:
        name = role if isinstance(role, str) else role.name
        if new_name in self._roles:
            logger.error("Cannot rename %s into %s: already exists", name, new_name)
            raise ValueError(f"Cannot rename '{name}' into '{new_name}': already exists")

        try:
            found = self._roles.pop(name)
        except KeyError:
            logger.error("Cannot rename %s into %s: not found", name, new_name)
            raise KeyError(f"Role '{name}' not found")

        found.name = new_name
        self._roles[new_name] = found
        return found

    def roles(self) -> list[Item]:
        return list(self._roles.values())

    def sorted(self) -> list[Item]:
        return sorted(self._roles.values(), key=lambda role: role.name)

    def find(self, name: str) -> Item | None:
        return self._roles.get(name)

    def holds(self, child: Item) -> bool:
        return self._roles.get(child.name) is child or super().holds(child)

    def walk(self) -> Iterator[Item]:
        yield from super().walk()
        for role in self._roles.values():
            yield from role.walk()


class Emails(Collection):
    kind: ClassVar[str] = "mailgroup"
    item_type: ClassVar[type[Item]] = EmailIdentity

    name: str = "emails"


class Locations(Collection):
    kind: ClassVar[str] = "whereabouts"
    item_type: ClassVar[type[Item]] = Location

    name: str = "locations"


class Systems(Collection):
    kind: ClassVar[str] = "network"
    item_type: ClassVar[type[Item]] = System

    name: str = "systems"


class Users(Collection):
    kind: ClassVar[str] = "people"
    item_type: ClassVar[type[Item]] = Person

    name: str = "users"


# Collection types by the name under which an item holds them.
COLLECTORS: dict[str, type[Collection]] = {
    "emails": Emails,
    "locations": Locations,
    "systems": Systems,
    "users": Users,
}
