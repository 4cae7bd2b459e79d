# src/identity_kit/models/item.py

import logging
import uuid
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, Field, PrivateAttr, ValidationError

from identity_kit.diagnostics import Diagnostics
from identity_kit.errors import RecordConstructionError

if TYPE_CHECKING:
    from .collection import Collection

logger = logging.getLogger(__name__)

# Field names which can never be set from archive fields.
RESERVED_FIELDS = frozenset({"name", "uid", "parent_uid"})


def _new_uid() -> str:
    return uuid.uuid4().hex


class Item(BaseModel):
    """
    Base of every record kind.

    - `name` identifies the item within the collection holding it
    - `parent_uid` is a non-owning handle to the enclosing item; resolve it
      through the container which owns the whole tree
    - Role collections are held by name
    """

    kind: ClassVar[str] = "item"
    multi_valued: ClassVar[frozenset[str]] = frozenset()

    name: str
    description: str | None = None
    uid: str = Field(default_factory=_new_uid)
    parent_uid: str | None = None

    _collections: dict[str, "Collection"] = PrivateAttr(default_factory=dict)

    class Config:
        extra = "forbid"
        validate_assignment = True

    @classmethod
    def from_fields(
        cls,
        name: str,
        fields: Sequence[tuple[str, str]],
        diagnostics: Diagnostics,
    ) -> "Item":
        """
        Build an item from ordered (field, value) pairs.

        Unknown and repeated fields are reported to `diagnostics`; values
        which fail validation raise RecordConstructionError.
        """
        data: dict[str, object] = {}
        repeated: dict[str, list[str]] = {}
        unknown: list[str] = []

        for key, value in fields:
            if key in RESERVED_FIELDS or key not in cls.model_fields:
                if key not in unknown:
                    unknown.append(key)
                continue

            if key in cls.multi_valued:
                repeated.setdefault(key, []).append(value)
                continue

            if key in data:
                diagnostics.warn(
                    f"Field '{key}' given more than once for a {cls.kind}, "
                    "keeping the last value"
                )
            data[key] = value

        if unknown:
            noun = "option" if len(unknown) == 1 else "options"
            listed = '", "'.join(unknown)
            diagnostics.warn(f'Unknown {noun} "{listed}" for a {cls.__name__}')

        try:
            return cls(name=name, **data, **repeated)
        except ValidationError as exc:
            raise RecordConstructionError(
                f"Cannot create a {cls.kind} named '{name}': {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def insert_child(self, kind: str, child: "Item") -> "Item":
        """Attach a record of the given kind below this item."""
        from .collection import Collection

        if isinstance(child, Collection):
            return self.add_collection(child)
        return self.add(kind, child)

    def add(self, collection: "str | Collection", role: "Item") -> "Item":
        """Add `role` to the named collection, creating it when needed."""
        from .collection import Collection

        if isinstance(collection, Collection):
            target = collection
        else:
            existing = self.collection(collection)
            target = existing if existing is not None else self.add_collection(collection)
        return target.add_role(role)

    def add_collection(self, collection: "str | Collection") -> "Collection":
        from .collection import COLLECTORS, Collection

        if not isinstance(collection, Collection):
            collection_cls = COLLECTORS.get(collection) or COLLECTORS.get(
                collection + "s"
            )
            if collection_cls is None:
                logger.error("Collection type not found: %s", collection)
                raise KeyError(f"Collection type '{collection}' not found")
            collection = collection_cls()

        collection.parent_uid = self.uid
        self._collections[collection.name] = collection
        logger.debug("Added collection %s to %s", collection.name, self.name)
        return collection

    def remove_collection(self, collection: "str | Collection") -> "Collection | None":
        name = collection if isinstance(collection, str) else collection.name
        removed = self._collections.pop(name, None)
        if removed is None:
            removed = self._collections.pop(name + "s", None)
        if removed is not None:
            removed.parent_uid = None
        return removed

    def collection(self, name: str) -> "Collection | None":
        found = self._collections.get(name)
        if found is None:
            found = self._collections.get(name + "s")
        return found

    def collections(self) -> list["Collection"]:
        return list(self._collections.values())

    def holds(self, child: "Item") -> bool:
        return any(each is child for each in self._collections.values())

    def find_role(self, collection: "str | Collection", role: str) -> "Item | None":
        """Return the role with name `role` inside the given collection."""
        from .collection import Collection

        target = (
            collection
            if isinstance(collection, Collection)
            else self.collection(collection)
        )
        if target is None:
            return None
        return target.find(role)

    def walk(self) -> Iterator["Item"]:
        """Yield this item and every item below it, depth first."""
        yield self
        for collection in self._collections.values():
            yield from collection.walk()
