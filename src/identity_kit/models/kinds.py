# src/identity_kit/models/kinds.py

"""The closed set of record kinds, by kind tag."""

from .collection import Emails, Locations, Systems, Users
from .email import EmailIdentity
from .item import Item
from .location import Location
from .person import Person
from .system import System

RECORD_KINDS: dict[str, type[Item]] = {
    kind.kind: kind
    for kind in (
        Person,
        EmailIdentity,
        Location,
        System,
        Emails,
        Locations,
        Systems,
        Users,
    )
}


def kind_for(tag: str) -> type[Item]:
    try:
        return RECORD_KINDS[tag]
    except KeyError:
        raise ValueError(f"Unknown record kind '{tag}'")
