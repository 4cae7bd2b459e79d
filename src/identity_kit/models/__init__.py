from .collection import COLLECTORS, Collection, Emails, Locations, Systems, Users
from .email import EmailIdentity
from .item import Item
from .kinds import RECORD_KINDS, kind_for
from .location import Location
from .person import Person
from .system import System

__all__ = [
    # Base
    "Item",
    "Collection",
    # Records
    "Person",
    "EmailIdentity",
    "Location",
    "System",
    # Collections
    "Emails",
    "Locations",
    "Systems",
    "Users",
    "COLLECTORS",
    # Kinds
    "RECORD_KINDS",
    "kind_for",
]
