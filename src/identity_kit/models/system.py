# src/identity_kit/models/system.py

from typing import ClassVar

from .item import Item


class System(Item):
    """A login on some computer system."""

    kind: ClassVar[str] = "system"

    hostname: str = "localhost"
    location: str | None = None
    os: str | None = None
    password: str | None = None
    username: str | None = None
