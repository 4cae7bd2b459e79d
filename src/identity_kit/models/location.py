# src/identity_kit/models/location.py

from typing import ClassVar

from .item import Item


class Location(Item):
    """A physical location: home, work, a holiday address."""

    kind: ClassVar[str] = "location"
    multi_valued: ClassVar[frozenset[str]] = frozenset({"telephone", "fax"})

    city: str | None = None
    country: str | None = None
    country_code: str | None = None
    organization: str | None = None
    pobox: str | None = None
    pobox_pc: str | None = None
    postal_code: str | None = None
    street: str | None = None
    state: str | None = None
    telephone: list[str] = []
    fax: list[str] = []

    @property
    def full_address(self) -> str:
        lines = []
        if self.organization:
            lines.append(self.organization)
        if self.pobox:
            lines.append(f"PO Box {self.pobox}")
            city_line = " ".join(p for p in (self.pobox_pc, self.city) if p)
        else:
            if self.street:
                lines.append(self.street)
            city_line = " ".join(p for p in (self.postal_code, self.city) if p)
        if self.state:
            city_line = f"{city_line}, {self.state}" if city_line else self.state
        if city_line:
            lines.append(city_line)
        if self.country:
            lines.append(self.country)
        return "\n".join(lines)
