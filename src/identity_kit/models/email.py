# src/identity_kit/models/email.py

from typing import ClassVar

from .item import Item


class EmailIdentity(Item):
    """One e-mail role of a person."""

    kind: ClassVar[str] = "email"

    address: str | None = None
    charset: str | None = None
    comment: str | None = None
    domain: str | None = None
    language: str | None = None
    location: str | None = None
    organization: str | None = None
    pgp_key: str | None = None
    phrase: str | None = None
    signature: str | None = None
    username: str | None = None

    @property
    def mailbox_username(self) -> str:
        if self.username is not None:
            return self.username
        if self.address:
            return self.address.split("@", 1)[0]
        return self.name

    @property
    def mailbox_domain(self) -> str:
        if self.domain is not None:
            return self.domain
        if self.address and "@" in self.address:
            return self.address.split("@", 1)[1]
        return "localhost"

    @property
    def mailbox_address(self) -> str:
        if self.address is not None:
            return self.address
        if self.username or self.domain:
            return f"{self.mailbox_username}@{self.mailbox_domain}"
        return self.name
