# src/identity_kit/models/person.py

from datetime import date
from typing import ClassVar

from .item import Item

_MALE_COURTESY = {"mister", "mr", "mr.", "sir", "de heer", "mijnheer", "dhr", "herr"}
_FEMALE_COURTESY = {"miss", "ms", "ms.", "mrs", "mrs.", "madam", "mevr", "mevrouw", "frau"}


class Person(Item):
    """A person; the root of most identity trees."""

    kind: ClassVar[str] = "user"

    charset: str | None = None
    courtesy: str | None = None
    birth: date | None = None
    firstname: str | None = None
    full_name: str | None = None
    formal_name: str | None = None
    initials: str | None = None
    nickname: str | None = None
    gender: str | None = None
    language: str = "en"
    prefix: str | None = None
    surname: str | None = None
    titles: str | None = None

    @property
    def nick(self) -> str:
        return self.nickname or self.name

    @property
    def first(self) -> str:
        if self.firstname:
            return self.firstname
        nick = self.nick
        return nick[:1].upper() + nick[1:]

    @property
    def display_name(self) -> str:
        """
        Full name, guessed from "firstname prefix surname" when not given.

        A surname without firstname takes the nickname as firstname, a
        firstname without surname takes the nickname as surname.
        """
        if self.full_name is not None:
            return self.full_name

        first, surname = self.firstname, self.surname
        if first is not None and surname is None:
            surname = self.nick[:1].upper() + self.nick[1:]
        if first is None and surname is not None:
            first = self.first

        full = " ".join(part for part in (first, self.prefix, surname) if part)
        return full or self.first

    def is_male(self) -> bool:
        if self.gender:
            return self.gender[0].lower() in ("m", "h")
        return self.courtesy is not None and self.courtesy.lower() in _MALE_COURTESY

    def is_female(self) -> bool:
        if self.gender:
            return self.gender[0].lower() in ("f", "v")
        return self.courtesy is not None and self.courtesy.lower() in _FEMALE_COURTESY
