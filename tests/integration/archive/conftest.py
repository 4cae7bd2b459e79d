from pathlib import Path

import pytest

from identity_kit.archive.plain import ArchiveReadResult, PlainArchive


def _create_friends_archive(path: Path) -> None:
    """A document using every feature of the format."""
    path.write_text(
        """# Friends and family
tabstop = 4

user markov
\tfirstname Mark
\tsurname   Overmeer

\t# my home address
\tlocation home
\t\tcountry NL
\t\tcity    Arnhem
\tlocation home2 = user(cleo).location(home)
\tlocation work
\t\torganization   MARKOV Solutions
\t\ttelephone +31 1
\t\ttelephone +31 2
\temail home
\t\tdescription This is my home address,     \\
                But I sometimes use this for \\
                work as well
\t\taddress  mark@overmeer.net
\t\tlocation home
\temail work
\t\taddress  solutions@overmeer.bet
\t\tfavourite yes

email tux
    address tux@fish.net

pet rex
    colour brown
        shade dark
"""
    )


def _create_broken_archive(path: Path) -> None:
    path.write_text(
        """email tux
    address tux@fish.net

user markov
    birth not-a-date
"""
    )


@pytest.fixture(scope="module")
def archive_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test archives once per module."""
    dir_path: Path = tmp_path_factory.mktemp("archives")

    _create_friends_archive(dir_path / "friends.txt")
    _create_broken_archive(dir_path / "broken.txt")

    return dir_path


@pytest.fixture(scope="module")
def friends(archive_dir: Path) -> tuple[PlainArchive, ArchiveReadResult]:
    """Read the friends archive once, reuse across tests."""
    archive = PlainArchive("friends")
    result = archive.read(archive_dir / "friends.txt")
    return archive, result
