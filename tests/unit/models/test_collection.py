import pytest

from identity_kit.models import EmailIdentity, Emails, Location, Locations, Systems, Users


@pytest.fixture
def emails() -> Emails:
    return Emails()


def test_default_names() -> None:
    assert Emails().name == "emails"
    assert Locations().name == "locations"
    assert Systems().name == "systems"
    assert Users().name == "users"


def test_add_role_sets_parent(emails: Emails) -> None:
    role = emails.add_role(EmailIdentity(name="home"))

    assert role.parent_uid == emails.uid
    assert emails.find("home") is role


def test_add_role_wrong_type_raises(emails: Emails) -> None:
    with pytest.raises(TypeError, match="requires a EmailIdentity but got a Location"):
        emails.add_role(Location(name="home"))


def test_same_name_replaces(emails: Emails) -> None:
    emails.add_role(EmailIdentity(name="home", address="old@x.y"))
    emails.add_role(EmailIdentity(name="home", address="new@x.y"))

    [role] = emails.roles()
    assert role.address == "new@x.y"


def test_remove_role(emails: Emails) -> None:
    role = emails.add_role(EmailIdentity(name="home"))

    assert emails.remove_role("home") is role
    assert role.parent_uid is None
    assert emails.remove_role("home") is None


def test_rename_role(emails: Emails) -> None:
    role = emails.add_role(EmailIdentity(name="home"))

    emails.rename_role("home", "private")

    assert role.name == "private"
    assert emails.find("private") is role
    assert emails.find("home") is None


def test_rename_to_existing_raises(emails: Emails) -> None:
    emails.add_role(EmailIdentity(name="home"))
    emails.add_role(EmailIdentity(name="work"))

    with pytest.raises(ValueError, match="already exists"):
        emails.rename_role("home", "work")


def test_rename_unknown_raises(emails: Emails) -> None:
    with pytest.raises(KeyError, match="not found"):
        emails.rename_role("home", "private")


def test_sorted(emails: Emails) -> None:
    for name in ("work", "alias", "home"):
        emails.add_role(EmailIdentity(name=name))

    assert [role.name for role in emails.sorted()] == ["alias", "home", "work"]


def test_holds_only_current_role(emails: Emails) -> None:
    old = emails.add_role(EmailIdentity(name="home", address="old@x.y"))
    new = emails.add_role(EmailIdentity(name="home", address="new@x.y"))

    assert emails.holds(new)
    assert not emails.holds(old)
