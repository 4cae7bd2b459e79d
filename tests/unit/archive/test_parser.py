import pytest

from identity_kit.archive.abbreviations import default_registry
from identity_kit.archive.lines import LineReader
from identity_kit.archive.parser import BlockParser, split_keyword
from identity_kit.diagnostics import Diagnostics
from identity_kit.errors import NestingTooDeepError
from identity_kit.models import EmailIdentity, Item, Location, Person


def _parse(text: str, **kwargs) -> tuple[list[Item], BlockParser]:
    diagnostics = Diagnostics()
    reader = LineReader(text.splitlines(), source="array", diagnostics=diagnostics)
    parser = BlockParser(reader, default_registry(), diagnostics=diagnostics, **kwargs)

    records = []
    while True:
        starter = reader.peek()
        if starter is None:
            break
        reader.advance()
        record = parser.parse_block(starter, starter.indent)
        if record is not None:
            records.append(record)
    return records, parser


class TestSplitKeyword:
    def test_keyword_and_trimmed_remainder(self) -> None:
        assert split_keyword("   address  mark@x.y   ") == ("address", "mark@x.y")

    def test_keyword_only(self) -> None:
        assert split_keyword("  user") == ("user", "")

    def test_no_word_characters(self) -> None:
        assert split_keyword("  ---") is None


class TestBlockParser:
    def test_nested_blocks(self) -> None:
        records, _ = _parse(
            "user markov\n"
            "  location home\n"
            "     country NL\n"
            "  email home\n"
            "     address mark@x.y\n"
        )

        [user] = records
        assert isinstance(user, Person)
        assert user.name == "markov"

        home = user.find_role("locations", "home")
        assert isinstance(home, Location)
        assert home.country == "NL"

        email = user.find_role("emails", "home")
        assert isinstance(email, EmailIdentity)
        assert email.address == "mark@x.y"

    def test_same_keyword_as_field_and_as_block(self) -> None:
        records, _ = _parse(
            "user markov\n"
            "   location home\n"
            "      country NL\n"
            "   email home\n"
            "      address tux@fish.aq\n"
            "      location home\n"
        )

        email = records[0].find_role("emails", "home")
        assert email.location == "home"

    def test_empty_block_yields_nothing(self) -> None:
        records, _ = _parse("user markov\nuser cleo\n  surname Smith\n")

        assert [record.name for record in records] == ["cleo"]

    def test_unknown_keyword_drops_whole_subtree(self) -> None:
        records, _ = _parse(
            "pet rex\n"
            "  collar red\n"
            "    buckle brass\n"
            "      shine high\n"
            "  owner markov\n"
            "email tux\n"
            "  address tux@fish.net\n"
        )

        [email] = records
        assert email.name == "tux"
        assert email.address == "tux@fish.net"

    def test_unknown_nested_keyword_is_dropped(self) -> None:
        records, _ = _parse(
            "user markov\n"
            "  pet rex\n"
            "    colour brown\n"
            "  surname Overmeer\n"
        )

        [user] = records
        assert user.surname == "Overmeer"
        assert user.collections() == []

    def test_block_with_only_unknown_children_disappears(self) -> None:
        records, _ = _parse("user markov\n  pet rex\n    colour brown\n")

        assert records == []

    def test_reference_line_is_recorded_not_stored(self) -> None:
        records, parser = _parse(
            "user markov\n"
            "   location home = user(cleo).location(home)\n"
            "   location work\n"
            "      organization MARKOV Solutions\n"
        )

        [user] = records
        assert [loc.name for loc in user.collection("locations").roles()] == ["work"]
        assert user.model_fields_set == {"name"}

        [reference] = parser.references
        assert reference.group == "location"
        assert reference.name == "home"
        assert reference.lookup == "user(cleo).location(home)"
        assert reference.line_number == 2

    def test_duplicate_fields_are_passed_in_order(self) -> None:
        records, _ = _parse(
            "location office\n"
            "  telephone +31 1\n"
            "  telephone +31 2\n"
        )

        assert records[0].telephone == ["+31 1", "+31 2"]

    def test_field_without_name_is_dropped_with_diagnostic(self) -> None:
        diagnostics = Diagnostics()
        reader = LineReader(
            ["user markov", "  ---", "  surname Overmeer"],
            source="array",
            diagnostics=diagnostics,
        )
        parser = BlockParser(reader, default_registry(), diagnostics=diagnostics)
        starter = reader.peek()
        reader.advance()

        user = parser.parse_block(starter, starter.indent)

        assert user.surname == "Overmeer"
        [diagnostic] = list(diagnostics)
        assert diagnostic.line_number == 2

    def test_leaves_dedented_line_for_caller(self) -> None:
        reader = LineReader(["user markov", "  surname Overmeer", "email tux"])
        parser = BlockParser(reader, default_registry(), diagnostics=Diagnostics())
        starter = reader.peek()
        reader.advance()

        parser.parse_block(starter, starter.indent)

        assert reader.peek().text == "email tux"

    def test_ragged_indentation_opens_a_block(self) -> None:
        """
        Only the next line decides between field and nested block.

        `firstname Mark` is indented less than the line after it, so it is
        read as a block starter of the unknown keyword `firstname`, which
        swallows the `email work` block below it.
        """
        records, _ = _parse(
            "user markov\n"
            "    email home\n"
            "        address home@x.y\n"
            "  firstname Mark\n"
            "    email work\n"
            "        address work@x.y\n"
        )

        [user] = records
        assert user.firstname is None
        assert [e.name for e in user.collection("emails").roles()] == ["home"]

    def test_max_depth_guard(self) -> None:
        with pytest.raises(NestingTooDeepError, match="around line 3"):
            _parse(
                "user markov\n"
                "  location home\n"
                "    street Main\n"
                "      number 1\n",
                max_depth=1,
            )

    def test_max_depth_allows_shallow_documents(self) -> None:
        records, _ = _parse(
            "user markov\n  location home\n    country NL\n", max_depth=1
        )

        assert len(records) == 1
