"""Unit tests for reply generation."""

import pytest

from charchat.characters import Character, generate_reply


class TestReplyStyles:
    """Each persona keyword selects a reply style."""

    def test_philosopher(self, socrates):
        assert (
            generate_reply(socrates, "Is justice real?")
            == 'Socrates: Why do you say "Is justice real?"?'
        )

    def test_wizard(self, harry):
        assert (
            generate_reply(harry, "a dragon")
            == 'Harry (inspired): That sounds magical — tell me more about "a dragon".'
        )

    def test_default_echo(self, plain_character):
        assert generate_reply(plain_character, "fresh bread") == "Bob: fresh bread"

    def test_keyword_match_is_case_insensitive(self):
        sage = Character("sage", "Sage", "A PhiloSOPHER of old")
        assert generate_reply(sage, "hi") == 'Sage: Why do you say "hi"?'

    @pytest.mark.parametrize(
        "persona", ["wizard philosopher", "philosopher wizard", "a Wizard and a Philosopher"]
    )
    def test_philosopher_wins_over_wizard(self, persona):
        both = Character("both", "Both", persona)
        assert generate_reply(both, "magic") == 'Both: Why do you say "magic"?'


class TestTextHandling:
    """Input text normalization."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_text_gives_ellipsis(self, socrates, harry, plain_character, text):
        assert generate_reply(socrates, text) == "Socrates: ..."
        assert generate_reply(harry, text) == "Harry (inspired): ..."
        assert generate_reply(plain_character, text) == "Bob: ..."

    def test_text_is_trimmed(self, socrates):
        assert (
            generate_reply(socrates, "  why?  \n")
            == 'Socrates: Why do you say "why?"?'
        )

    def test_deterministic(self, harry):
        assert generate_reply(harry, "owls") == generate_reply(harry, "owls")
