"""Unit tests for selectstar.sql.escape (node-postgres compatible quoting)."""

from selectstar.sql.escape import escape_identifier, escape_literal


class TestEscapeIdentifier:
    def test_plain(self):
        assert escape_identifier("accounts") == '"accounts"'

    def test_injection(self):
        assert escape_identifier('accounts " --') == '"accounts "" --"'

    def test_only_quotes(self):
        assert escape_identifier('""') == '""""""'

    def test_empty(self):
        assert escape_identifier("") == '""'

    def test_backslash_and_unicode_untouched(self):
        assert escape_identifier("a\\bé") == '"a\\bé"'


class TestEscapeLiteral:
    def test_none(self):
        assert escape_literal(None) == "NULL"

    def test_plain(self):
        assert escape_literal("abcde") == "'abcde'"

    def test_quote_escape(self):
        assert escape_literal("abc' AND hidden = true") == "'abc'' AND hidden = true'"

    def test_backslash_uses_escape_string(self):
        assert escape_literal("a\\b") == " E'a\\\\b'"

    def test_number(self):
        assert escape_literal(12) == "'12'"
