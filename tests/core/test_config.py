"""Unit tests for selectstar.core.config."""

from selectstar.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LIST_SEPARATOR", "IDENTIFIER_SEPARATOR", "DEDENT"):
            monkeypatch.delenv(f"SELECTSTAR_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.LIST_SEPARATOR == ", "
        assert s.IDENTIFIER_SEPARATOR == ", "
        assert s.DEDENT is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SELECTSTAR_LIST_SEPARATOR", " | ")
        monkeypatch.setenv("SELECTSTAR_DEDENT", "false")
        s = Settings(_env_file=None)
        assert s.LIST_SEPARATOR == " | "
        assert s.DEDENT is False

    def test_empty_env_ignored(self, monkeypatch):
        monkeypatch.setenv("SELECTSTAR_IDENTIFIER_SEPARATOR", "")
        assert Settings(_env_file=None).IDENTIFIER_SEPARATOR == ", "
