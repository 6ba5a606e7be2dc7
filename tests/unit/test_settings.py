"""Tests for environment-driven settings and Options."""

from __future__ import annotations

import pytest

from duoschema import Options
from duoschema.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DUOSCHEMA_VALIDATE_FORMATS", raising=False)
        assert Settings(_env_file=None).validate_formats is False

    @pytest.mark.parametrize("raw", ["true", "1", "yes"])
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("DUOSCHEMA_VALIDATE_FORMATS", raw)
        assert Settings(_env_file=None).validate_formats is True

    def test_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DUOSCHEMA_VALIDATE_FORMATS", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("DUOSCHEMA_VALIDATE_FORMATS=true\n")
        assert Settings(_env_file=env_file).validate_formats is True


class TestOptions:
    def test_default(self) -> None:
        assert Options().validate_formats is False

    def test_from_explicit_settings(self) -> None:
        options = Options.from_settings(Settings(_env_file=None, validate_formats=True))
        assert options == Options(validate_formats=True)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DUOSCHEMA_VALIDATE_FORMATS", "true")
        assert Options.from_settings().validate_formats is True

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Options().validate_formats = True  # type: ignore[misc]
