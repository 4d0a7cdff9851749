"""Tests for domain/model/configuration.py."""

import pytest

from decorum.domain.model.configuration import WeaverConfig
from decorum.domain.model.signature import KEY_PREFIX


class TestWeaverConfig:
    def test_defaults(self) -> None:
        config = WeaverConfig()
        assert config.strict is False
        assert config.key_prefix == KEY_PREFIX
        assert config.disambiguation_marker == "_"
        assert config.store_slots_on_class is True

    def test_empty_prefix_raises(self) -> None:
        with pytest.raises(ValueError, match="key_prefix must not be empty"):
            WeaverConfig(key_prefix="")

    def test_empty_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="disambiguation_marker must not be empty"):
            WeaverConfig(disambiguation_marker="")

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            WeaverConfig().strict = True  # type: ignore[misc]


class TestFromEnv:
    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy_enables_strict(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("DECORUM_STRICT", value)
        assert WeaverConfig.from_env().strict is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off"])
    def test_other_values_keep_lenient(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("DECORUM_STRICT", value)
        assert WeaverConfig.from_env().strict is False

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DECORUM_STRICT", raising=False)
        assert WeaverConfig.from_env().strict is False
