"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from thinkspace.config.domain.config import ChatConfig
from thinkspace.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from thinkspace.config.infrastructure.yaml_loader import YamlConfigLoader
from thinkspace.core.errors import ThinkSpaceError
from tests.config.fake_observer import FakeConfigObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _load(path: Path) -> tuple[ChatConfig, FakeConfigObserver]:
    observer = FakeConfigObserver()
    return YamlConfigLoader(observer=observer).load(path=path), observer


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestValidConfigLoading:
    """A valid YAML config loads with every section populated."""

    def test_loads_every_section(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEV_TOKEN", "secret")
        monkeypatch.delenv("MODEL_API_BASE", raising=False)

        cfg, _ = _load(FIXTURES / "valid_config.yaml")

        assert cfg.name == "thinkspace-test"
        assert cfg.model.name == "gpt-4o-mini"
        assert cfg.model.api_base == "http://localhost:4000"
        assert cfg.orchestration.step_budget == 3
        assert cfg.orchestration.history_window == 6
        assert cfg.server.port == 9000
        assert cfg.knowledge.seed_path == Path("seed.yaml")

    def test_interpolates_token_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEV_TOKEN", "secret")

        cfg, _ = _load(FIXTURES / "valid_config.yaml")

        assert cfg.auth.tokens == {"secret": "user-1", "static-token": "user-2"}

    def test_emits_config_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEV_TOKEN", "secret")

        _, observer = _load(FIXTURES / "valid_config.yaml")

        assert observer.loaded == [{"name": "thinkspace-test", "model": "gpt-4o-mini"}]
        assert observer.warnings == []


class TestTemperatureWarning:
    """Temperatures above 1.0 load but emit a warning."""

    def test_high_temperature_warns(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: hot\nmodel: {name: m, temperature: 1.5}\n")

        cfg, observer = _load(path)

        assert cfg.model.temperature == pytest.approx(1.5)
        assert observer.warnings == [pytest.approx(1.5)]

    def test_temperature_of_one_does_not_warn(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: warm\nmodel: {name: m, temperature: 1.0}\n")

        _, observer = _load(path)

        assert observer.warnings == []


class TestLoadFailures:
    """Every load failure is a ThinkSpaceError whose message starts with 'Failed to'."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError) as exc_info:
            _load(tmp_path / "absent.yaml")

        assert str(exc_info.value).startswith("Failed to ")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: [unclosed\n")

        with pytest.raises(ConfigLoadError):
            _load(path)

    def test_all_missing_env_vars_are_reported(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ALPHA", raising=False)
        monkeypatch.delenv("BETA", raising=False)
        path = _write(tmp_path, "name: ${ALPHA}\nmodel: {name: '${BETA}'}\n")

        with pytest.raises(MissingEnvVarsError) as exc_info:
            _load(path)

        assert exc_info.value.missing_vars == ["ALPHA", "BETA"]

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "name: dev\nmodel: {name: m}\norchestration: {step_budget: 0}\n")

        with pytest.raises(ConfigValidationError) as exc_info:
            _load(path)

        assert isinstance(exc_info.value, ThinkSpaceError)
        assert "step_budget" in str(exc_info.value)
