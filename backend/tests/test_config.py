"""Tests for EngineSettings and environment loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from griha.config import EngineSettings

_VARS = (
    "GRIHA_EQUIPMENT_PCT",
    "GRIHA_OVERHEAD_PCT",
    "GRIHA_CONTINGENCY_PCT",
    "GRIHA_STALE_AFTER_DAYS",
    "GRIHA_ESTIMATE_VALIDITY_DAYS",
    "GRIHA_MULTIPLIER_MIN",
    "GRIHA_MULTIPLIER_MAX",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without GRIHA_* variables and restore afterwards."""
    for name in _VARS:
        # setenv then delenv so variables written by load_dotenv are
        # removed again on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestDefaults:
    def test_defaults(self) -> None:
        settings = EngineSettings()
        assert settings.equipment_pct == 4.0
        assert settings.overhead_pct == 10.0
        assert settings.contingency_pct == 12.0
        assert settings.stale_after_days == 90
        assert settings.multiplier_band == (0.5, 3.0)

    @pytest.mark.parametrize(
        "field_values",
        [
            {"equipment_pct": 6.0},
            {"overhead_pct": 7.5},
            {"contingency_pct": 20.0},
            {"stale_after_days": 0},
        ],
    )
    def test_rejects_out_of_band(self, field_values: dict[str, float]) -> None:
        with pytest.raises(ValidationError):
            EngineSettings(**field_values)

    def test_rejects_inverted_multiplier_band(self) -> None:
        with pytest.raises(ValidationError, match="multiplier_min"):
            EngineSettings(multiplier_min=2.0, multiplier_max=1.0)


class TestFromEnv:
    def test_no_overrides(self, tmp_path: Path) -> None:
        settings = EngineSettings.from_env(tmp_path / "missing.env")
        assert settings == EngineSettings()

    def test_environment_overrides(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRIHA_OVERHEAD_PCT", "11")
        monkeypatch.setenv("GRIHA_STALE_AFTER_DAYS", "60")
        settings = EngineSettings.from_env(tmp_path / "missing.env")
        assert settings.overhead_pct == 11.0
        assert settings.stale_after_days == 60

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("GRIHA_EQUIPMENT_PCT=5\nGRIHA_CONTINGENCY_PCT=15\n")
        settings = EngineSettings.from_env(env_file)
        assert settings.equipment_pct == 5.0
        assert settings.contingency_pct == 15.0

    def test_env_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".env").write_text("GRIHA_OVERHEAD_PCT=11\n")
        monkeypatch.chdir(tmp_path)
        assert EngineSettings.from_env().overhead_pct == 11.0

    def test_no_env_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert EngineSettings.from_env() == EngineSettings()

    def test_environment_wins_over_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("GRIHA_EQUIPMENT_PCT=5\n")
        monkeypatch.setenv("GRIHA_EQUIPMENT_PCT", "3")
        assert EngineSettings.from_env(env_file).equipment_pct == 3.0

    def test_invalid_environment_value(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRIHA_OVERHEAD_PCT", "25")
        with pytest.raises(ValidationError):
            EngineSettings.from_env(tmp_path / "missing.env")
