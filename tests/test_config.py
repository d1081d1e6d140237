"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from beacon_mapper.config import PipelineConfig, load_config


def test_load_config_reads_sections(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    yaml.safe_dump(
        {
            "project": {"name": "test"},
            "logging": {"level": "debug", "output": "stdout"},
            "alignment": {
                "min_overlap": 6,
                "shift_bound": 2500,
                "max_workers": 2,
                "proper_rotations_only": True,
            },
        },
        config_path.open("w", encoding="utf-8"),
    )

    cfg = load_config(config_path)

    assert cfg.project.name == "test"
    assert cfg.logging.level == "DEBUG"
    assert cfg.alignment.min_overlap == 6
    assert cfg.alignment.shift_bound == 2500
    assert cfg.alignment.proper_rotations_only is True


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    cfg = load_config(config_path)

    assert cfg == PipelineConfig()
    assert cfg.alignment.min_overlap == 12
    assert cfg.alignment.shift_bound == 10_000
    assert cfg.alignment.proper_rotations_only is False


def test_shipped_config_is_valid() -> None:
    cfg = load_config(Path(__file__).resolve().parents[1] / "config" / "reconstruction.yaml")
    assert cfg.alignment.max_workers >= 1


@pytest.mark.parametrize(
    "raw",
    [
        {"logging": {"level": "LOUD"}},
        {"alignment": {"min_overlap": 0}},
        {"alignment": {"max_workers": 0}},
        {"alignment": {"shift_bound": -1}},
    ],
)
def test_invalid_values_are_rejected(raw) -> None:
    with pytest.raises(ValidationError):
        PipelineConfig.model_validate(raw)
