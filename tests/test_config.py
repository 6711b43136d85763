import json
from pathlib import Path

from photo_platformer import config
from photo_platformer.reachability import TraversalLimits


def test_deep_merge_handles_nested_dicts_without_mutating_inputs() -> None:
    base = {"physics": {"max_jump_height": 0.25}, "repair": {"max_iterations": 10}}
    override = {
        "physics": {"max_jump_height": 0.3},
        "repair": {"strict": True},
        "preview": {"width": 320},
    }

    merged = config._deep_merge(base, override)

    assert merged["physics"]["max_jump_height"] == 0.3
    assert merged["repair"]["max_iterations"] == 10
    assert merged["repair"]["strict"] is True
    assert merged["preview"]["width"] == 320

    assert base["physics"]["max_jump_height"] == 0.25
    assert "strict" not in base["repair"]


def test_load_config_merges_defaults_with_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "physics": {"max_horizontal_reach": 0.5},
                "new_option": {"enabled": True},
            }
        ),
        encoding="utf-8",
    )

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded["physics"]["max_horizontal_reach"] == 0.5
    assert loaded["physics"]["max_jump_height"] == 0.25
    assert loaded["new_option"] == {"enabled": True}
    assert loaded is not config.DEFAULT_CONFIG


def test_load_config_falls_back_to_defaults_on_invalid_json(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("not valid json", encoding="utf-8")

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded == config.DEFAULT_CONFIG
    assert loaded["physics"] is not config.DEFAULT_CONFIG["physics"]


def test_load_config_without_file_returns_defaults(tmp_path: Path) -> None:
    loaded, _ = config.load_config(path=tmp_path / "missing.json")

    assert loaded == config.DEFAULT_CONFIG


def test_save_config_persists_to_disk(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    payload = {"repair": {"strict": True}}

    config.save_config(payload, config_path)

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved == payload


def test_build_settings_defaults_match_default_config() -> None:
    settings = config.BuildSettings.from_config(config.DEFAULT_CONFIG)

    assert settings == config.BuildSettings()
    assert settings.limits == TraversalLimits(0.25, 0.40)
    assert settings.max_repair_iterations == 10
    assert settings.strict is False


def test_build_settings_reads_overrides() -> None:
    settings = config.BuildSettings.from_config(
        {
            "physics": {"max_jump_height": 0.3, "max_horizontal_reach": 0.2},
            "repair": {"max_iterations": 4, "strict": True},
        }
    )

    assert settings.limits == TraversalLimits(0.3, 0.2)
    assert settings.max_repair_iterations == 4
    assert settings.strict is True


def test_build_settings_ignores_malformed_values() -> None:
    settings = config.BuildSettings.from_config(
        {
            "physics": {"max_jump_height": "high", "max_horizontal_reach": -1},
            "repair": "nope",
        }
    )

    assert settings == config.BuildSettings()


def test_preview_size_falls_back_per_dimension() -> None:
    assert config.preview_size({"preview": {"width": 320, "height": 0}}) == (320, 540)
    assert config.preview_size({}) == (960, 540)


def test_build_settings_strict_requires_a_json_boolean() -> None:
    for value in ("false", "true", 1, None):
        settings = config.BuildSettings.from_config({"repair": {"strict": value}})
        assert settings.strict is False

    assert config.BuildSettings.from_config({"repair": {"strict": True}}).strict is True
