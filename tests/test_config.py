import pytest

from pincerhex.config import evaluator_config_from_dict, load_yaml_config
from pincerhex.potential import EvaluatorConfig


def test_missing_file_yields_empty_mapping(tmp_path) -> None:
    assert load_yaml_config(tmp_path / "absent.yaml") == {}


def test_yaml_overrides_defaults(tmp_path) -> None:
    path = tmp_path / "bot.yaml"
    path.write_text("evaluator:\n  rounds: 50\n  include_opponent_potential: false\n", encoding="utf-8")

    cfg = load_yaml_config(path)
    config = evaluator_config_from_dict(cfg["evaluator"])

    assert config.rounds == 50
    assert config.include_opponent_potential is False
    assert config.diff == EvaluatorConfig().diff


def test_top_level_must_be_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml_config(path)


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ValueError, match="temperature"):
        evaluator_config_from_dict({"temperature": 1.0})
    assert evaluator_config_from_dict(None) == EvaluatorConfig()
