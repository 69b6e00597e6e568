import pytest

from ranker.core.errors import ConfigError
from ranker.core.ranking import DEFAULT_CONFIG, load_ranking_config


def test_defaults_are_reference_constants():
    assert load_ranking_config(None) is DEFAULT_CONFIG
    assert DEFAULT_CONFIG.initial_score == 1500.0
    assert DEFAULT_CONFIG.k_factor == 32.0


def test_yaml_overrides(tmp_path):
    path = tmp_path / "ranking.yaml"
    path.write_text("k_factor: 16\ncross_effort_min_items: 6\n", encoding="utf-8")
    config = load_ranking_config(path)

    assert config.k_factor == 16.0
    assert config.cross_effort_min_items == 6
    assert config.initial_score == 1500.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "ranking.yaml"
    path.write_text("", encoding="utf-8")
    assert load_ranking_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize("body", [
    "k_facter: 16\n",
    "k_factor: lots\n",
    "- 1\n- 2\n",
    "k_factor: [1\n",
])
def test_bad_config_raises(tmp_path, body):
    path = tmp_path / "ranking.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_ranking_config(path)


def test_missing_config_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_ranking_config(tmp_path / "absent.yaml")
