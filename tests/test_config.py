import pytest

from mstgraph.config import MSTConfig, load_config
from mstgraph.exceptions import ConfigurationError


def test_defaults():
    config = MSTConfig()
    assert config.heap_sizing == "exact"
    assert not config.verbose
    assert config.effective_log_level == "WARNING"


def test_env_yaml_and_overrides_are_layered(tmp_path):
    env = {"MSTGRAPH_HEAP_SIZING": "quadratic", "MSTGRAPH_VERBOSE": "yes"}
    config_yaml = tmp_path / "mstgraph.yaml"
    config_yaml.write_text("log_level: info\nverbose: false\n", encoding="utf-8")

    config = load_config(config_yaml, environ=env, log_format="json", verbose=None)

    assert config.heap_sizing == "quadratic"
    assert config.log_level == "info"
    assert config.verbose is False
    assert config.log_format == "json"
    assert config.effective_log_level == "INFO"


def test_verbose_forces_debug_level():
    config = MSTConfig.from_env({"MSTGRAPH_VERBOSE": "1", "MSTGRAPH_LOG_LEVEL": "error"})
    assert config.effective_log_level == "DEBUG"


@pytest.mark.parametrize(
    "environ",
    [
        {"MSTGRAPH_VERBOSE": "maybe"},
        {"MSTGRAPH_HEAP_SIZING": "huge"},
        {"MSTGRAPH_LOG_FORMAT": "xml"},
        {"MSTGRAPH_LOG_LEVEL": "garbage"},
    ],
)
def test_invalid_env_values(environ):
    with pytest.raises(ConfigurationError):
        MSTConfig.from_env(environ)


def test_invalid_yaml_files(tmp_path):
    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- a\n- b\n", encoding="utf-8")
    unknown_key = tmp_path / "unknown.yaml"
    unknown_key.write_text("colour: blue\n", encoding="utf-8")
    broken = tmp_path / "broken.yaml"
    broken.write_text("log_level: [unclosed\n", encoding="utf-8")

    for path in (not_mapping, unknown_key, broken, tmp_path / "missing.yaml"):
        with pytest.raises(ConfigurationError):
            MSTConfig.from_yaml(path)


def test_to_dict_round_trips_through_mapping():
    config = MSTConfig(log_level="DEBUG", heap_sizing="quadratic")
    assert MSTConfig.from_mapping(config.to_dict()) == config


@pytest.mark.parametrize("level", ["LOUDEST", "", "Level 5", 10])
def test_unknown_log_level_is_rejected(level):
    with pytest.raises(ConfigurationError):
        MSTConfig(log_level=level)


def test_log_level_accepts_any_case_and_whitespace():
    assert MSTConfig(log_level=" error ").effective_log_level == "ERROR"
