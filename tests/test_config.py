import pytest

from mocap_bvh.config import AppConfig, ParserConfig


def test_defaults_are_valid():
    assert AppConfig().validate() == []


def test_validate_reports_problems():
    config = ParserConfig(dtype="int8", encoding="no-such-codec")
    issues = config.validate()
    assert len(issues) == 2


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    config = AppConfig(log_level="DEBUG", parser=ParserConfig(validate_offsets=False))
    config.to_yaml(path)

    loaded = AppConfig.from_yaml(path)
    assert loaded.log_level == "DEBUG"
    assert loaded.parser.validate_offsets is False
    assert loaded.parser.dtype == "float32"


def test_partial_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("parser:\n  dtype: float64\n")
    config = AppConfig.from_yaml(path)
    assert config.parser.dtype == "float64"
    assert config.log_level == "WARNING"


def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert AppConfig.from_yaml(path) == AppConfig()


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("parser:\n  precision: high\n")
    with pytest.raises(ValueError, match="precision"):
        AppConfig.from_yaml(path)

    path.write_text("verbosity: 3\n")
    with pytest.raises(ValueError, match="verbosity"):
        AppConfig.from_yaml(path)
