"""
Tests for configuration loading.
"""

import json

import pytest
import yaml

from commission_queue.utils.config import OptimizerConfig, get_default_config, load_config


class TestLoadConfig:
    """Test cases for config files."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({'optimizer': {'alpha': 0.5}}))

        assert load_config(str(path)) == {'optimizer': {'alpha': 0.5}}

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'optimizer': {'granularity': 4}}))

        assert load_config(str(path))['optimizer']['granularity'] == 4

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")

        assert load_config(str(path)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[optimizer]")

        with pytest.raises(ValueError, match="Unsupported"):
            load_config(str(path))


class TestOptimizerConfig:
    """Test cases for the immutable engine config."""

    def test_defaults_match_default_config(self):
        assert OptimizerConfig.from_dict(get_default_config()) == OptimizerConfig()

    def test_defaults(self):
        config = OptimizerConfig()

        assert config.granularity == 10
        assert config.alpha == 0.1
        assert config.default_daily_hours == 8.0
        assert (config.beta_min, config.beta_max) == (1.0, 2.0)

    def test_partial_section(self):
        config = OptimizerConfig.from_dict({'optimizer': {'alpha': 0.25}})

        assert config.alpha == 0.25
        assert config.granularity == 10

    def test_missing_section(self):
        assert OptimizerConfig.from_dict({}) == OptimizerConfig()
        assert OptimizerConfig.from_dict(None) == OptimizerConfig()

    def test_frozen(self):
        config = OptimizerConfig()

        with pytest.raises(AttributeError):
            config.alpha = 1.0

    def test_rejects_bad_granularity(self):
        with pytest.raises(ValueError):
            OptimizerConfig(granularity=0)

    def test_rejects_inverted_beta_range(self):
        with pytest.raises(ValueError):
            OptimizerConfig.from_dict({'optimizer': {'beta_min': 3.0, 'beta_max': 2.0}})
