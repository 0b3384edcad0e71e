"""Checker configuration tests."""

import pytest

from causal_streams import CheckConfig
from causal_streams.config import DEFAULT_DEPTH, resolve


class TestCheckConfig:

    def test_defaults(self):
        cfg = CheckConfig()
        assert cfg.depth == DEFAULT_DEPTH
        assert resolve(None) == cfg

    def test_from_env_overrides(self):
        cfg = CheckConfig.from_env({
            "CAUSAL_STREAMS_DEPTH": "3",
            "CAUSAL_STREAMS_MAX_STATES": "12",
            "CAUSAL_STREAMS_SEED": "5",
        })
        assert (cfg.depth, cfg.max_states, cfg.seed) == (3, 12, 5)
        assert cfg.sample_limit == CheckConfig().sample_limit

    def test_from_env_empty(self):
        assert CheckConfig.from_env({}) == CheckConfig()

    def test_from_process_environment(self, monkeypatch):
        monkeypatch.setenv("CAUSAL_STREAMS_DEPTH", "2")
        assert CheckConfig.from_env().depth == 2

    @pytest.mark.parametrize("field,value", [("depth", -1), ("max_states", 0), ("sample_limit", 0)])
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValueError):
            CheckConfig(**{field: value})
