"""Tests for topology configuration."""

import pytest

from graphtopo.core.config import TopologyConfig
from graphtopo.core.enums import PivotStrategy
from graphtopo.core.exceptions import ConfigurationError


def test_defaults():
    """Test default configuration values."""
    config = TopologyConfig()
    assert config.pivot_strategy is PivotStrategy.TOMITA_TANAKA_TAKAHASHI
    assert config.max_cycle_nodes_reported == 10
    assert config.max_memory_mb is None


def test_from_dict():
    """Test building configuration from a mapping."""
    config = TopologyConfig.from_dict(
        {"pivot_strategy": "trivial", "max_cycle_nodes_reported": 3, "max_memory_mb": 64}
    )
    assert config.pivot_strategy is PivotStrategy.TRIVIAL
    assert config.max_cycle_nodes_reported == 3
    assert config.max_memory_mb == 64
    assert TopologyConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [
        {"pivot_strategy": "random"},
        {"max_cycle_nodes_reported": -1},
        {"max_cycle_nodes_reported": "ten"},
        {"max_memory_mb": 0},
        {"unknown": True},
    ],
)
def test_from_dict_rejects_invalid(data):
    """Test schema validation failures raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        TopologyConfig.from_dict(data)


def test_direct_construction_validates():
    """Test invalid values are rejected without a mapping."""
    with pytest.raises(ConfigurationError):
        TopologyConfig(max_cycle_nodes_reported=-2)
    with pytest.raises(ConfigurationError):
        TopologyConfig(pivot_strategy="trivial")
