"""
Configuration for the structural analysis algorithms.

``TopologyConfig`` gathers the knobs callers may want to set once and reuse
across calls: the Bron-Kerbosch pivot strategy, the literal node cap of
cyclic ordering messages, and an optional memory ceiling for clique
enumeration. ``TopologyConfig.from_dict`` validates plain mappings (for example
loaded from a JSON or TOML file) against a JSON schema before building the
dataclass.

Example:
    >>> config = TopologyConfig.from_dict({"pivot_strategy": "trivial"})
    >>> finder = CliqueFinder.from_config(config)
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .enums import PivotStrategy
from .exceptions import DEFAULT_MAX_REPORTED_NODES, ConfigurationError

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "pivot_strategy": {
            "type": "string",
            "enum": [s.value for s in PivotStrategy],
        },
        "max_cycle_nodes_reported": {"type": "integer", "minimum": 0},
        "max_memory_mb": {
            "anyOf": [{"type": "number", "exclusiveMinimum": 0}, {"type": "null"}]
        },
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class TopologyConfig:
    """
    Settings shared by the analysis algorithms.

    Attributes:
        pivot_strategy (PivotStrategy): Bron-Kerbosch pivot selection
        max_cycle_nodes_reported (int): Node count above which cyclic ordering
            errors only report counts
        max_memory_mb (Optional[float]): Memory ceiling for clique enumeration
    """

    pivot_strategy: PivotStrategy = PivotStrategy.TOMITA_TANAKA_TAKAHASHI
    max_cycle_nodes_reported: int = DEFAULT_MAX_REPORTED_NODES
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(self.pivot_strategy, PivotStrategy):
            raise ConfigurationError("pivot_strategy must be a PivotStrategy")
        if self.max_cycle_nodes_reported < 0:
            raise ConfigurationError("max_cycle_nodes_reported must be non-negative")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TopologyConfig":
        """
        Build a configuration from a plain mapping.

        Raises:
            ConfigurationError: If the mapping fails schema validation
        """
        try:
            validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid topology configuration: {e.message}")

        kwargs: Dict[str, Any] = dict(data)
        if "pivot_strategy" in kwargs:
            kwargs["pivot_strategy"] = PivotStrategy(kwargs["pivot_strategy"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pivot_strategy": self.pivot_strategy.value,
            "max_cycle_nodes_reported": self.max_cycle_nodes_reported,
            "max_memory_mb": self.max_memory_mb,
        }
