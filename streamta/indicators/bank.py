"""
Indicator bank: a named group of incremental indicators fed one stream.

Provides:
- IndicatorBank: builds indicators from specs, updates them together,
  reports warmup, and checkpoints/restores their state
- load_indicator_specs: read indicator specs from a YAML file

Spec format (dict or YAML list entry):
    - type: hhv
      key: high_20
      params:
        period: 20
    - type: cross_above
      key: above_100
      params:
        threshold: 100.0

Example:
    bank = IndicatorBank.from_yaml("indicators.yml")
    for price in stream:
        outputs = bank.update(price)
        if bank.is_ready and outputs["above_100"]:
            ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .incremental.base import IncrementalIndicator
from .incremental.factory import (
    create_incremental_indicator,
    list_incremental_indicators,
    supports_incremental,
)
from .incremental.serialization import payload_to_indicator, state_to_payload

logger = logging.getLogger(__name__)


def load_indicator_specs(path: str | Path) -> list[dict[str, Any]]:
    """
    Load indicator specs from a YAML file.

    The file must contain a top-level ``indicators`` list.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document does not have the expected shape.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if not isinstance(document, dict) or "indicators" not in document:
        raise ValueError(
            f"Indicator file '{path}' must contain a top-level 'indicators' list.\n"
            f"\n"
            f"Fix:\n"
            f"  indicators:\n"
            f"    - type: hhv\n"
            f"      key: high_20\n"
            f"      params: {{period: 20}}"
        )

    specs = document["indicators"] or []
    if not isinstance(specs, list):
        raise ValueError(
            f"'indicators' in '{path}' must be a list, got {type(specs).__name__}"
        )

    logger.debug("loaded %d indicator specs from %s", len(specs), path)
    return specs


class IndicatorBank:
    """
    Named collection of incremental indicators updated with the same sample.

    Specs are validated at construction time:
    - Type must be a supported incremental indicator
    - Key must be present and unique
    - Params must be valid for the type

    Attributes:
        indicators: Dict mapping keys to indicator instances (spec order).
    """

    def __init__(self, indicator_specs: list[dict[str, Any]] | None = None) -> None:
        """
        Initialize the bank from indicator specs.

        Raises:
            ValueError: If a spec is missing fields, duplicates a key, or
                names an unsupported type.
        """
        self.indicators: dict[str, IncrementalIndicator] = {}
        self._sample_idx: int = -1

        for spec in indicator_specs or []:
            self._add_from_spec(spec)

    @classmethod
    def from_yaml(cls, path: str | Path) -> IndicatorBank:
        """Build a bank from a YAML spec file."""
        return cls(load_indicator_specs(path))

    def _add_from_spec(self, spec: dict[str, Any]) -> None:
        indicator_type = spec.get("type")
        key = spec.get("key")
        params = spec.get("params") or {}

        if not indicator_type:
            raise ValueError(
                f"Indicator spec missing 'type' field.\n"
                f"\n"
                f"Fix: Add 'type' to the indicator spec:\n"
                f"  - type: hhv\n"
                f"    key: <unique_key>"
            )

        if not key:
            raise ValueError(
                f"Indicator spec for type '{indicator_type}' missing 'key' field.\n"
                f"\n"
                f"Fix: Add 'key' to the indicator spec:\n"
                f"  - type: {indicator_type}\n"
                f"    key: <unique_key>"
            )

        if key in self.indicators:
            raise ValueError(
                f"Duplicate indicator key '{key}'.\n"
                f"\n"
                f"Fix: Use unique keys for each indicator."
            )

        if not supports_incremental(indicator_type):
            available_str = ", ".join(list_incremental_indicators())
            raise ValueError(
                f"Unknown indicator type: '{indicator_type}'\n"
                f"\n"
                f"Available types: {available_str}"
            )

        self.indicators[key] = create_incremental_indicator(indicator_type, params)

    def update(self, sample: float) -> dict[str, Any]:
        """
        Feed one sample to every indicator, in spec order.

        Returns:
            Dict mapping each key to that indicator's new output.
        """
        self._sample_idx += 1
        return {key: ind.update(sample) for key, ind in self.indicators.items()}

    @property
    def warmup_bars(self) -> int:
        """Samples needed before every indicator is primed."""
        if not self.indicators:
            return 0
        return max(ind.period for ind in self.indicators.values())

    @property
    def is_ready(self) -> bool:
        return all(ind.is_ready for ind in self.indicators.values())

    @property
    def sample_idx(self) -> int:
        """Index of the last processed sample (-1 before the first)."""
        return self._sample_idx

    def get(self, key: str) -> IncrementalIndicator:
        """
        Get an indicator by key.

        Raises:
            KeyError: If key is not defined.
        """
        if key not in self.indicators:
            available = list(self.indicators.keys())
            raise KeyError(
                f"Indicator '{key}' not defined.\n"
                f"Available: {available}"
            )
        return self.indicators[key]

    def values(self) -> dict[str, Any]:
        """Current output of every indicator."""
        return {key: ind.value for key, ind in self.indicators.items()}

    def keys(self) -> list[str]:
        return list(self.indicators.keys())

    def __len__(self) -> int:
        return len(self.indicators)

    def __contains__(self, key: object) -> bool:
        return key in self.indicators

    def reset(self) -> None:
        """Reset every indicator to its post-construction state."""
        self._sample_idx = -1
        for ind in self.indicators.values():
            ind.reset()

    def to_json(self) -> dict[str, Any]:
        """Serialize state for crash recovery."""
        return {
            "sample_idx": self._sample_idx,
            "indicators": {
                key: state_to_payload(ind) for key, ind in self.indicators.items()
            },
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> IndicatorBank:
        """
        Restore a bank from to_json() output.

        Raises:
            DataItemIncompleteError: If an indicator payload is missing fields.
            DataItemInvalidError: If an indicator payload is malformed.
        """
        instance = cls()
        instance._sample_idx = data.get("sample_idx", -1)
        for key, payload in data.get("indicators", {}).items():
            instance.indicators[key] = payload_to_indicator(payload)
        logger.debug(
            "restored bank with %d indicators at sample %d",
            len(instance.indicators), instance._sample_idx,
        )
        return instance

    def __repr__(self) -> str:
        """Return string representation."""
        keys = ", ".join(self.indicators)
        return f"IndicatorBank(indicators=[{keys}])"
