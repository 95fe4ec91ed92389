"""
Tests for IndicatorBank.

Validates spec parsing, joint updates, warmup reporting and
checkpoint/restore of every member indicator.
"""

import json
import math

import pytest

from streamta.errors import DataItemInvalidError
from streamta.indicators import IndicatorBank, load_indicator_specs


SPECS = [
    {"type": "hhv", "key": "high_5", "params": {"period": 5}},
    {"type": "llv", "key": "low_5", "params": {"period": 5}},
    {"type": "forecast", "key": "fc_8", "params": {"period": 8}},
    {"type": "cross_above", "key": "above_100", "params": {"threshold": 100.0}},
    {"type": "cross_below", "key": "below_100", "params": {"threshold": 100.0}},
]


@pytest.fixture
def bank():
    return IndicatorBank(SPECS)


class TestBankConstruction:
    """Test spec validation."""

    def test_keys_in_spec_order(self, bank):
        assert bank.keys() == ["high_5", "low_5", "fc_8", "above_100", "below_100"]
        assert len(bank) == 5
        assert "fc_8" in bank
        assert "missing" not in bank

    def test_empty_bank(self):
        empty = IndicatorBank()
        assert len(empty) == 0
        assert empty.warmup_bars == 0
        assert empty.is_ready
        assert empty.update(1.0) == {}

    def test_missing_type(self):
        with pytest.raises(ValueError, match="missing 'type'"):
            IndicatorBank([{"key": "x"}])

    def test_missing_key(self):
        with pytest.raises(ValueError, match="missing 'key'"):
            IndicatorBank([{"type": "hhv"}])

    def test_duplicate_key(self):
        with pytest.raises(ValueError, match="Duplicate indicator key 'a'"):
            IndicatorBank([
                {"type": "hhv", "key": "a"},
                {"type": "llv", "key": "a"},
            ])

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown indicator type: 'vwap'"):
            IndicatorBank([{"type": "vwap", "key": "v"}])

    def test_params_default_when_omitted(self):
        b = IndicatorBank([{"type": "forecast", "key": "fc", "params": None}])
        assert b.get("fc").period == 9

    def test_get_unknown_key(self, bank):
        with pytest.raises(KeyError, match="not defined"):
            bank.get("nope")

    def test_repr(self):
        b = IndicatorBank([{"type": "hhv", "key": "h"}])
        assert repr(b) == "IndicatorBank(indicators=[h])"


class TestBankUpdates:
    """Test joint updates and warmup."""

    def test_update_returns_every_output(self, bank):
        out = bank.update(99.0)
        assert out["high_5"] == 99.0
        assert out["low_5"] == 99.0
        assert out["fc_8"] == 99.0
        assert out["above_100"] is False

        out = bank.update(101.0)
        assert out["high_5"] == 101.0
        assert out["low_5"] == 99.0
        assert out["above_100"] is True
        assert out["below_100"] is False
        assert bank.sample_idx == 1

    def test_outputs_match_standalone_indicators(self, bank, random_walk):
        standalone = IndicatorBank(SPECS)
        for x in random_walk[:50]:
            joint = bank.update(x)
            separate = {key: standalone.get(key).update(x) for key in standalone.keys()}
            assert joint == separate

    def test_warmup_bars_is_largest_period(self, bank):
        assert bank.warmup_bars == 8

    def test_is_ready_after_warmup(self, bank, random_walk):
        for i, x in enumerate(random_walk[:8]):
            bank.update(x)
            assert bank.is_ready == (i == 7)

    def test_values_reflect_last_update(self, bank):
        values = bank.values()
        assert math.isnan(values["high_5"])
        bank.update(3.0)
        assert bank.values()["high_5"] == 3.0

    def test_reset(self, bank, random_walk):
        for x in random_walk[:20]:
            bank.update(x)
        bank.reset()
        assert bank.sample_idx == -1
        assert not bank.is_ready
        fresh = IndicatorBank(SPECS)
        assert bank.update(random_walk[0]) == fresh.update(random_walk[0])


class TestBankCheckpoint:
    """Test to_json/from_json crash recovery."""

    def test_restored_bank_continues_identically(self, bank, random_walk, continuation):
        for x in random_walk[:30]:
            bank.update(x)

        # Survives a real JSON round trip
        data = json.loads(json.dumps(bank.to_json()))
        restored = IndicatorBank.from_json(data)

        assert restored.keys() == bank.keys()
        assert restored.sample_idx == 29
        for x in continuation:
            assert restored.update(x) == bank.update(x)

    def test_checkpoint_payload_envelopes(self, bank):
        data = bank.to_json()
        assert data["sample_idx"] == -1
        assert data["indicators"]["high_5"]["type"] == "hhv"
        assert data["indicators"]["above_100"]["state"] == {"threshold": 100.0, "window": []}

    def test_malformed_member_payload(self):
        data = {"sample_idx": 3, "indicators": {"h": {"type": "hhv", "state": []}}}
        with pytest.raises(DataItemInvalidError):
            IndicatorBank.from_json(data)


class TestYamlSpecs:
    """Test loading specs from YAML files."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "indicators.yml"
        path.write_text(
            "indicators:\n"
            "  - type: hhv\n"
            "    key: high_20\n"
            "    params:\n"
            "      period: 20\n"
            "  - type: cross_above\n"
            "    key: above_100\n"
            "    params: {threshold: 100.0}\n",
            encoding="utf-8",
        )
        b = IndicatorBank.from_yaml(path)
        assert b.keys() == ["high_20", "above_100"]
        assert b.get("high_20").period == 20
        assert b.get("above_100").threshold == 100.0

    def test_missing_indicators_list(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("specs: []\n", encoding="utf-8")
        with pytest.raises(ValueError, match="top-level 'indicators' list"):
            load_indicator_specs(path)

    def test_indicators_not_a_list(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("indicators:\n  hhv: 3\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a list"):
            load_indicator_specs(path)

    def test_empty_indicators_list(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("indicators:\n", encoding="utf-8")
        assert load_indicator_specs(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_indicator_specs(tmp_path / "absent.yml")
