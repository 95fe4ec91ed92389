"""
Tests for the incremental indicator factory and registry.
"""

import pytest

from streamta.errors import InvalidParameterError
from streamta.indicators.incremental import (
    CrossAbove,
    CrossBelow,
    HighestHighValue,
    LinearRegressionPrediction,
    LowestLowValue,
    create_incremental_indicator,
    indicator_class_for,
    indicator_type_of,
    list_incremental_indicators,
    supports_incremental,
)


class TestCreateIndicator:
    """Test create_incremental_indicator()."""

    @pytest.mark.parametrize("indicator_type,cls,period", [
        ("cross_above", CrossAbove, 2),
        ("cross_below", CrossBelow, 2),
        ("hhv", HighestHighValue, 7),
        ("llv", LowestLowValue, 7),
        ("forecast", LinearRegressionPrediction, 9),
    ])
    def test_defaults(self, indicator_type, cls, period):
        ind = create_incremental_indicator(indicator_type)
        assert type(ind) is cls
        assert ind.period == period

    def test_params_are_forwarded(self):
        hhv = create_incremental_indicator("hhv", {"period": 20})
        assert hhv.period == 20
        cross = create_incremental_indicator("cross_below", {"threshold": 30.0})
        assert cross.threshold == 30.0

    @pytest.mark.parametrize("alias,cls", [
        ("HHV", HighestHighValue),
        (" lowest_low_value ", LowestLowValue),
        ("CrossAbove", CrossAbove),
        ("linreg_forecast", LinearRegressionPrediction),
    ])
    def test_aliases_and_case(self, alias, cls):
        assert type(create_incremental_indicator(alias)) is cls

    def test_unknown_type_raises_key_error(self):
        with pytest.raises(KeyError, match="Unsupported indicator type"):
            create_incremental_indicator("macd")

    def test_unknown_param_raises_value_error(self):
        with pytest.raises(ValueError, match="Unknown params for 'hhv'"):
            create_incremental_indicator("hhv", {"length": 5})

    def test_crossover_rejects_period_param(self):
        with pytest.raises(ValueError, match="Valid: \\['threshold'\\]"):
            create_incremental_indicator("cross_above", {"period": 2})

    def test_invalid_period_propagates(self):
        with pytest.raises(InvalidParameterError):
            create_incremental_indicator("forecast", {"period": 0})


class TestRegistryQueries:
    """Test registry helpers."""

    def test_list_is_sorted_canonical_names(self):
        assert list_incremental_indicators() == [
            "cross_above", "cross_below", "forecast", "hhv", "llv",
        ]

    def test_supports_incremental(self):
        assert supports_incremental("llv")
        assert supports_incremental("Highest_High_Value")
        assert not supports_incremental("ema")

    def test_indicator_class_for(self):
        assert indicator_class_for("forecast") is LinearRegressionPrediction
        with pytest.raises(KeyError):
            indicator_class_for("rsi")

    def test_indicator_type_of_round_trips(self):
        for name in list_incremental_indicators():
            assert indicator_type_of(create_incremental_indicator(name)) == name

    def test_indicator_type_of_unregistered(self):
        with pytest.raises(KeyError, match="not a registered"):
            indicator_type_of(object())
