"""Tests for summation strategies."""

import math

import pytest

from linearalgebra.core.errors import UnknownStrategyError
from linearalgebra.summation import (
    STRATEGIES,
    exact_sum,
    get_strategy,
    kahan_sum,
    naive_sum,
    neumaier_sum,
    pairwise_sum,
    strategy_name,
)


class TestNaiveSum:
    """Test naive left-to-right accumulation."""

    def test_sums_integers_and_floats(self):
        """Test plain sums."""
        assert naive_sum([1.0, 2.0, 3.0]) == 6.0
        assert naive_sum([0.5, 0.25]) == 0.75

    def test_single_element_returned_unchanged(self):
        """Test a one-element sequence returns that element."""
        assert naive_sum([42.0]) == 42.0

    def test_negative_zero_preserved(self):
        """Test that accumulation starts from the first element, not zero."""
        result = naive_sum([-0.0])
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_left_to_right_order(self):
        """Test the result matches ((a0 + a1) + a2) exactly."""
        values = [0.1, 0.2, 0.3]
        assert naive_sum(values) == (0.1 + 0.2) + 0.3

    def test_catastrophic_cancellation_loses_small_term(self):
        """Test naive summation drops the small term in [1e16, 1, -1e16]."""
        assert naive_sum([1e16, 1.0, -1e16]) == 0.0

    def test_propagates_infinity_and_nan(self):
        """Test IEEE-754 propagation of non-finite values."""
        assert naive_sum([1.0, math.inf]) == math.inf
        assert math.isnan(naive_sum([math.inf, -math.inf]))


class TestCompensatedSums:
    """Test compensated and exact strategies."""

    def test_kahan_recovers_small_increments(self):
        """Test Kahan keeps the error of many tiny additions."""
        values = [1.0] + [1e-16] * 10
        assert kahan_sum(values) == pytest.approx(1.0 + 1e-15, rel=0, abs=3e-16)
        assert naive_sum(values) == 1.0

    def test_neumaier_handles_large_cancelling_terms(self):
        """Test Neumaier returns the exact result where Kahan fails."""
        values = [1e16, 1.0, -1e16]
        assert kahan_sum(values) == 0.0
        assert neumaier_sum(values) == 1.0

    def test_exact_sum_is_correctly_rounded(self):
        """Test math.fsum based strategy."""
        assert exact_sum([1e100, 1.0, -1e100]) == 1.0
        assert exact_sum([0.1] * 10) == 1.0

    def test_exact_sum_overflow_falls_back_to_ieee(self):
        """Test intermediate overflow gives inf instead of raising."""
        assert exact_sum([1e308, 1e308, -1e308]) == math.inf

    def test_exact_sum_opposite_infinities_give_nan(self):
        """Test inf + -inf gives NaN instead of raising."""
        assert math.isnan(exact_sum([math.inf, -math.inf]))

    def test_pairwise_returns_python_float(self):
        """Test numpy reduction result is converted to float."""
        result = pairwise_sum([1.0, 2.0, 3.0])
        assert type(result) is float
        assert result == 6.0

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_all_strategies_agree_on_exact_inputs(self, name):
        """Test every strategy sums small integers exactly."""
        assert STRATEGIES[name]([1.0, 2.0, 3.0, 4.0]) == 10.0

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    @pytest.mark.parametrize(
        "values,expected",
        [
            ([math.inf, 1.0], math.inf),
            ([-math.inf, 1.0], -math.inf),
            ([1.0, math.inf, 1.0], math.inf),
            ([1e308, 1e308, -1e308], math.inf),
            ([-1e308, -1e308, 1e308], -math.inf),
        ],
    )
    def test_infinite_sums_stay_infinite(self, name, values, expected):
        """Test non-finite totals propagate like naive summation."""
        assert STRATEGIES[name](values) == expected

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    @pytest.mark.parametrize("values", [[math.inf, -math.inf], [math.nan, 1.0], [1.0, math.nan]])
    def test_invalid_sums_give_nan(self, name, values):
        """Test inf + -inf and NaN inputs give NaN."""
        assert math.isnan(STRATEGIES[name](values))

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_strategies_do_not_mutate_input(self, name):
        """Test strategies leave their argument untouched."""
        values = [1e16, 1.0, -1e16]
        STRATEGIES[name](values)
        assert values == [1e16, 1.0, -1e16]


class TestStrategyRegistry:
    """Test name resolution."""

    def test_get_strategy_by_name(self):
        """Test resolving registered names."""
        assert get_strategy("naive") is naive_sum
        assert get_strategy("neumaier") is neumaier_sum

    def test_get_strategy_returns_callable_unchanged(self):
        """Test custom callables pass through."""
        custom = lambda values: 0.0  # noqa: E731
        assert get_strategy(custom) is custom

    def test_get_strategy_none_uses_configured_default(self):
        """Test None resolves to the configured default (naive)."""
        assert get_strategy(None) is naive_sum

    def test_unknown_name_raises(self):
        """Test unknown names raise UnknownStrategyError."""
        with pytest.raises(UnknownStrategyError) as exc_info:
            get_strategy("bogus")
        assert exc_info.value.details["name"] == "bogus"
        assert "naive" in exc_info.value.details["available"]

    def test_unknown_strategy_is_lookup_error(self):
        """Test the error can be caught as LookupError."""
        with pytest.raises(LookupError):
            get_strategy("bogus")

    def test_strategy_name(self):
        """Test names of registered and custom strategies."""
        assert strategy_name(kahan_sum) == "kahan"

        def my_sum(values):
            return 0.0

        assert strategy_name(my_sum).endswith("my_sum")
