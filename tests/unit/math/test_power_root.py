"""Tests for exponentiation and root extraction."""

import math

import pytest
from structlog.testing import capture_logs

from scaledec import (
    Decimal,
    EvenRootOfNegativeUndefined,
    FractionalExponentRequiresNonNegativeBase,
    InvalidRootDegree,
    UndefinedZeroNegativePower,
    pow10,
)
from scaledec.math.power import (
    estimate_pow_fractional_settings,
    estimate_root_iter_settings,
    log10_estimate,
    pow_int,
    root,
)


class TestPowInt:
    """Tests for square-and-multiply."""

    def test_exact_without_digits(self):
        """Without digits the product is exact."""
        assert pow_int(Decimal("1.1"), 3).to_string() == "1.331"

    def test_non_positive_exponent(self):
        """Non-positive exponents give 1."""
        assert pow_int(Decimal(7), 0).eq(1)
        assert pow_int(Decimal(7), -2).eq(1)

    def test_large_exponent(self):
        """Matches Python's integer power."""
        assert pow_int(Decimal(3), 200).coefficient == 3**200

    def test_does_not_mutate_base(self):
        """The base is cloned."""
        base = Decimal(2)
        pow_int(base, 10)
        assert str(base) == "2"


class TestPow:
    """Tests for Decimal.pow."""

    def test_integer_exponent(self):
        """Integer exponents are padded to the requested digits."""
        assert str(Decimal(3).pow(4, 8)) == "81.00000000"

    def test_fractional_exponent(self):
        """2 ** 1.5 within the requested precision."""
        result = Decimal(2).pow(Decimal(15, 1), 9)
        assert result.scale == 9
        assert abs(result.number() - math.pow(2, 1.5)) < 1e-8

    def test_square_root_via_half(self):
        """x ** 0.5 equals sqrt(x)."""
        assert str(Decimal(16).pow("0.5", 6)) == "4.000000"
        assert Decimal(2).pow("0.5", 20).eq(Decimal(2).sqrt(20))

    def test_negative_exponent(self):
        """Negative exponents return the reciprocal."""
        result = Decimal(8).pow(-2, 9)
        assert str(result) == "0.015625000"
        assert str(result.rescale()) == "0.015625"

    def test_reciprocal_rounded(self):
        """Reciprocals are rounded to the requested digits."""
        result = Decimal(3).pow(-1, 2)
        assert str(result) == "0.33"
        assert result.scale == 2

    def test_zero_base_keeps_scale(self):
        """A zero base is returned with its scale."""
        result = Decimal(0, 4).pow(2, 8)
        assert result.scale == 4
        assert str(result) == "0.0000"

    def test_zero_exponent(self):
        """Zero exponent gives exactly 1 at scale 0."""
        result = Decimal("123.456").pow(0, 6)
        assert str(result) == "1"
        assert result.scale == 0
        assert str(Decimal(0).pow(0, 6)) == "1"

    def test_zero_to_negative(self):
        """Zero to a negative power is undefined."""
        with pytest.raises(UndefinedZeroNegativePower, match="Zero to negative exponent is undefined"):
            Decimal(0).pow(-1, 6)

    def test_negative_digits_as_zero(self):
        """Negative digits are treated as zero."""
        assert str(Decimal(2).pow(2, -1)) == "4"

    def test_negative_base_fractional_exponent(self):
        """Negative bases need integer exponents."""
        with pytest.raises(FractionalExponentRequiresNonNegativeBase):
            Decimal(-4).pow(Decimal(5, 1), 8)

    def test_negative_base_integer_exponent(self):
        """Negative bases with integer exponents keep the sign rule."""
        assert str(Decimal(-2).pow(3, 2)) == "-8.00"
        assert str(Decimal(-2).pow(4, 0)) == "16"

    def test_exponent_with_negative_scale(self):
        """An exponent like 12e1 is the integer 120."""
        exponent = Decimal(12, -1)
        assert Decimal(2).pow(exponent, 20).eq(2**120)

    def test_large_result_is_exact_in_integer_part(self):
        """Large results keep every integer digit."""
        result = Decimal("1.5").pow(100, 10)
        expected = Decimal(15**100, 100).round(10)
        assert result.eq(expected)

    def test_tiny_base_negative_exponent(self):
        """Reciprocals of tiny powers are correct to the requested digits."""
        result = Decimal("0.5").pow(-100, 4)
        assert result.eq(2**100)

    def test_tiny_base_fractional_exponent(self):
        """Bases far below the requested precision keep their digits."""
        assert str(Decimal("3e-200").pow("0.05", 30)) == "0.000000000105646730854953786139"

    @pytest.mark.parametrize(
        "base,exponent,digits,expected",
        [
            ("1e-200", "0.05", 30, Decimal(1, 10)),
            ("1e-200", "0.5", 120, Decimal(1, 100)),
            ("1e-200", "0.25", 80, Decimal(1, 50)),
            ("4e-100", "1.5", 200, Decimal(8, 150)),
        ],
    )
    def test_tiny_base_exact_fractional_powers(self, base, exponent, digits, expected):
        """Exact fractional powers of tiny bases come out exact."""
        assert Decimal(base).pow(exponent, digits).eq(expected)

    @pytest.mark.parametrize(
        "base,exponent,digits",
        [("7e-100", "0.12", 40), ("3e-200", "0.15", 40), ("2.5e-30", "0.987654321", 50)],
    )
    def test_tiny_base_matches_higher_precision(self, base, exponent, digits):
        """Small bases agree with a higher precision evaluation."""
        value = Decimal(base)
        reference = value.pow(exponent, digits + 30).round(digits)
        assert value.pow(exponent, digits).eq(reference)

    def test_tiny_base_negative_fractional_exponent(self):
        """x**-f times x**f is 1 for a tiny base."""
        value = Decimal("3e-200")
        product = value.pow("-0.05", 30).mul(value.pow("0.05", 60), 40)
        assert product.is_close_to(1, "1e-25")

    def test_in_place(self):
        """pow_ mutates the receiver."""
        value = Decimal(5)
        assert value.pow_(2, 1) is value
        assert str(value) == "25.0"

    def test_failed_pow_leaves_receiver(self):
        """A failed pow_ does not change the receiver."""
        value = Decimal("-4.00")
        with pytest.raises(FractionalExponentRequiresNonNegativeBase):
            value.pow_("0.5")
        assert str(value) == "-4.00"

    def test_fractional_exponent_high_precision(self):
        """Requested digits agree with a higher precision evaluation."""
        base = Decimal("1.0000000001")
        exponent = Decimal("0.9876543210123456789")
        digits = 60
        reference = base.pow(exponent, digits + 30).round(digits)
        assert base.pow(exponent, digits).eq(reference)

    def test_negative_fractional_exponent_high_precision(self):
        """Negative fractional exponents keep their precision."""
        base = Decimal("7.8125")
        exponent = Decimal("-0.27182818284590452353")
        digits = 50
        reference = base.pow(exponent, digits + 30).round(digits)
        assert base.pow(exponent, digits).eq(reference)


class TestRoot:
    """Tests for Newton-Raphson roots."""

    def test_sqrt(self):
        """sqrt(2) to 10 digits."""
        result = Decimal(2).sqrt(10)
        assert str(result) == "1.4142135624"

    def test_sqrt_in_place(self):
        """sqrt_ mutates and pads to the requested digits."""
        value = Decimal("7.29")
        value.sqrt_(4)
        assert str(value) == "2.7000"
        assert str(value.rescale()) == "2.7"

    def test_sqrt_matches_root(self):
        """sqrt is root with degree 2."""
        value = Decimal("0.000625")
        assert value.sqrt(8).to_fixed(8) == value.root(2, 8).to_fixed(8)

    @pytest.mark.parametrize(
        "value,degree,digits,expected",
        [
            (81, 4, 8, "3.00000000"),
            (9, 2, 8, "3.00000000"),
            (-27, 3, 8, "-3.00000000"),
            (256, 4, 6, "4.000000"),
            (64, 3, 8, "4.00000000"),
            (9, 2, -1, "3"),
            (2, 3, 12, "1.259921049895"),
        ],
    )
    def test_known_roots(self, value, degree, digits, expected):
        """Exact and irrational roots at fixed precision."""
        assert str(Decimal(value).root(degree, digits)) == expected

    def test_even_root_of_negative(self):
        """Even roots of negative values fail."""
        with pytest.raises(EvenRootOfNegativeUndefined):
            Decimal(-16).root(2, 8)

    def test_zero_keeps_scale(self):
        """The root of zero keeps its scale."""
        result = Decimal(0, 6).root(3, 6)
        assert result.scale == 6
        assert str(result) == "0.000000"

    @pytest.mark.parametrize("degree", [0, -2, 1.5, True])
    def test_invalid_degree(self, degree):
        """Degrees must be positive integers."""
        with pytest.raises(InvalidRootDegree):
            Decimal(9).root(degree, 4)

    def test_degree_one(self):
        """Degree 1 truncates to the requested digits, or keeps finer values."""
        assert str(Decimal("2.5").root(1, 3)) == "2.500"
        assert str(Decimal("2.56789").root(1, 3)) == "2.56789"

    def test_large_magnitude(self):
        """Magnitudes beyond float range use the order-based seed."""
        result = Decimal(1, -2000).root(2, 12)
        assert result.eq(Decimal(1, -1000))

    def test_tiny_magnitude(self):
        """Magnitudes below float range use the order-based seed."""
        result = Decimal(1, 2000).root(2, 1200)
        assert result.eq(Decimal(1, 1000))

    def test_root_below_precision(self):
        """Roots smaller than the requested precision give zero."""
        for degree in (10, 20):
            result = Decimal(1, 2000).root(degree, 0)
            assert str(result) == "0"
            assert result.scale == 0

    def test_order_seed_logged(self):
        """Falling back to the order-based seed emits a debug event."""
        with capture_logs() as logs:
            result = Decimal(1, -5000).root(2, 4)
        assert result.scale == 4
        assert result.eq(Decimal(1, -2500))
        assert any(entry["event"] == "root_guess_from_order" for entry in logs)

    def test_float_seed_not_logged(self):
        """Ordinary magnitudes do not log."""
        with capture_logs() as logs:
            Decimal(64).root(3, 8)
        assert logs == []

    def test_uneven_order_seed(self):
        """Orders not divisible by the degree still seed accurately."""
        value = Decimal(2, -1001)
        result = value.root(3, 4)
        assert result.order() == 333
        assert result.pow(3, 0).div(value, 20).is_close_to(1, "1e-15")

    @pytest.mark.parametrize(
        "text,degree,digits,expected",
        [
            ("3e-70", 7, 30, "0.000000000116993081275868688646"),
            ("2e-39", 3, 20, "0.00000000000012599210"),
        ],
    )
    def test_small_magnitude_high_degree(self, text, degree, digits, expected):
        """Roots of small values keep every requested digit."""
        assert str(Decimal(text).root(degree, digits)) == expected

    def test_small_magnitude_cube_recomposes(self):
        """The cube of a small cube root is within the requested precision."""
        value = Decimal("2e-39")
        result = value.root(3, 60)
        cube = result.mul(result).mul_(result)
        assert cube.is_close_to(value, Decimal(1, 84))

    def test_very_small_magnitude_converges(self):
        """A cube root below float range converges without warnings."""
        value = Decimal(1, 400)
        with capture_logs() as logs:
            result = value.root(3, 420)
        assert result.scale == 420
        assert not any(entry["event"] == "root_not_converged" for entry in logs)
        cube = result.mul(result).mul_(result)
        assert cube.is_close_to(value, Decimal(1, 680))

    def test_in_place_negative(self):
        """root_ of a negative odd-degree value."""
        value = Decimal("-0.125")
        value.root_(3, 3)
        assert str(value) == "-0.500"

    @pytest.mark.parametrize(
        "text,degree,digits",
        [("98765.4321", 5, 60), ("-42.424242", 3, 50), ("2", 2, 30), ("0.001", 7, 25)],
    )
    def test_power_of_root(self, text, degree, digits):
        """root then pow recovers the value to within 10**-(digits-4)."""
        value = Decimal(text)
        result = value.root(degree, digits)
        recomposed = result.pow(degree, digits + 30).rescale(digits)
        assert recomposed.is_close_to(value.rescale(digits), pow10(-(digits - 4)))


class TestSettings:
    """Tests for precision estimates and helpers."""

    def test_fractional_settings(self):
        """Guard grows with the digit count but never below 6."""
        assert estimate_pow_fractional_settings(10, 1) == (16, 22)
        guard_prec, root_prec = estimate_pow_fractional_settings(10, 10**6)
        assert guard_prec == 10 + 9
        assert root_prec == guard_prec + 9

    def test_root_settings(self):
        """Root padding is at least 12 digits."""
        assert estimate_root_iter_settings(8, 3) == (20, 10)
        assert estimate_root_iter_settings(0, 10**20) == (25, 2)

    def test_root_settings_small_magnitude(self):
        """Radicands below 1 widen the working precision by their order."""
        assert estimate_root_iter_settings(20, 3, -39) == (71, 22)
        assert estimate_root_iter_settings(20, 3, 5) == (32, 22)
        assert estimate_root_iter_settings(0, 10**20, -3) == (28, 2)

    def test_log10_estimate(self):
        """Works far outside float range."""
        assert log10_estimate(Decimal(1, -5000)) == pytest.approx(5000)
        assert log10_estimate(Decimal("-0.002")) == pytest.approx(math.log10(0.002))

    def test_root_function_direct(self):
        """root() on the module level returns a new value."""
        value = Decimal(27)
        result = root(value, 3, 2)
        assert str(result) == "3.00"
        assert str(value) == "27"
