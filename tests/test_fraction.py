from decimal import Decimal
from itertools import product

import pytest

from casting import InvalidCastError
from fraction import Fraction, as_fraction
from integer import Integer
from radical import Root


class TestCanonicalForm:
    def test_reduces(self) -> None:
        f = Fraction(4, 8)
        assert f.numerator == 1
        assert f.denominator == 2

    def test_denominator_made_positive(self) -> None:
        f = Fraction(3, -6)
        assert f.numerator == -1
        assert f.denominator == 2
        assert Fraction(-3, -6) == Fraction(1, 2)

    def test_zero(self) -> None:
        f = Fraction(0, -17)
        assert f.numerator == 0
        assert f.denominator == 1

    def test_invariant_over_grid(self) -> None:
        for n, d in product(range(-12, 13), range(-12, 13)):
            if d == 0:
                continue
            f = Fraction(n, d)
            assert f.denominator > 0
            if f.numerator == 0:
                assert f.denominator == 1
            else:
                assert f.numerator.find_greatest_common_divisor(f.denominator) == 1
            assert f.numerator * d == f.denominator * n

    def test_recanonicalizing_is_a_no_op(self) -> None:
        f = Fraction(-18, 24)
        again = Fraction(f.numerator, f.denominator)
        assert (again.numerator, again.denominator) == (f.numerator, f.denominator)

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(1, 0)

    def test_accepts_integers(self) -> None:
        assert Fraction(Integer(6), Integer(9)) == Fraction(2, 3)
        assert as_fraction(5) == Fraction(5, 1)
        f = Fraction(1, 3)
        assert as_fraction(f) is f

    def test_from_decimal(self) -> None:
        assert Fraction.from_decimal(Decimal("1.25")) == Fraction(5, 4)
        assert Fraction.from_decimal(Decimal("-0.1")) == Fraction(-1, 10)
        assert Fraction.from_decimal(Decimal("3E+2")) == Fraction(300)
        with pytest.raises(ValueError):
            Fraction.from_decimal(Decimal("NaN"))


class TestArithmetic:
    def test_exact_sum(self) -> None:
        assert Fraction(1, 3) + Fraction(1, 6) == Fraction(1, 2)

    def test_operators(self) -> None:
        assert Fraction(1, 2) - Fraction(3, 4) == Fraction(-1, 4)
        assert Fraction(2, 3) * Fraction(9, 4) == Fraction(3, 2)
        assert Fraction(2, 3) / Fraction(-4, 9) == Fraction(-3, 2)
        assert -Fraction(2, 3) == Fraction(-2, 3)

    def test_mixed_with_lower_types(self) -> None:
        assert Fraction(1, 2) + 1 == Fraction(3, 2)
        assert 1 - Fraction(1, 4) == Fraction(3, 4)
        assert Integer(3) * Fraction(1, 6) == Fraction(1, 2)
        assert 2 / Fraction(4, 3) == Fraction(3, 2)
        assert Fraction(3, 4) / Integer(3) == Fraction(1, 4)

    def test_reciprocal_keeps_sign_on_numerator(self) -> None:
        r = Fraction(-2, 3).reciprocal()
        assert r.numerator == -3
        assert r.denominator == 2

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(1, 2) / Fraction(0)

    def test_increment_and_decrement(self) -> None:
        assert Fraction(1, 2).increment() == Fraction(3, 2)
        assert Fraction(1, 2).decrement() == Fraction(-1, 2)


class TestComparison:
    def test_ordering(self) -> None:
        assert Fraction(1, 3) < Fraction(1, 2)
        assert Fraction(-1, 2) < Fraction(-1, 3)
        assert Fraction(2, 4) <= Fraction(1, 2)
        assert Fraction(7, 3) > 2
        assert Fraction(6, 3) >= Integer(2)

    def test_no_float_drift(self) -> None:
        total = Fraction(0)
        for _ in range(10):
            total = total + Fraction(1, 10)
        assert total == 1

    def test_hash_matches_equal_values(self) -> None:
        assert hash(Fraction(4, 2)) == hash(Integer(2)) == hash(2)
        assert len({Fraction(1, 2), Fraction(2, 4), Fraction(-3, -6)}) == 1

    def test_sorting(self) -> None:
        values = [Fraction(3, 4), Fraction(-1, 2), Fraction(1, 3), Fraction(2)]
        assert sorted(values) == [Fraction(-1, 2), Fraction(1, 3), Fraction(3, 4), Fraction(2)]


class TestExponentiation:
    def test_integer_exponents(self) -> None:
        assert Fraction(2, 3).raise_to_integer(0) == 1
        assert Fraction(1).raise_to_integer(99) == 1
        assert Fraction(-1).raise_to_integer(3) == -1
        assert Fraction(-1).raise_to_integer(-4) == 1
        assert Fraction(2, 3).raise_to_integer(3) == Fraction(8, 27)
        assert Fraction(-2, 3).raise_to_integer(-3) == Fraction(-27, 8)

    def test_zero_to_negative_power(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Fraction(0).raise_to_integer(-2)

    def test_rational_exponent(self) -> None:
        result = Fraction(4, 9).raise_to_rational(Fraction(1, 2))
        assert isinstance(result, Root)
        assert result.to_fraction() == Fraction(2, 3)

    def test_integral_rational_exponent(self) -> None:
        result = Fraction(2, 3).raise_to_rational(Fraction(2))
        assert result.degree == 1
        assert result.radicand == Fraction(4, 9)

    def test_irrational_result(self) -> None:
        result = Fraction(1, 2).raise_to_rational(Fraction(1, 2))
        assert result == Root(2, Fraction(1, 2))
        assert not result.try_cast_to_fraction().ok


class TestCasts:
    def test_integral(self) -> None:
        assert Fraction(8, 4).try_cast_to_integer() == (True, Integer(2))
        assert Fraction(8, 4).to_integer() == 2

    def test_not_integral(self) -> None:
        assert not Fraction(1, 2).try_cast_to_integer().ok
        with pytest.raises(InvalidCastError, match="denominator is not 1"):
            Fraction(1, 2).to_integer()

    def test_invalid_cast_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            Fraction(1, 2).to_integer()

    @pytest.mark.parametrize(
        "n, d, whole, rem",
        [(7, 2, 3, Fraction(1, 2)), (-7, 2, -3, Fraction(-1, 2)), (6, 3, 2, Fraction(0)), (1, 3, 0, Fraction(1, 3)), (-1, 3, 0, Fraction(-1, 3))],
    )
    def test_divide_remainder(self, n: int, d: int, whole: int, rem: Fraction) -> None:
        f = Fraction(n, d)
        q, r = f.divide_remainder()
        assert q == whole
        assert r == rem
        assert q + r == f
        assert abs(r) < 1

    def test_truncate(self) -> None:
        assert Fraction(-7, 2).truncate() == -3
        assert Fraction(7, 2).truncate() == 3

    def test_decimal(self) -> None:
        result = Fraction(-7, 4).try_cast_to_decimal()
        assert result.ok
        assert result.value == Decimal("-1.75")

    def test_decimal_out_of_range(self) -> None:
        assert not Fraction(2 ** 100, 3).try_cast_to_decimal().ok
        assert not Fraction(1, 2 ** 100).try_cast_to_decimal().ok

    def test_floating_point(self) -> None:
        result = Fraction(1, 3).try_cast_to_floating_point()
        assert result.ok
        assert result.value == pytest.approx(1 / 3)
        assert not Fraction(1, 2 ** 60).try_cast_to_floating_point().ok


class TestRendering:
    def test_str(self) -> None:
        assert str(Fraction(6, 3)) == "2"
        assert str(Fraction(-6, 4)) == "-3/2"
        assert repr(Fraction(1, 2)) == "Fraction(1, 2)"
