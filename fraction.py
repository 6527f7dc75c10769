from __future__ import annotations
from decimal import Decimal, localcontext
from typing import TYPE_CHECKING, Optional, Tuple, Union

import config
from casting import CastResult, InvalidCastError
from integer import Integer, IntegerLike, as_integer

if TYPE_CHECKING:
	from radical import Root

FractionLike = Union["Fraction", Integer, int]


def as_fraction(value: FractionLike) -> Fraction:
	if isinstance(value, Fraction):
		return value
	return Fraction(as_integer(value), Integer.ONE)


def _coerce(other: object) -> Optional[Fraction]:
	if isinstance(other, Fraction):
		return other
	if isinstance(other, (Integer, int)):
		return Fraction(other)
	return None


class Fraction:
	"""Exact rational number kept in lowest terms with a positive denominator."""
	__slots__ = ("_num", "_den")
	def __init__(self, numerator: IntegerLike, denominator: IntegerLike = 1) -> None:
		num, den = as_integer(numerator), as_integer(denominator)
		if den.is_zero():
			raise ZeroDivisionError(f"Fraction({num}, 0)")
		if den.is_negative():
			num, den = -num, -den
		gcd = num.find_greatest_common_divisor(den)
		if gcd > 1:
			num = Integer(num.value // gcd.value)
			den = Integer(den.value // gcd.value)
		self._num = num
		self._den = den

	@classmethod
	def _from_canonical(cls, numerator: Integer, denominator: Integer) -> Fraction:
		# parts are already coprime; only the sign may need moving
		if denominator.is_zero():
			raise ZeroDivisionError("division by zero")
		if denominator.is_negative():
			numerator, denominator = -numerator, -denominator
		f = object.__new__(cls)
		f._num = numerator
		f._den = denominator
		return f

	@staticmethod
	def from_decimal(value: Decimal) -> Fraction:
		if not value.is_finite():
			raise ValueError(f"Cannot convert {value} to Fraction")
		sign, digits, exponent = value.as_tuple()
		mantissa = int("".join(map(str, digits)) or "0")
		if sign:
			mantissa = -mantissa
		if exponent >= 0:
			return Fraction(mantissa * 10 ** exponent)
		return Fraction(mantissa, 10 ** -exponent)

	@property
	def numerator(self) -> Integer:
		return self._num
	@property
	def denominator(self) -> Integer:
		return self._den
	def is_zero(self) -> bool:
		return self._num.is_zero()
	def is_negative(self) -> bool:
		return self._num.is_negative()
	def is_integral(self) -> bool:
		return self._den == Integer.ONE
	def sign(self) -> Integer:
		return self._num.sign()

	def __neg__(self) -> Fraction:
		return Fraction._from_canonical(-self._num, self._den)
	def __abs__(self) -> Fraction:
		return Fraction._from_canonical(self._num.abs(), self._den)
	def __add__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Fraction(self._num * o._den + o._num * self._den, self._den * o._den)
	__radd__ = __add__
	def __sub__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self + -o
	def __rsub__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return o + -self
	def __mul__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Fraction(self._num * o._num, self._den * o._den)
	__rmul__ = __mul__
	def __truediv__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self * o.reciprocal()
	def __rtruediv__(self, other: FractionLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return o * self.reciprocal()
	def reciprocal(self) -> Fraction:
		return Fraction._from_canonical(self._den, self._num)
	def increment(self) -> Fraction:
		return self + Fraction.ONE
	def decrement(self) -> Fraction:
		return self - Fraction.ONE

	def raise_to_integer(self, exponent: IntegerLike) -> Fraction:
		e = as_integer(exponent)
		if e.is_zero() or self == Fraction.ONE:
			return Fraction.ONE
		if self == Fraction.MINUS_ONE:
			return Fraction.ONE if e.is_even() else Fraction.MINUS_ONE
		magnitude = e.abs()
		num = self._num.raise_to_integer(magnitude).to_integer()
		den = self._den.raise_to_integer(magnitude).to_integer()
		if e.is_negative():
			return Fraction(den, num)
		return Fraction(num, den)
	def raise_to_rational(self, exponent: FractionLike) -> Root:
		from radical import Root
		e = as_fraction(exponent)
		whole = e.try_cast_to_integer()
		if whole.ok:
			return Root(Integer.ONE, self.raise_to_integer(whole.value))
		return Root(e.denominator, self.raise_to_integer(e.numerator))

	def try_cast_to_integer(self) -> CastResult:
		if self.is_integral():
			return CastResult.success(self._num)
		return CastResult.failure()
	def to_integer(self) -> Integer:
		whole = self.try_cast_to_integer()
		if not whole.ok:
			raise InvalidCastError("Fraction", "Integer", "the denominator is not 1")
		return whole.value
	def truncate(self) -> Integer:
		q = abs(self._num.value) // self._den.value
		return Integer(-q if self.is_negative() else q)
	def divide_remainder(self) -> Tuple[Integer, Fraction]:
		"""Split into a whole part and a remainder of magnitude below 1.

		Both parts carry the sign of the fraction, so -7/2 gives (-3, -1/2).
		"""
		if self.is_integral():
			return self._num, Fraction.ZERO
		if self.is_negative():
			whole, remainder = (-self).divide_remainder()
			return -whole, -remainder
		return self.truncate(), Fraction(self._num % self._den, self._den)

	def try_cast_to_decimal(self) -> CastResult:
		whole, remainder = self.divide_remainder()
		parts = (
			whole.try_cast_to_decimal(),
			remainder.numerator.try_cast_to_decimal(),
			remainder.denominator.try_cast_to_decimal(),
		)
		if not all(part.ok for part in parts):
			return CastResult.failure()
		q, n, d = (part.value for part in parts)
		with localcontext() as ctx:
			ctx.prec = config.DECIMAL_PRECISION
			return CastResult.success(q + n / d)
	def try_cast_to_floating_point(self) -> CastResult:
		whole, remainder = self.divide_remainder()
		parts = (
			whole.try_cast_to_floating_point(),
			remainder.numerator.try_cast_to_floating_point(),
			remainder.denominator.try_cast_to_floating_point(),
		)
		if not all(part.ok for part in parts):
			return CastResult.failure()
		q, n, d = (part.value for part in parts)
		return CastResult.success(q + n / d)

	def _compare(self, other: Fraction) -> int:
		lhs = self._num * other._den
		rhs = other._num * self._den
		return (lhs > rhs) - (lhs < rhs)
	def __bool__(self) -> bool:
		return not self.is_zero()
	def __eq__(self, other: object) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) == 0
	def __lt__(self, other: FractionLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) < 0
	def __le__(self, other: FractionLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) <= 0
	def __gt__(self, other: FractionLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) > 0
	def __ge__(self, other: FractionLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) >= 0
	def __hash__(self) -> int:
		# integral values hash like the equal Integer and int
		if self.is_integral():
			return hash(self._num)
		return hash((self._num.value, self._den.value))
	def __repr__(self) -> str:
		return f"Fraction({self._num}, {self._den})"
	def __str__(self) -> str:
		if self.is_integral():
			return str(self._num)
		return f"{self._num}/{self._den}"


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
Fraction.MINUS_ONE = Fraction(-1)
