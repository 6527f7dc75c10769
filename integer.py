from __future__ import annotations
import logging
import math
import operator
from decimal import Decimal
from typing import TYPE_CHECKING, Iterator, Optional, Union
import numpy as np

import config
from casting import CastResult

if TYPE_CHECKING:
	from fraction import Fraction, FractionLike
	from radical import Root

logger = logging.getLogger(__name__)

IntegerLike = Union["Integer", int]

# 2-3-5-7 wheel, starting from 7
_WHEEL = (4, 2, 4, 2, 4, 6, 2, 6)


def as_integer(value: IntegerLike) -> Integer:
	if isinstance(value, Integer):
		return value
	return Integer(value)


def _coerce(other: object) -> Optional[Integer]:
	if isinstance(other, Integer):
		return other
	if isinstance(other, int):
		return Integer(other)
	return None


def _power(base: int, exponent: int) -> int:
	limit = config.FAST_POW_EXPONENT_LIMIT
	if exponent <= limit:
		return pow(base, exponent)
	logger.warning("exponent %d is above the fast path limit, multiplying in chunks of %d", exponent, limit)
	chunk = pow(base, limit)
	result = 1
	while exponent > limit:
		result *= chunk
		exponent -= limit
	return result * pow(base, exponent)


def _integer_root(n: int, degree: int) -> int:
	"""Floor of the real `degree`-th root of a non-negative n (Newton's method)."""
	if degree == 2:
		return math.isqrt(n)
	x = 1 << -(-n.bit_length() // degree)
	while True:
		y = ((degree - 1) * x + n // x ** (degree - 1)) // degree
		if y >= x:
			return x
		x = y


class PrimeDivisors:
	"""Prime factors of a positive integer with multiplicity, smallest first.

	Factors are produced lazily; every new iteration restarts the trial division.
	"""
	__slots__ = ("_n",)
	def __init__(self, n: int) -> None:
		self._n = n
	def __iter__(self) -> Iterator[Integer]:
		n = self._n
		if n < 2:
			return
		for p in (2, 3, 5):
			while n % p == 0:
				yield Integer(p)
				n //= p
		k, i = 7, 0
		while k * k <= n:
			if n % k == 0:
				yield Integer(k)
				n //= k
			else:
				k += _WHEEL[i]
				i = (i + 1) % len(_WHEEL)
		if n > 1:
			yield Integer(n)


class Integer:
	__slots__ = ("_v",)
	def __init__(self, value: IntegerLike = 0) -> None:
		if isinstance(value, Integer):
			value = value._v
		self._v = operator.index(value)

	@property
	def value(self) -> int:
		return self._v
	def is_zero(self) -> bool:
		return self._v == 0
	def is_negative(self) -> bool:
		return self._v < 0
	def is_even(self) -> bool:
		return self._v % 2 == 0
	def sign(self) -> Integer:
		if self._v > 0:
			return Integer.ONE
		if self._v < 0:
			return Integer.MINUS_ONE
		return Integer.ZERO

	def __neg__(self) -> Integer:
		return Integer(-self._v)
	def __abs__(self) -> Integer:
		return Integer(abs(self._v))
	def abs(self) -> Integer:
		return Integer(abs(self._v))
	def __add__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer(self._v + o._v)
	__radd__ = __add__
	def __sub__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer(self._v - o._v)
	def __rsub__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer(o._v - self._v)
	def __mul__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer(self._v * o._v)
	__rmul__ = __mul__
	def __mod__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer._truncated_mod(self._v, o._v)
	def __rmod__(self, other: IntegerLike) -> Integer:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Integer._truncated_mod(o._v, self._v)
	@staticmethod
	def _truncated_mod(a: int, n: int) -> Integer:
		# remainder takes the sign of the dividend
		if n == 0:
			raise ZeroDivisionError("integer modulo by zero")
		r = abs(a) % abs(n)
		return Integer(-r if a < 0 else r)
	def __truediv__(self, other: IntegerLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		from fraction import Fraction
		return Fraction(self, o)
	def __rtruediv__(self, other: IntegerLike) -> Fraction:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		from fraction import Fraction
		return Fraction(o, self)
	def increment(self) -> Integer:
		return Integer(self._v + 1)
	def decrement(self) -> Integer:
		return Integer(self._v - 1)

	def raise_to_integer(self, exponent: IntegerLike) -> Fraction:
		from fraction import Fraction
		e = as_integer(exponent)
		if e.is_zero() or self._v == 1:
			return Fraction.ONE
		if self._v == -1:
			return Fraction.ONE if e.is_even() else Fraction.MINUS_ONE
		if self._v == 0:
			if e.is_negative():
				raise ZeroDivisionError("zero cannot be raised to a negative power")
			return Fraction.ZERO
		power = _power(abs(self._v), abs(e._v))
		if self._v < 0 and not e.is_even():
			power = -power
		if e.is_negative():
			return Fraction(1, power)
		return Fraction(power, 1)
	def raise_to_rational(self, exponent: FractionLike) -> Root:
		from fraction import as_fraction
		from radical import Root
		e = as_fraction(exponent)
		whole = e.try_cast_to_integer()
		if whole.ok:
			return Root(Integer.ONE, self.raise_to_integer(whole.value))
		return Root(e.denominator, self.raise_to_integer(e.numerator))

	def find_greatest_common_divisor(self, other: IntegerLike) -> Integer:
		a, b = abs(self._v), abs(as_integer(other)._v)
		while b:
			a, b = b, a % b
		return Integer(a)
	def find_least_common_multiple(self, other: IntegerLike) -> Integer:
		o = as_integer(other)
		if self.is_zero() or o.is_zero():
			raise ZeroDivisionError("least common multiple of zero is undefined")
		gcd = self.find_greatest_common_divisor(o)
		return Integer(abs(self._v * o._v) // gcd._v)
	def find_prime_divisors(self) -> PrimeDivisors:
		return PrimeDivisors(self._v)
	def find_exact_root(self, degree: IntegerLike) -> Optional[Integer]:
		"""Integer r with r ** degree == self, or None when there is none.

		Negative values only have roots of odd degree.
		"""
		d = as_integer(degree)._v
		if d <= 0:
			raise ValueError(f"root degree must be positive, got {d}")
		v = self._v
		if v < 0:
			if d % 2 == 0:
				return None
			r = Integer(-v).find_exact_root(d)
			return None if r is None else -r
		if v < 2 or d == 1:
			return Integer(v)
		# 2 <= v < 2**d leaves no candidate between 1 and 2
		if v.bit_length() <= d:
			return None
		r = _integer_root(v, d)
		return Integer(r) if r ** d == v else None

	def try_cast_to_fixed_width_integer(self) -> CastResult:
		if config.INT64_MIN <= self._v <= config.INT64_MAX:
			return CastResult.success(np.int64(self._v))
		return CastResult.failure()
	def try_cast_to_decimal(self) -> CastResult:
		if abs(self._v) <= config.DECIMAL_MAX:
			return CastResult.success(Decimal(self._v))
		return CastResult.failure()
	def try_cast_to_floating_point(self) -> CastResult:
		if abs(self._v) <= config.FLOAT_EXACT_INT_MAX:
			return CastResult.success(float(self._v))
		return CastResult.failure()

	def __int__(self) -> int:
		return self._v
	def __index__(self) -> int:
		return self._v
	def __bool__(self) -> bool:
		return self._v != 0
	def __eq__(self, other: object) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._v == o._v
	def __lt__(self, other: IntegerLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._v < o._v
	def __le__(self, other: IntegerLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._v <= o._v
	def __gt__(self, other: IntegerLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._v > o._v
	def __ge__(self, other: IntegerLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._v >= o._v
	def __hash__(self) -> int:
		return hash(self._v)
	def __repr__(self) -> str:
		return f"Integer({self._v})"
	def __str__(self) -> str:
		return str(self._v)


Integer.ZERO = Integer(0)
Integer.ONE = Integer(1)
Integer.MINUS_ONE = Integer(-1)
