from __future__ import annotations
import logging
import math
from decimal import Decimal
from typing import Optional, Tuple, Union
import numpy as np

from casting import CastResult, InvalidCastError
from fraction import Fraction, FractionLike, as_fraction
from integer import Integer, IntegerLike, as_integer

logger = logging.getLogger(__name__)

RootLike = Union["Root", Fraction, Integer, int]


def as_root(value: RootLike) -> Root:
	if isinstance(value, Root):
		return value
	return Root(Integer.ONE, as_fraction(value))


def _coerce(other: object) -> Optional[Root]:
	if isinstance(other, Root):
		return other
	if isinstance(other, (Fraction, Integer, int)):
		return as_root(other)
	return None


def _simplify(degree: Integer, radicand: Fraction) -> Tuple[Integer, Fraction]:
	# One attempt per prime factor of the incoming degree. A reduction can
	# expose another perfect power that this pass does not revisit.
	simplified = degree
	num, den = radicand.numerator, radicand.denominator
	for prime in degree.find_prime_divisors():
		num_root = num.find_exact_root(prime)
		if num_root is None:
			continue
		den_root = den.find_exact_root(prime)
		if den_root is None:
			continue
		simplified = Integer(simplified.value // prime.value)
		num, den = num_root, den_root
	if simplified == degree:
		return degree, radicand
	logger.debug("reduced (%s)^(1/%s) to degree %s", radicand, degree, simplified)
	return simplified, Fraction(num, den)


class Root:
	"""The real value radicand^(1/degree), degree always positive.

	Construction reduces the degree where the radicand's numerator and
	denominator are both perfect powers of a prime factor of the degree.
	Two roots compare equal when they denote the same value, even if their
	stored degree and radicand differ.
	Ordering goes by the sign of the radicand first, so an even root of a
	negative radicand sorts below every non-negative root.
	"""
	__slots__ = ("_degree", "_radicand")
	def __init__(self, degree: IntegerLike, radicand: FractionLike) -> None:
		d = as_integer(degree)
		r = as_fraction(radicand)
		if d.is_zero():
			raise ZeroDivisionError("Zeroth root does not exist.")
		if d.is_negative():
			d = -d
			r = r.reciprocal()
		self._degree, self._radicand = _simplify(d, r)

	@property
	def degree(self) -> Integer:
		return self._degree
	@property
	def radicand(self) -> Fraction:
		return self._radicand

	def raise_to_integer(self, exponent: IntegerLike) -> Root:
		return Root(self._degree, self._radicand.raise_to_integer(exponent))
	def raise_to_rational(self, exponent: FractionLike) -> Root:
		e = as_fraction(exponent)
		return Root(self._degree * e.denominator, self._radicand.raise_to_integer(e.numerator))
	def __mul__(self, other: RootLike) -> Root:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return Root(
			self._degree * o._degree,
			self._radicand.raise_to_integer(o._degree) * o._radicand.raise_to_integer(self._degree),
		)
	__rmul__ = __mul__
	def __truediv__(self, other: RootLike) -> Root:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self * Root(-o._degree, o._radicand)
	def __rtruediv__(self, other: RootLike) -> Root:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return o / self

	def try_cast_to_fraction(self) -> CastResult:
		if self._degree == Integer.ONE:
			return CastResult.success(self._radicand)
		if self._radicand == Fraction.ZERO:
			return CastResult.success(Fraction.ZERO)
		if self._radicand == Fraction.ONE:
			return CastResult.success(Fraction.ONE)
		if self._radicand == Fraction.MINUS_ONE and not self._degree.is_even():
			return CastResult.success(Fraction.MINUS_ONE)
		return CastResult.failure()
	def to_fraction(self) -> Fraction:
		fraction = self.try_cast_to_fraction()
		if not fraction.ok:
			raise InvalidCastError(
				"Root", "Fraction",
				"the degree is not 1 and the radicand is neither 0 nor 1 (nor -1 under an odd degree)",
			)
		return fraction.value
	def try_cast_to_integer(self) -> CastResult:
		fraction = self.try_cast_to_fraction()
		if not fraction.ok:
			return CastResult.failure()
		return fraction.value.try_cast_to_integer()
	def to_integer(self) -> Integer:
		return self.to_fraction().to_integer()

	def to_floating_point_approximation(self) -> float:
		"""Approximate value; even degrees give the positive root."""
		degree = self._degree.try_cast_to_floating_point()
		radicand = self._radicand.try_cast_to_floating_point()
		if not (degree.ok and radicand.ok):
			raise OverflowError("numbers are too big")
		base = np.float64(radicand.value)
		exponent = 1.0 / degree.value
		if base < 0:
			if self._degree.is_even():
				raise ValueError(f"{self} is not a real number")
			return float(-np.power(-base, exponent))
		return float(np.power(base, exponent))
	def truncate_to_integer(self) -> Integer:
		return Integer(math.trunc(self.to_floating_point_approximation()))
	def to_decimal_approximation(self) -> Decimal:
		return Decimal(repr(self.to_floating_point_approximation()))

	def _compare(self, other: Root) -> int:
		sign, other_sign = self._radicand.sign(), other._radicand.sign()
		if sign != other_sign:
			return (sign > other_sign) - (sign < other_sign)
		# magnitudes raised to degree * other.degree; a negative sign flips the order
		lhs = abs(self._radicand).raise_to_integer(other._degree)
		rhs = abs(other._radicand).raise_to_integer(self._degree)
		result = (lhs > rhs) - (lhs < rhs)
		return -result if sign.is_negative() else result
	def __eq__(self, other: object) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) == 0
	def __lt__(self, other: RootLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) < 0
	def __le__(self, other: RootLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) <= 0
	def __gt__(self, other: RootLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) > 0
	def __ge__(self, other: RootLike) -> bool:
		o = _coerce(other)
		if o is None:
			return NotImplemented
		return self._compare(o) >= 0
	def __hash__(self) -> int:
		fraction = self.try_cast_to_fraction()
		if fraction.ok:
			return hash(fraction.value)
		return hash((self._degree.value, self._radicand))
	def __repr__(self) -> str:
		return f"Root({self._degree}, {self._radicand!r})"
	def __str__(self) -> str:
		fraction = self.try_cast_to_fraction()
		if fraction.ok:
			return str(fraction.value)
		return f"({self._radicand})^({Integer.ONE / self._degree})"


Root.ZERO = Root(Integer.ONE, Fraction.ZERO)
Root.ONE = Root(Integer.ONE, Fraction.ONE)
