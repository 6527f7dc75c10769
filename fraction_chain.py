from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set, Tuple

from fraction import Fraction, FractionLike, as_fraction
from integer import Integer

logger = logging.getLogger(__name__)


class FractionChain:
	"""An ordered product of fractions.

	`least_common_multiple` is the LCM of the denominators of every running
	partial product, i.e. the smallest unit in which each step of the chain
	can be written as a whole number.
	"""
	__slots__ = ("_factors", "_combined", "_lcm")
	def __init__(self, factors: Iterable[FractionLike]) -> None:
		self._factors: Tuple[Fraction, ...] = tuple(as_fraction(f) for f in factors)
		combined = Fraction.ONE
		lcm = Integer.ONE
		for f in self._factors:
			combined = combined * f
			lcm = lcm.find_least_common_multiple(combined.denominator)
		self._combined = combined
		self._lcm = lcm

	@property
	def factors(self) -> Tuple[Fraction, ...]:
		return self._factors
	@property
	def combined(self) -> Fraction:
		return self._combined
	@property
	def least_common_multiple(self) -> Integer:
		return self._lcm

	def __mul__(self, other: FractionLike) -> FractionChain:
		return FractionChain(self._factors + (as_fraction(other),))
	def __len__(self) -> int:
		return len(self._factors)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, FractionChain):
			return NotImplemented
		return self._factors == other._factors
	def __hash__(self) -> int:
		return hash(self._combined)
	def __repr__(self) -> str:
		return f"FractionChain({', '.join(map(str, self._factors))})"


def build_base_fractions(limit: int, max_value: FractionLike) -> Set[Fraction]:
	"""Every i/j with 1 <= i <= limit and 2 <= j <= i, not above max_value."""
	bound = as_fraction(max_value)
	base: Set[Fraction] = set()
	for i in range(1, limit + 1):
		for j in range(2, i + 1):
			f = Fraction(i, j)
			if f <= bound:
				base.add(f)
	return base


def enumerate_chains(base: Iterable[FractionLike], length: int) -> Set[FractionChain]:
	if length < 1:
		raise ValueError(f"chain length must be at least 1, got {length}")
	ordered = sorted(as_fraction(f) for f in base)
	chains = {FractionChain([f]) for f in ordered}
	for _ in range(length - 1):
		chains = {chain * f for chain in chains for f in ordered}
	logger.debug("%d chains of length %d over %d fractions", len(chains), length, len(ordered))
	return chains


def select_chains(chains: Iterable[FractionChain], max_product: FractionLike) -> List[FractionChain]:
	bound = as_fraction(max_product)
	kept = [c for c in chains if c.combined <= bound]
	kept.sort(key=lambda c: (c.combined, c.factors))
	return kept


def format_chain(chain: FractionChain, decimals: int = 3) -> Optional[str]:
	"""Tab separated row: lcm, decimal value, exact product, factors.

	Returns None when the product has no decimal approximation in range.
	"""
	approx = chain.combined.try_cast_to_decimal()
	if not approx.ok:
		return None
	cells = [
		str(chain.least_common_multiple),
		f"{approx.value:,.{decimals}f}",
		str(chain.combined),
	]
	cells.extend(str(f) for f in chain.factors)
	return "\t".join(cells)
