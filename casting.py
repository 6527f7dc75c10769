from __future__ import annotations
from typing import Any, NamedTuple, Optional


class CastResult(NamedTuple):
	"""Outcome of a narrowing cast. `value` is None whenever `ok` is False."""
	ok: bool
	value: Optional[Any] = None

	@staticmethod
	def success(value: Any) -> CastResult:
		return CastResult(True, value)

	@staticmethod
	def failure() -> CastResult:
		return CastResult(False, None)


class InvalidCastError(TypeError):
	def __init__(self, source: str, target: str, reason: str) -> None:
		super().__init__(f"Cannot cast {source} to {target} as {reason}.")
		self.source = source
		self.target = target
		self.reason = reason
