"""Promise continuations appended after an action call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from dstar.nodes import Expr, Object, Raw, emit
from dstar.values import Value


@dataclass(frozen=True, slots=True)
class Then:
	"""`.then(() => body)`"""

	body: Expr

	def emit(self, out: list[str]) -> None:
		out.append(".then(() => ")
		_emit_body(self.body, out)
		out.append(")")


@dataclass(frozen=True, slots=True)
class Catch:
	"""`.catch((error) => body)`. The parameter is always named `error`."""

	body: Expr

	def emit(self, out: list[str]) -> None:
		out.append(".catch((error) => ")
		_emit_body(self.body, out)
		out.append(")")


PromiseChain: TypeAlias = Then | Catch


def _emit_body(body: Expr, out: list[str]) -> None:
	# An object body would parse as a block
	if isinstance(body, Object):
		out.append("(")
		body.emit(out)
		out.append(")")
	else:
		body.emit(out)


def then_chain(expr: Expr | Value) -> Then:
	return Then(expr.expr if isinstance(expr, Value) else expr)


def catch_chain(expr: Expr | Value) -> Catch:
	return Catch(expr.expr if isinstance(expr, Value) else expr)


def on_success(value: Value) -> Then:
	"""Run `value` when the request succeeds."""
	return then_chain(value)


def on_failure(value: Value) -> Catch:
	"""Run `value` when the request fails. `error` is in scope."""
	return catch_chain(value)


def with_chains(action: Expr, *chains: PromiseChain) -> Expr:
	"""Append promise chains to an action call.

	This is plain text concatenation: `action` must already be a complete
	call expression. With no chains the action is returned unchanged.
	"""
	if not chains:
		return action
	out = [emit(action)]
	for chain in chains:
		chain.emit(out)
	return Raw("".join(out))
