"""Combining expressions and common one-statement mutators."""

from __future__ import annotations

from functools import reduce
from typing import Any

from dstar.attrs import AttrBuilder, AttrFunc, AttrMutator
from dstar.builtins import WINDOW, console_log_expr
from dstar.nodes import Assign, Binary, Expr, Literal, Member, emit
from dstar.values import Value, json_expr, signal_ref, to_expr


def and_(*exprs: Value | Expr) -> Value:
	"""Join expressions with &&, left to right: and_(a, b, c) -> a && b && c

	With no inputs the result is `true`; a single input is returned as is.
	"""
	if not exprs:
		return Value(Literal(True))
	if len(exprs) == 1:
		only = exprs[0]
		return only if isinstance(only, Value) else Value(only)
	nodes = [to_expr(e) for e in exprs]
	return Value(reduce(lambda left, right: Binary(left, "&&", right), nodes))


def and_mutator(*exprs: Value | Expr) -> AttrMutator:
	"""Attribute mutator appending `a && b && ...` as one statement."""
	combined = and_(*exprs)
	return AttrFunc(combined.modify)


def console_log(*values: Any) -> AttrMutator:
	"""Append `console.log(a, b, ...)`."""
	call = console_log_expr(*values)

	def modify(attr: AttrBuilder) -> None:
		attr.append_statement(emit(call))

	return AttrFunc(modify)


def navigate(path: str, *values: Any) -> str:
	"""`window.location.href = "<path>"`.

	With values, `path` is %-formatted first: navigate("/users/%d", 42).
	"""
	href = path % values if values else path
	target = Member(Member(WINDOW, "location"), "href")
	return emit(Assign(target, Literal(href)))


def set_signal(name: str, value: Any) -> AttrMutator:
	"""Append `$name = value`.

	Values and expressions are rendered as-is; anything else is JSON-encoded.
	"""
	if isinstance(value, (Value, Expr)):
		rhs = to_expr(value)
	else:
		rhs = json_expr(value)
	statement = emit(Assign(signal_ref(name).expr, rhs))

	def modify(attr: AttrBuilder) -> None:
		attr.append_statement(statement)

	return AttrFunc(modify)
