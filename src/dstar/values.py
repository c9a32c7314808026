"""Expression wrappers usable both as JS expressions and as attribute mutators."""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dstar.env import env
from dstar.errors import EncodingError
from dstar.nodes import Expr, Node, Raw, emit, html_safe

if TYPE_CHECKING:
	from dstar.attrs import AttrBuilder

logger = logging.getLogger(__name__)

_SIGNAL_PATH = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


@dataclass(frozen=True, slots=True)
class Value:
	"""Wraps an Expr so it can be composed or appended to an attribute.

	As an attribute mutator, the expression is rendered and appended as one
	statement; earlier statements are never replaced.
	"""

	expr: Expr

	def modify(self, attr: AttrBuilder) -> None:
		attr.append_statement(emit(self.expr))

	def to_js(self) -> str:
		return emit(self.expr)

	def __str__(self) -> str:
		return emit(self.expr)


@dataclass(frozen=True, slots=True)
class ExprMutator:
	"""Attribute mutator for any node, expression or statement."""

	node: Node

	def modify(self, attr: AttrBuilder) -> None:
		attr.append_statement(emit(self.node))



def wrap(expr: Expr) -> Value:
	"""Wrap an Expr as a Value."""
	return Value(expr)


def mutator(node: Node) -> ExprMutator:
	"""Use a node directly as an attribute mutator.

	Example: on_click(prevent_default(), mutator(Assign(Identifier("$count"), Literal(0))))
	"""
	return ExprMutator(node)


def raw(code: str) -> Value:
	"""Inject raw JavaScript. The text is emitted as-is, without validation.

	Never pass user input here.
	"""
	return Value(Raw(code))


def to_expr(value: Any) -> Expr:
	"""Normalize a Value, Expr or plain Python value into an Expr."""
	if isinstance(value, Value):
		return value.expr
	return Expr.of(value)


def encode_json(value: Any) -> str:
	"""Encode a Python value as compact JSON text.

	Dataclass instances are encoded as objects. Raises EncodingError for
	anything json can't represent (including NaN and infinities).
	"""
	try:
		text = json.dumps(
			value,
			separators=(",", ":"),
			ensure_ascii=False,
			allow_nan=False,
			default=_json_default,
		)
	except (TypeError, ValueError, RecursionError) as exc:
		logger.error("Cannot encode %r as JSON: %s", value, exc)
		raise EncodingError(f"{exc}: value={value!r}") from exc
	return html_safe(text)


def _json_default(value: Any) -> Any:
	if dataclasses.is_dataclass(value) and not isinstance(value, type):
		return dataclasses.asdict(value)
	if isinstance(value, (set, frozenset)):
		return list(value)  # pyright: ignore[reportUnknownArgumentType]
	raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_expr(value: Any) -> Raw:
	"""JSON-encode a Python value into an expression node."""
	return Raw(encode_json(value))


def json_value(value: Any) -> Value:
	"""JSON-encode a Python value into a Value.

	Raises EncodingError if the value cannot be encoded.
	"""
	return Value(json_expr(value))


def signal_ref(name: str) -> Value:
	"""Reference a Datastar signal: signal_ref("count") -> $count

	A leading "$" is accepted, so signal_ref("$count") gives the same result.
	"""
	if name.startswith("$"):
		name = name[1:]
	if env.mode == "dev" and not _SIGNAL_PATH.match(name):
		warnings.warn(
			f"Signal name {name!r} is not a valid JavaScript identifier path",
			UserWarning,
			stacklevel=2,
		)
	return Value(Raw("$" + name))
