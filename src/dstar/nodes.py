from __future__ import annotations

import datetime as dt
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeAlias, override
from typing import Literal as Lit

from dstar.env import env

Primitive: TypeAlias = bool | int | float | str | None


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for all AST nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript code into the output buffer."""


class Expr(Node, ABC):
	"""Base class for expression nodes."""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> int:
		"""Operator precedence (higher = binds tighter). Default: primary (20)."""
		return 20

	@staticmethod
	def of(value: Any) -> Expr:
		"""Convert a Python value to an Expr.

		Resolution order:
		1. Already an Expr: returned as-is
		2. Primitives: str/int/float/bool -> Literal, None -> Literal(None)
		3. datetime -> new Date(<epoch ms>)
		4. Collections: list/tuple -> Array, dict -> Object (recursively converted)

		Raises TypeError for unconvertible values.
		"""
		if isinstance(value, Expr):
			return value

		# bool is a subclass of int, Literal handles both
		if isinstance(value, (bool, int, float, str)) or value is None:
			return Literal(value)
		if isinstance(value, dt.datetime):
			return New(Identifier("Date"), [Literal(int(value.timestamp() * 1000))])

		if isinstance(value, (list, tuple)):
			return Array([Expr.of(v) for v in value])  # pyright: ignore[reportUnknownVariableType]
		if isinstance(value, dict):
			props = [(str(k), Expr.of(v)) for k, v in value.items()]  # pyright: ignore[reportUnknownArgumentType, reportUnknownVariableType]
			return Object(props)

		raise TypeError(f"Cannot convert {type(value).__name__} to Expr")


class Stmt(Node, ABC):
	"""Base class for statement nodes.

	Statements emit without a trailing semicolon: attribute values join their
	statements with "; ".
	"""

	__slots__: tuple[str, ...] = ()


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(slots=True)
class Identifier(Expr):
	"""JS identifier: x, foo, myFunc"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(Expr):
	"""JS literal: 42, "hello", true, null"""

	value: Primitive

	@override
	def precedence(self) -> int:
		# -1.toString() is a syntax error
		if isinstance(self.value, (int, float)) and not isinstance(self.value, bool):
			if self.value < 0 or (self.value == 0 and math.copysign(1, self.value) < 0):
				return _PRECEDENCE["unary"]
		return 20

	@override
	def emit(self, out: list[str]) -> None:
		if self.value is None:
			out.append("null")
		elif isinstance(self.value, bool):
			out.append("true" if self.value else "false")
		elif isinstance(self.value, str):
			out.append('"')
			out.append(escape_string(self.value))
			out.append('"')
		else:
			out.append(format_number(self.value))


class Undefined(Expr):
	"""JS undefined literal.

	Use Undefined() for JS `undefined`. Literal(None) emits `null`.
	"""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str]) -> None:
		out.append("undefined")


UNDEFINED = Undefined()


@dataclass(slots=True)
class Raw(Expr):
	"""Pre-escaped JavaScript source, emitted verbatim.

	No validation is performed. The text is treated as a primary expression,
	so it is never parenthesized: wrap it in Group() if it needs to be.
	"""

	code: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.code)


@dataclass(slots=True)
class Regex(Expr):
	"""JS regular expression literal: /pattern/flags"""

	pattern: str
	flags: str = ""

	@override
	def emit(self, out: list[str]) -> None:
		out.append("/")
		out.append(_escape_regex(self.pattern))
		out.append("/")
		out.append(self.flags)


@dataclass(slots=True)
class Array(Expr):
	"""JS array: [a, b, c]"""

	elements: Sequence[Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		_emit_list(self.elements, out)
		out.append("]")


@dataclass(slots=True)
class Object(Expr):
	"""JS object: {"key": value}"""

	props: Sequence[tuple[str, Expr]]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		for i, (k, v) in enumerate(self.props):
			if i > 0:
				out.append(", ")
			out.append('"')
			out.append(escape_string(k))
			out.append('": ')
			v.emit(out)
		out.append("}")


@dataclass(slots=True)
class Member(Expr):
	"""JS member access: obj.prop"""

	obj: Expr
	prop: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append(".")
		out.append(self.prop)


@dataclass(slots=True)
class OptionalMember(Expr):
	"""JS optional chaining: obj?.prop"""

	obj: Expr
	prop: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("?.")
		out.append(self.prop)


@dataclass(slots=True)
class Subscript(Expr):
	"""JS subscript access: obj[key]"""

	obj: Expr
	key: Expr

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("[")
		self.key.emit(out)
		out.append("]")


@dataclass(slots=True)
class Call(Expr):
	"""JS function call: fn(args)"""

	callee: Expr
	args: Sequence[Expr] = ()

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.callee, out)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class OptionalCall(Expr):
	"""JS optional method call: obj?.method(args)"""

	obj: Expr
	method: str
	args: Sequence[Expr] = ()

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("?.")
		out.append(self.method)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class New(Expr):
	"""JS new expression: new Ctor(args)"""

	ctor: Expr
	args: Sequence[Expr] = ()

	@override
	def emit(self, out: list[str]) -> None:
		out.append("new ")
		_emit_primary(self.ctor, out)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


@dataclass(slots=True)
class Unary(Expr):
	"""JS unary expression: -x, !x, typeof x"""

	op: str
	operand: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["unary"]

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.op)
		if self.op in {"typeof", "await", "void", "delete"}:
			out.append(" ")
		inner = emit(self.operand)
		# "- -x" must not collapse into "--x"
		signed = self.op in {"-", "+"} and inner.startswith(self.op)
		if self.operand.precedence() < _PRECEDENCE["unary"] or signed:
			out.append("(")
			out.append(inner)
			out.append(")")
		else:
			out.append(inner)


@dataclass(slots=True)
class Update(Expr):
	"""JS increment/decrement: x++, --x"""

	op: Lit["++", "--"]
	target: Expr
	prefix: bool = False

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["unary"] if self.prefix else _PRECEDENCE["postfix"]

	@override
	def emit(self, out: list[str]) -> None:
		if self.prefix:
			out.append(self.op)
			_emit_primary(self.target, out)
		else:
			_emit_primary(self.target, out)
			out.append(self.op)


@dataclass(slots=True)
class Binary(Expr):
	"""JS binary expression: x + y, a && b"""

	left: Expr
	op: str
	right: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE.get(self.op, 0)

	@override
	def emit(self, out: list[str]) -> None:
		# Unary operands and negative literals on the left of ** need parens
		force_left = self.op == "**" and self.left.precedence() == _PRECEDENCE["unary"]
		if force_left:
			out.append("(")
			self.left.emit(out)
			out.append(")")
		else:
			_emit_paren(self.left, self.op, "left", out)
		out.append(" ")
		out.append(self.op)
		out.append(" ")
		_emit_paren(self.right, self.op, "right", out)


@dataclass(slots=True)
class Ternary(Expr):
	"""JS ternary expression: cond ? a : b"""

	cond: Expr
	then: Expr
	else_: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["?:"]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_paren(self.cond, "?:", "left", out)
		out.append(" ? ")
		self.then.emit(out)
		out.append(" : ")
		self.else_.emit(out)


@dataclass(slots=True)
class Arrow(Expr):
	"""JS arrow function: (x) => expr"""

	params: Sequence[str]
	body: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["=>"]

	@override
	def emit(self, out: list[str]) -> None:
		if len(self.params) == 1:
			out.append(self.params[0])
		else:
			out.append("(")
			out.append(", ".join(self.params))
			out.append(")")
		out.append(" => ")
		# An object body would parse as a block
		if isinstance(self.body, Object):
			out.append("(")
			self.body.emit(out)
			out.append(")")
		else:
			self.body.emit(out)


@dataclass(slots=True)
class Template(Expr):
	"""JS template literal: `hello ${name}`

	Parts alternate: [str, Expr, str, Expr, str, ...]
	Always starts and ends with a string (may be empty).
	"""

	parts: Sequence[str | Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("`")
		for p in self.parts:
			if isinstance(p, str):
				out.append(_escape_template(p))
			else:
				out.append("${")
				p.emit(out)
				out.append("}")
		out.append("`")


@dataclass(slots=True)
class Spread(Expr):
	"""JS spread: ...expr"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("...")
		self.expr.emit(out)


@dataclass(slots=True)
class Group(Expr):
	"""Explicit parentheses: (expr)"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("(")
		self.expr.emit(out)
		out.append(")")


@dataclass(slots=True)
class Comma(Expr):
	"""JS comma expression, always parenthesized: (a, b, c)"""

	exprs: Sequence[Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("(")
		_emit_list(self.exprs, out)
		out.append(")")


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass(slots=True)
class ExprStmt(Stmt):
	"""JS expression statement."""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		self.expr.emit(out)


@dataclass(slots=True)
class Assign(Stmt):
	"""JS assignment: x = expr, or x += expr when op is set."""

	target: Expr
	value: Expr
	op: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		self.target.emit(out)
		if self.op:
			out.append(" ")
			out.append(self.op)
			out.append("= ")
		else:
			out.append(" = ")
		self.value.emit(out)


@dataclass(slots=True)
class VarDecl(Stmt):
	"""JS declaration: let x = expr, const x = expr, var x"""

	kind: Lit["let", "const", "var"]
	name: str
	value: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.kind)
		out.append(" ")
		out.append(self.name)
		if self.value is not None:
			out.append(" = ")
			self.value.emit(out)


@dataclass(slots=True)
class Return(Stmt):
	"""JS return statement: return expr"""

	value: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("return")
		if self.value is not None:
			out.append(" ")
			self.value.emit(out)


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


# Operator precedence table (higher = binds tighter)
_PRECEDENCE: dict[str, int] = {
	"postfix": 18,
	"unary": 17,
	# Exponentiation (right-assoc)
	"**": 16,
	# Multiplicative
	"*": 15,
	"/": 15,
	"%": 15,
	# Additive
	"+": 14,
	"-": 14,
	# Shift
	"<<": 13,
	">>": 13,
	">>>": 13,
	# Relational
	"<": 12,
	"<=": 12,
	">": 12,
	">=": 12,
	"instanceof": 12,
	"in": 12,
	# Equality
	"==": 11,
	"!=": 11,
	"===": 11,
	"!==": 11,
	# Bitwise
	"&": 10,
	"^": 9,
	"|": 8,
	# Logical
	"&&": 7,
	"||": 6,
	"??": 6,
	# Ternary
	"?:": 4,
	# Arrow functions and assignment
	"=>": 2,
	# Comma
	",": 1,
}

_RIGHT_ASSOC = {"**"}
_LOGICAL = {"&&", "||"}

_HTML_ESCAPES = (("<", "\\u003c"), (">", "\\u003e"), ("&", "\\u0026"))


def format_number(value: int | float) -> str:
	"""Shortest round-trippable decimal text, never in exponent form.

	2.0 -> "2", 1.5 -> "1.5", 1e-7 -> "0.0000001"
	"""
	if isinstance(value, int):
		return str(value)
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "Infinity" if value > 0 else "-Infinity"
	text = format(Decimal(repr(value)), "f")
	if "." in text:
		text = text.rstrip("0").rstrip(".")
	return text


def html_safe(s: str) -> str:
	"""Escape <, > and & as unicode escapes when DSTAR_HTML_SAFE is on."""
	if not env.html_safe:
		return s
	for char, escaped in _HTML_ESCAPES:
		s = s.replace(char, escaped)
	return s


def escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals."""
	escaped = (
		s.replace("\\", "\\\\")
		.replace('"', '\\"')
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\b", "\\b")
		.replace("\f", "\\f")
		.replace("\v", "\\v")
		.replace("\x00", "\\x00")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)
	return html_safe(escaped)


def _escape_template(s: str) -> str:
	"""Escape for template literal strings."""
	return (
		s.replace("\\", "\\\\")
		.replace("`", "\\`")
		.replace("${", "\\${")
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)


def _escape_regex(pattern: str) -> str:
	"""Escape bare forward slashes so the pattern fits in a /.../ literal."""
	out: list[str] = []
	escaped = False
	for ch in pattern:
		if escaped:
			out.append(ch)
			escaped = False
		elif ch == "\\":
			out.append(ch)
			escaped = True
		elif ch == "/":
			out.append("\\/")
		elif ch == "\n":
			out.append("\\n")
		else:
			out.append(ch)
	return "".join(out)


def _emit_list(items: Sequence[Expr], out: list[str]) -> None:
	for i, item in enumerate(items):
		if i > 0:
			out.append(", ")
		item.emit(out)


def _emit_paren(node: Expr, parent_op: str, side: str, out: list[str]) -> None:
	"""Emit child with parens if needed for precedence."""
	needs_parens = False
	child_prec = node.precedence()
	parent_prec = _PRECEDENCE.get(parent_op, 0)
	if child_prec < parent_prec:
		needs_parens = True
	elif isinstance(node, Ternary):
		needs_parens = True
	elif isinstance(node, Binary) and _mixes_nullish(node.op, parent_op):
		# ?? cannot be combined with && or || without parentheses
		needs_parens = True
	elif child_prec == parent_prec and isinstance(node, Binary):
		# Handle associativity
		if parent_op in _RIGHT_ASSOC:
			needs_parens = side == "left"
		else:
			needs_parens = side == "right"

	if needs_parens:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


def _mixes_nullish(child_op: str, parent_op: str) -> bool:
	return (child_op == "??" and parent_op in _LOGICAL) or (
		parent_op == "??" and child_op in _LOGICAL
	)


def _emit_primary(node: Expr, out: list[str]) -> None:
	"""Emit with parens if not primary precedence."""
	if node.precedence() < 20:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)
