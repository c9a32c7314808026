"""Attribute building: mutators append statements and name parts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple, Protocol

logger = logging.getLogger(__name__)


class AttrMutator(Protocol):
	def modify(self, attr: AttrBuilder) -> None: ...


@dataclass(slots=True)
class AttrBuilder:
	"""Tracks an attribute name and its statements while mutators run."""

	name_parts: list[str] = field(default_factory=list)
	statements: list[str] = field(default_factory=list)

	def append_statement(self, statement: str) -> None:
		self.statements.append(statement)

	def append_name(self, part: str) -> None:
		self.name_parts.append(part)

	@property
	def name(self) -> str:
		return "".join(self.name_parts)

	@property
	def value(self) -> str:
		return "; ".join(self.statements)


@dataclass(frozen=True, slots=True)
class AttrFunc:
	"""Adapts a plain function into an AttrMutator."""

	fn: Callable[[AttrBuilder], None]

	def modify(self, attr: AttrBuilder) -> None:
		self.fn(attr)


class Attribute(NamedTuple):
	name: str
	value: str


def build_attr(name: str, *mutators: AttrMutator) -> AttrBuilder:
	"""Create an AttrBuilder for `name` and apply every mutator in order."""
	attr = AttrBuilder()
	attr.append_name(name)
	for m in mutators:
		try:
			m.modify(attr)
		except Exception as exc:
			logger.error("Failed to build attribute %r: %s", attr.name, exc)
			exc.add_note(f"while building attribute {attr.name!r}")
			raise
	logger.debug("Built attribute %s=%r", attr.name, attr.value)
	return attr


def expr_attr(name: str, *mutators: AttrMutator) -> Attribute:
	"""Build an attribute whose value is the mutators' statements joined by "; "."""
	attr = build_attr(name, *mutators)
	return Attribute(attr.name, attr.value)


def append_name(part: str) -> AttrMutator:
	return AttrFunc(lambda attr: attr.append_name(part))


# =============================================================================
# Event attributes
# =============================================================================


def on(event: str, *mutators: AttrMutator) -> Attribute:
	"""data-on:<event>"""
	return expr_attr("data-on:", append_name(event), *mutators)


def on_click(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-on:click", *mutators)


def on_submit(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-on:submit", *mutators)


def on_input(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-on:input", *mutators)


def on_change(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-on:change", *mutators)


def on_load(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-on:load", *mutators)


def effect(*mutators: AttrMutator) -> Attribute:
	return expr_attr("data-effect", *mutators)


# =============================================================================
# Modifiers
# =============================================================================


def prevent_default() -> AttrMutator:
	return append_name("__prevent")


def stop_propagation() -> AttrMutator:
	return append_name("__stop")
