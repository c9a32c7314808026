"""Browser globals and a few common calls on them."""

from __future__ import annotations

from typing import Any

from dstar.nodes import Call, Expr, Identifier, Member
from dstar.values import to_expr

WINDOW = Identifier("window")
DOCUMENT = Identifier("document")
CONSOLE = Identifier("console")
# The event object inside data-on:* handlers
EVENT = Identifier("event")
LOCATION = Identifier("location")
HISTORY = Identifier("history")
NAVIGATOR = Identifier("navigator")
LOCAL_STORAGE = Identifier("localStorage")
SESSION_STORAGE = Identifier("sessionStorage")
JSON = Identifier("JSON")
MATH = Identifier("Math")
DATE = Identifier("Date")
PROMISE = Identifier("Promise")
# The element inside event handlers
THIS = Identifier("this")


def method(obj: Expr, name: str, *args: Any) -> Call:
	"""obj.name(args...)"""
	return Call(Member(obj, name), [to_expr(a) for a in args])


def console_log_expr(*args: Any) -> Call:
	return method(CONSOLE, "log", *args)


def console_error(*args: Any) -> Call:
	return method(CONSOLE, "error", *args)


def console_warn(*args: Any) -> Call:
	return method(CONSOLE, "warn", *args)


def get_element_by_id(id: Any) -> Call:
	return method(DOCUMENT, "getElementById", id)


def query_selector(selector: Any) -> Call:
	return method(DOCUMENT, "querySelector", selector)


def event_target() -> Member:
	"""event.target"""
	return Member(EVENT, "target")


def event_value() -> Member:
	"""event.target.value"""
	return Member(event_target(), "value")
