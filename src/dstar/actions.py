"""Datastar action calls: @get(...), @post(...), @setAll(...), ...

Backend actions come in two forms:

	get("/users")                                   -> @get("/users")
	get(signal_ref("url"), on_success(raw("$ok = true")))
	                                                -> @get($url).then(() => $ok = true)
	post_with_options("/items", RequestOptions().content_type("form"))
	                                                -> @post("/items", {contentType: "form"})

A builder with no options adds no argument: the runtime treats
@get("/x") and @get("/x", {}) differently.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from dstar.chains import PromiseChain, with_chains
from dstar.nodes import Arrow, Expr, Literal as JsLiteral, Raw, emit
from dstar.options import FilterOptions, RequestOptions
from dstar.values import Value, to_expr

HttpMethod: TypeAlias = Literal["get", "put", "post", "delete", "patch"]
Path: TypeAlias = str | Value | Expr


def action(name: str, *args: Any) -> Raw:
	"""Generic Datastar action call: action("get", Literal("/api")) -> @get("/api")"""
	out = ["@", name, "("]
	for i, arg in enumerate(args):
		if i > 0:
			out.append(", ")
		to_expr(arg).emit(out)
	out.append(")")
	return Raw("".join(out))


def _path_expr(path: Path) -> Expr:
	if isinstance(path, str):
		return JsLiteral(path)
	return to_expr(path)


def request(
	method: HttpMethod,
	path: Path,
	*chains: PromiseChain,
	options: RequestOptions | None = None,
) -> Value:
	"""Build `@<method>(path[, {options}])` followed by any promise chains."""
	out = ["@", method, "("]
	_path_expr(path).emit(out)
	if options:
		out.append(", ")
		options.emit(out)
	out.append(")")
	return Value(with_chains(Raw("".join(out)), *chains))


# =============================================================================
# Simple form
# =============================================================================


def get(path: Path, *chains: PromiseChain) -> Value:
	"""GET request. `path` is a string literal or a dynamic expression."""
	return request("get", path, *chains)


def put(path: Path, *chains: PromiseChain) -> Value:
	"""PUT request. `path` is a string literal or a dynamic expression."""
	return request("put", path, *chains)


def post(path: Path, *chains: PromiseChain) -> Value:
	"""POST request. `path` is a string literal or a dynamic expression."""
	return request("post", path, *chains)


def delete(path: Path, *chains: PromiseChain) -> Value:
	"""DELETE request. `path` is a string literal or a dynamic expression."""
	return request("delete", path, *chains)


def patch(path: Path, *chains: PromiseChain) -> Value:
	"""PATCH request. `path` is a string literal or a dynamic expression."""
	return request("patch", path, *chains)


# =============================================================================
# Options form
# =============================================================================


def get_with_options(
	path: str, options: RequestOptions, *chains: PromiseChain
) -> Value:
	return request("get", path, *chains, options=options)


def put_with_options(
	path: str, options: RequestOptions, *chains: PromiseChain
) -> Value:
	return request("put", path, *chains, options=options)


def post_with_options(
	path: str, options: RequestOptions, *chains: PromiseChain
) -> Value:
	return request("post", path, *chains, options=options)


def delete_with_options(
	path: str, options: RequestOptions, *chains: PromiseChain
) -> Value:
	return request("delete", path, *chains, options=options)


def patch_with_options(
	path: str, options: RequestOptions, *chains: PromiseChain
) -> Value:
	return request("patch", path, *chains, options=options)


# =============================================================================
# Framework actions
# =============================================================================


def peek(expr: Any) -> Value:
	"""Read signals without subscribing: @peek(() => expr)"""
	return Value(action("peek", Arrow([], to_expr(expr))))


def set_all(value: Any, filter: FilterOptions | None = None) -> Value:
	"""Set every matching signal: @setAll(value[, {include: /re/}])"""
	out = ["@setAll(", emit(to_expr(value))]
	if filter is not None and not filter.is_empty:
		out.append(", ")
		filter.emit(out)
	out.append(")")
	return Value(Raw("".join(out)))


def toggle_all(filter: FilterOptions | None = None) -> Value:
	"""Toggle every matching boolean signal: @toggleAll([{include: /re/}])"""
	out = ["@toggleAll("]
	if filter is not None and not filter.is_empty:
		filter.emit(out)
	out.append(")")
	return Value(Raw("".join(out)))


def clipboard(text: Any) -> Value:
	"""Copy text to the clipboard (Datastar Pro): @clipboard(text)"""
	return Value(action("clipboard", text))


def clipboard_base64(text: Any) -> Value:
	"""Copy Base64-decoded text to the clipboard (Datastar Pro): @clipboard(text, true)"""
	return Value(action("clipboard", text, True))


def fit(
	v: Any,
	old_min: Any,
	old_max: Any,
	new_min: Any,
	new_max: Any,
	*,
	clamp: bool = False,
	round: bool = False,
) -> Value:
	"""Linearly map `v` from [old_min, old_max] to [new_min, new_max] (Datastar Pro).

	@fit(v, oldMin, oldMax, newMin, newMax[, clamp[, round]])
	"""
	args: list[Any] = [v, old_min, old_max, new_min, new_max]
	if clamp or round:
		args.append(clamp)
	if round:
		args.append(True)
	return Value(action("fit", *args))


def fit_clamped(v: Any, old_min: Any, old_max: Any, new_min: Any, new_max: Any) -> Value:
	return fit(v, old_min, old_max, new_min, new_max, clamp=True)


def fit_rounded(v: Any, old_min: Any, old_max: Any, new_min: Any, new_max: Any) -> Value:
	return fit(v, old_min, old_max, new_min, new_max, round=True)


def fit_clamped_rounded(
	v: Any, old_min: Any, old_max: Any, new_min: Any, new_max: Any
) -> Value:
	return fit(v, old_min, old_max, new_min, new_max, clamp=True, round=True)
