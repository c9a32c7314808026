"""Tests for backend and framework action constructors."""

import pytest
from dstar.actions import (
	action,
	clipboard,
	clipboard_base64,
	delete,
	delete_with_options,
	fit,
	fit_clamped,
	fit_clamped_rounded,
	fit_rounded,
	get,
	get_with_options,
	patch,
	patch_with_options,
	peek,
	post,
	post_with_options,
	put,
	put_with_options,
	request,
	set_all,
	toggle_all,
)
from dstar.chains import on_failure, on_success
from dstar.nodes import Binary, Identifier, Literal, Template, emit
from dstar.options import FilterOptions, RequestOptions
from dstar.values import json_value, raw, signal_ref

# =============================================================================
# Backend Action Tests
# =============================================================================


class TestSimpleForm:
	@pytest.mark.parametrize(
		("fn", "verb"),
		[(get, "get"), (put, "put"), (post, "post"), (delete, "delete"), (patch, "patch")],
	)
	def test_verbs(self, fn, verb: str):
		assert fn("/users").to_js() == f'@{verb}("/users")'

	def test_path_is_escaped(self):
		assert get('/a"b').to_js() == '@get("/a\\"b")'

	def test_path_is_html_safe(self):
		assert get("/a?x=1&y=2").to_js() == '@get("/a?x=1\\u0026y=2")'
		assert post("/<x>").to_js() == '@post("/\\u003cx\\u003e")'

	def test_path_html_safe_disabled(self, monkeypatch: pytest.MonkeyPatch):
		monkeypatch.setenv("DSTAR_HTML_SAFE", "0")
		assert get("/a?x=1&y=2").to_js() == '@get("/a?x=1&y=2")'

	def test_dynamic_path(self):
		assert get(signal_ref("url")).to_js() == "@get($url)"

	def test_dynamic_path_expression(self):
		path = Template(["/users/", Identifier("$id")])
		assert delete(path).to_js() == "@delete(`/users/${$id}`)"

	def test_with_chains(self):
		v = post("/save", on_success(raw("$saved = true")), on_failure(raw("$err = error")))
		assert v.to_js() == (
			'@post("/save").then(() => $saved = true).catch((error) => $err = error)'
		)


class TestOptionsForm:
	def test_options_rendered_as_second_argument(self):
		opts = RequestOptions().content_type("form").retry_max_count(3)
		assert post_with_options("/items", opts).to_js() == (
			'@post("/items", {contentType: "form", retryMaxCount: 3})'
		)

	def test_empty_options_are_omitted(self):
		assert get_with_options("/x", RequestOptions()).to_js() == '@get("/x")'

	@pytest.mark.parametrize(
		("fn", "verb"),
		[
			(get_with_options, "get"),
			(put_with_options, "put"),
			(post_with_options, "post"),
			(delete_with_options, "delete"),
			(patch_with_options, "patch"),
		],
	)
	def test_verbs(self, fn, verb: str):
		opts = RequestOptions().open_when_hidden()
		assert fn("/r", opts).to_js() == f'@{verb}("/r", {{openWhenHidden: true}})'

	def test_options_with_chains(self):
		opts = RequestOptions().retry("never")
		v = put_with_options("/p", opts, on_success(raw("$ok = true")))
		assert v.to_js() == '@put("/p", {retry: "never"}).then(() => $ok = true)'

	def test_payload(self):
		opts = RequestOptions().payload({"name": "x"})
		assert patch_with_options("/u", opts).to_js() == (
			'@patch("/u", {payload: {"name":"x"}})'
		)

	def test_request(self):
		v = request("get", "/q", options=RequestOptions().selector("#f"))
		assert v.to_js() == '@get("/q", {selector: "#f"})'


# =============================================================================
# Framework Action Tests
# =============================================================================


class TestFrameworkActions:
	def test_action(self):
		assert emit(action("get", Literal("/api"))) == '@get("/api")'
		assert emit(action("noop")) == "@noop()"

	def test_action_converts_python_values(self):
		assert emit(action("x", 1, "a", True, None)) == '@x(1, "a", true, null)'

	def test_peek(self):
		assert peek(signal_ref("count")).to_js() == "@peek(() => $count)"

	def test_set_all(self):
		assert set_all(True).to_js() == "@setAll(true)"
		assert set_all(json_value("x")).to_js() == '@setAll("x")'

	def test_set_all_with_filter(self):
		v = set_all(False, FilterOptions(include="^form\\."))
		assert v.to_js() == "@setAll(false, {include: /^form\\./})"

	def test_set_all_empty_filter_is_omitted(self):
		assert set_all(0, FilterOptions()).to_js() == "@setAll(0)"

	def test_toggle_all(self):
		assert toggle_all().to_js() == "@toggleAll()"
		assert toggle_all(FilterOptions(exclude="^_")).to_js() == (
			"@toggleAll({exclude: /^_/})"
		)

	def test_clipboard(self):
		assert clipboard(json_value("Hello, world!")).to_js() == (
			'@clipboard("Hello, world!")'
		)
		assert clipboard_base64(signal_ref("data")).to_js() == "@clipboard($data, true)"

	def test_fit(self):
		assert fit(signal_ref("slider"), 0, 100, 0, 255).to_js() == (
			"@fit($slider, 0, 100, 0, 255)"
		)

	def test_fit_flags(self):
		s = signal_ref("v")
		assert fit_clamped(s, 0, 1, 0, 10).to_js() == "@fit($v, 0, 1, 0, 10, true)"
		assert fit_rounded(s, 0, 1, 0, 10).to_js() == (
			"@fit($v, 0, 1, 0, 10, false, true)"
		)
		assert fit_clamped_rounded(s, 0, 1, 0, 10).to_js() == (
			"@fit($v, 0, 1, 0, 10, true, true)"
		)

	def test_fit_expression_arguments(self):
		lo = Binary(Identifier("$min"), "-", Literal(1))
		assert fit(signal_ref("v"), lo, 1, 0.5, 2.0).to_js() == (
			"@fit($v, $min - 1, 1, 0.5, 2)"
		)
