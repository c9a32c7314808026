"""Tests for RequestOptions and FilterOptions rendering."""

import pytest
from dstar.errors import EncodingError
from dstar.options import FilterOptions, RequestOptions

# =============================================================================
# FilterOptions Tests
# =============================================================================


class TestFilterOptions:
	def test_both(self):
		f = FilterOptions(include="^user", exclude="password$")
		assert f.render() == "{include: /^user/, exclude: /password$/}"

	def test_include_only(self):
		assert FilterOptions(include="^form\\.").render() == "{include: /^form\\./}"

	def test_exclude_only(self):
		assert FilterOptions(exclude="^_").render() == "{exclude: /^_/}"

	def test_empty(self):
		f = FilterOptions()
		assert f.is_empty
		assert f.render() == "{}"


# =============================================================================
# RequestOptions Tests
# =============================================================================


class TestRequestOptions:
	def test_empty(self):
		opts = RequestOptions()
		assert len(opts) == 0
		assert not opts
		assert opts.render() == "{}"

	def test_insertion_order(self):
		opts = RequestOptions().retry_max_count(3).content_type("form")
		assert opts.render() == '{retryMaxCount: 3, contentType: "form"}'

	def test_string_options(self):
		opts = (
			RequestOptions()
			.selector("#my-form")
			.request_cancellation("disabled")
			.retry("error")
		)
		assert opts.render() == (
			'{selector: "#my-form", requestCancellation: "disabled", retry: "error"}'
		)

	def test_int_options(self):
		opts = RequestOptions().retry_interval(1000).retry_max_wait_ms(30000)
		assert opts.render() == "{retryInterval: 1000, retryMaxWaitMs: 30000}"

	def test_bool_option(self):
		assert RequestOptions().open_when_hidden().render() == "{openWhenHidden: true}"
		assert (
			RequestOptions().open_when_hidden(False).render()
			== "{openWhenHidden: false}"
		)

	@pytest.mark.parametrize(
		("scaler", "expected"),
		[(2.0, "2"), (1.5, "1.5"), (0.25, "0.25"), (1e-7, "0.0000001")],
	)
	def test_retry_scaler(self, scaler: float, expected: str):
		assert RequestOptions().retry_scaler(scaler).render() == (
			f"{{retryScaler: {expected}}}"
		)

	def test_headers_keep_order(self):
		opts = RequestOptions().headers({"X-B": "2", "X-A": "1"})
		assert opts.render() == '{headers: {"X-B": "2", "X-A": "1"}}'

	def test_headers_are_escaped(self):
		opts = RequestOptions().headers({"X-Quote": 'a"b'})
		assert opts.render() == '{headers: {"X-Quote": "a\\"b"}}'

	def test_filter_signals(self):
		opts = RequestOptions().filter_signals(FilterOptions(include="^user"))
		assert opts.render() == "{filterSignals: {include: /^user/}}"

	def test_payload(self):
		opts = RequestOptions().payload({"id": 1, "tags": ["a"]})
		assert opts.render() == '{payload: {"id":1,"tags":["a"]}}'

	def test_payload_encodes_eagerly(self):
		with pytest.raises(EncodingError):
			RequestOptions().payload({1, object()})

	def test_copy_on_append(self):
		base = RequestOptions().content_type("json")
		with_selector = base.selector("#f")
		assert base.render() == '{contentType: "json"}'
		assert with_selector.render() == '{contentType: "json", selector: "#f"}'

	def test_branches_do_not_leak(self):
		base = RequestOptions().content_type("form")
		a = base.selector("#a")
		b = base.selector("#b")
		assert a.render() == '{contentType: "form", selector: "#a"}'
		assert b.render() == '{contentType: "form", selector: "#b"}'
		assert len(base) == 1

	def test_no_validation(self):
		# Values go through untouched, the runtime interprets them
		opts = RequestOptions().retry_max_count(-1).content_type("xml")
		assert opts.render() == '{retryMaxCount: -1, contentType: "xml"}'

	def test_int_options_are_not_truncated(self):
		opts = RequestOptions().retry_interval(2.5)  # pyright: ignore[reportArgumentType]
		assert opts.render() == "{retryInterval: 2.5}"


# =============================================================================
# HTML Safety Tests
# =============================================================================


class TestHtmlSafeOptions:
	def test_string_options_escaped_by_default(self):
		opts = RequestOptions().selector("form[a&b]>input")
		assert opts.render() == '{selector: "form[a\\u0026b]\\u003einput"}'

	def test_headers_escaped_by_default(self):
		opts = RequestOptions().headers({"X-Tag": "<b>"})
		assert opts.render() == '{headers: {"X-Tag": "\\u003cb\\u003e"}}'

	def test_escaping_disabled(self, monkeypatch: pytest.MonkeyPatch):
		monkeypatch.setenv("DSTAR_HTML_SAFE", "0")
		opts = RequestOptions().selector("form[a&b]>input").headers({"X-Tag": "<b>"})
		assert opts.render() == (
			'{selector: "form[a&b]>input", headers: {"X-Tag": "<b>"}}'
		)
