"""Request options for backend actions, rendered as a JS object literal.

Options are kept in the order they were configured and rendered with bare
keys, so RequestOptions().content_type("form").retry_max_count(3) becomes
{contentType: "form", retryMaxCount: 3}. Maps (headers) keep their insertion
order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from dstar.nodes import Regex, escape_string, format_number
from dstar.values import encode_json

ContentType: TypeAlias = Literal["json", "form"]
RetryMode: TypeAlias = Literal["auto", "error", "always", "never"]
CancellationMode: TypeAlias = Literal["auto", "disabled"]


@dataclass(frozen=True, slots=True)
class FilterOptions:
	"""Include/exclude regular expressions restricting which signals are sent.

	Renders as {include: /re/, exclude: /re/}; unset keys are omitted.
	"""

	include: str | None = None
	exclude: str | None = None

	@property
	def is_empty(self) -> bool:
		return self.include is None and self.exclude is None

	def emit(self, out: list[str]) -> None:
		out.append("{")
		first = True
		for key, pattern in (("include", self.include), ("exclude", self.exclude)):
			if pattern is None:
				continue
			if not first:
				out.append(", ")
			first = False
			out.append(key)
			out.append(": ")
			Regex(pattern).emit(out)
		out.append("}")

	def render(self) -> str:
		out: list[str] = []
		self.emit(out)
		return "".join(out)


# =============================================================================
# Option variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class StringOption:
	key: str
	value: str


@dataclass(frozen=True, slots=True)
class IntOption:
	key: str
	value: int


@dataclass(frozen=True, slots=True)
class FloatOption:
	key: str
	value: float


@dataclass(frozen=True, slots=True)
class BoolOption:
	key: str
	value: bool


@dataclass(frozen=True, slots=True)
class HeadersOption:
	headers: tuple[tuple[str, str], ...]
	key: str = "headers"


@dataclass(frozen=True, slots=True)
class FilterSignalsOption:
	filter: FilterOptions
	key: str = "filterSignals"


@dataclass(frozen=True, slots=True)
class PayloadOption:
	"""Pre-encoded JSON payload."""

	json: str
	key: str = "payload"


RequestOption: TypeAlias = (
	StringOption
	| IntOption
	| FloatOption
	| BoolOption
	| HeadersOption
	| FilterSignalsOption
	| PayloadOption
)


def emit_option(option: RequestOption, out: list[str]) -> None:
	"""Emit one `key: value` pair."""
	out.append(option.key)
	out.append(": ")
	if isinstance(option, StringOption):
		out.append('"')
		out.append(escape_string(option.value))
		out.append('"')
	elif isinstance(option, BoolOption):
		out.append("true" if option.value else "false")
	elif isinstance(option, IntOption):
		out.append(format_number(option.value))
	elif isinstance(option, FloatOption):
		out.append(format_number(float(option.value)))
	elif isinstance(option, HeadersOption):
		out.append("{")
		for i, (name, value) in enumerate(option.headers):
			if i > 0:
				out.append(", ")
			out.append('"')
			out.append(escape_string(name))
			out.append('": "')
			out.append(escape_string(value))
			out.append('"')
		out.append("}")
	elif isinstance(option, FilterSignalsOption):
		option.filter.emit(out)
	else:
		out.append(option.json)


# =============================================================================
# Builder
# =============================================================================


@dataclass(frozen=True, slots=True)
class RequestOptions:
	"""Immutable, ordered request options builder.

	Every method returns a new builder with one more option; the receiver is
	left untouched, so a partially configured builder can be shared:

		base = RequestOptions().content_type("form")
		get_with_options("/a", base.selector("#a"))
		get_with_options("/b", base.selector("#b"))

	Values are not validated here; the Datastar runtime interprets them.
	"""

	options: tuple[RequestOption, ...] = ()

	def _with(self, option: RequestOption) -> RequestOptions:
		return RequestOptions((*self.options, option))

	def __len__(self) -> int:
		return len(self.options)

	def content_type(self, content_type: ContentType | str) -> RequestOptions:
		"""Request content type: "json" (default) or "form"."""
		return self._with(StringOption("contentType", content_type))

	def filter_signals(self, filter: FilterOptions) -> RequestOptions:
		"""Restrict which signals are sent with the request."""
		return self._with(FilterSignalsOption(filter))

	def selector(self, selector: str) -> RequestOptions:
		"""CSS selector of the form to send when content type is "form"."""
		return self._with(StringOption("selector", selector))

	def headers(self, headers: Mapping[str, str]) -> RequestOptions:
		"""Custom HTTP headers, rendered in the mapping's iteration order."""
		return self._with(HeadersOption(tuple(headers.items())))

	def open_when_hidden(self, open: bool = True) -> RequestOptions:
		"""Keep the connection open while the page is hidden."""
		return self._with(BoolOption("openWhenHidden", open))

	def retry_interval(self, ms: int) -> RequestOptions:
		"""Retry interval in milliseconds (runtime default: 1000)."""
		return self._with(IntOption("retryInterval", ms))

	def retry_scaler(self, scaler: float) -> RequestOptions:
		"""Exponential backoff multiplier (runtime default: 2)."""
		return self._with(FloatOption("retryScaler", scaler))

	def retry_max_wait_ms(self, ms: int) -> RequestOptions:
		"""Maximum wait between retries in milliseconds (runtime default: 30000)."""
		return self._with(IntOption("retryMaxWaitMs", ms))

	def retry_max_count(self, count: int) -> RequestOptions:
		"""Maximum number of retries (runtime default: 10)."""
		return self._with(IntOption("retryMaxCount", count))

	def request_cancellation(self, mode: CancellationMode | str) -> RequestOptions:
		"""Cancellation of in-flight requests: "auto" (default) or "disabled"."""
		return self._with(StringOption("requestCancellation", mode))

	def retry(self, mode: RetryMode | str) -> RequestOptions:
		"""Retry strategy.

		- "auto": retry on network errors (default)
		- "error": retry on errors and non-2xx responses
		- "always": always retry
		- "never": never retry
		"""
		return self._with(StringOption("retry", mode))

	def payload(self, data: Any) -> RequestOptions:
		"""Override the request body with JSON-encoded `data`.

		The value is encoded immediately; raises EncodingError if it can't be.
		Rendered under the Datastar key `payload`; older builders used `body`.
		"""
		return self._with(PayloadOption(encode_json(data)))

	def emit(self, out: list[str]) -> None:
		out.append("{")
		for i, option in enumerate(self.options):
			if i > 0:
				out.append(", ")
			emit_option(option, out)
		out.append("}")

	def render(self) -> str:
		out: list[str] = []
		self.emit(out)
		return "".join(out)
