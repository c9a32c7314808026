"""Environment-driven configuration."""

from __future__ import annotations

import os
from typing import Literal, TypeAlias, cast

DstarEnv: TypeAlias = Literal["dev", "prod"]

ENV_DSTAR_ENV = "DSTAR_ENV"
ENV_DSTAR_HTML_SAFE = "DSTAR_HTML_SAFE"

_FALSY = {"0", "false", "False", "no", "off"}


class EnvVars:
	"""Typed accessors over the DSTAR_* environment variables.

	Values are read on every access so tests (and long-lived processes) can
	change them without reimporting anything.
	"""

	__slots__: tuple[str, ...] = ()

	@property
	def mode(self) -> DstarEnv:
		value = os.environ.get(ENV_DSTAR_ENV, "prod").lower()
		if value not in ("dev", "prod"):
			raise ValueError(
				f"Invalid {ENV_DSTAR_ENV}={value!r}, expected 'dev' or 'prod'"
			)
		return cast(DstarEnv, value)

	@mode.setter
	def mode(self, value: DstarEnv) -> None:
		os.environ[ENV_DSTAR_ENV] = value

	@property
	def html_safe(self) -> bool:
		value = os.environ.get(ENV_DSTAR_HTML_SAFE)
		if value is None:
			return True
		return value not in _FALSY

	@html_safe.setter
	def html_safe(self, value: bool) -> None:
		os.environ[ENV_DSTAR_HTML_SAFE] = "1" if value else "0"


env = EnvVars()
