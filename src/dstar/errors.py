from __future__ import annotations


class DstarError(Exception):
	"""Base class for dstar errors."""


class EncodingError(DstarError):
	"""A value could not be encoded as JSON.

	Raised while building expressions from Python values. Inputs come from
	program source, so this signals a bug in the calling code and is never
	caught inside dstar.
	"""
