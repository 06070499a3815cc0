import math
import re
import struct

from envbind.exceptions import ParseError

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"

_TRUE = frozenset(("1", "t", "true", "y", "yes", "on"))
_FALSE = frozenset(("0", "f", "false", "n", "no", "off"))

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_FLOAT = re.compile(
	r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
	re.IGNORECASE,
)

# 2**64 has 20 digits; longer literals are out of range without calling int()
_MAX_DIGITS = 20


def parse_bool(s: str) -> bool:
	v = s.lower()
	if v in _TRUE:
		return True
	if v in _FALSE:
		return False
	raise ParseError("parse_bool", s, INVALID_SYNTAX)


def _digits(s: str, func: str) -> int:
	# int() counts leading zeros against the interpreter's digit limit
	digits = s.lstrip("+-").lstrip("0") or "0"
	if len(digits) > _MAX_DIGITS:
		raise ParseError(func, s, OUT_OF_RANGE)
	n = int(digits)
	return -n if s.startswith("-") else n


def narrow_int(n: int, bits: int) -> int:
	"""Truncate `n` to a two's-complement signed integer of `bits` width."""
	n &= (1 << bits) - 1
	return n - (1 << bits) if n >> (bits - 1) else n


def narrow_uint(n: int, bits: int) -> int:
	return n & ((1 << bits) - 1)


def parse_int(s: str, bits: int = 64) -> int:
	"""

	Parse a base-10 signed integer.

	The literal must fit in a signed 64-bit integer; the result is then truncated to `bits`.

	**Raises:**

	- `ParseError`: On malformed input or a literal outside the int64 range.

	"""

	if not _SIGNED.fullmatch(s):
		raise ParseError("parse_int", s, INVALID_SYNTAX)
	n = _digits(s, "parse_int")
	if not -(1 << 63) <= n < (1 << 63):
		raise ParseError("parse_int", s, OUT_OF_RANGE)
	return narrow_int(n, bits)


def parse_uint(s: str, bits: int = 64) -> int:
	if not _UNSIGNED.fullmatch(s):
		raise ParseError("parse_uint", s, INVALID_SYNTAX)
	n = _digits(s, "parse_uint")
	if n >= 1 << 64:
		raise ParseError("parse_uint", s, OUT_OF_RANGE)
	return narrow_uint(n, bits)


def narrow_float(f: float, bits: int) -> float:
	if bits == 64:
		return f
	try:
		return struct.unpack("f", struct.pack("f", f))[0]
	except OverflowError:
		return math.copysign(math.inf, f)


def parse_float(s: str, bits: int = 64) -> float:
	if not _FLOAT.fullmatch(s):
		raise ParseError("parse_float", s, INVALID_SYNTAX)
	f = float(s)
	if math.isinf(f) and not s.lstrip("+-").lower().startswith("inf"):
		raise ParseError("parse_float", s, OUT_OF_RANGE)
	return narrow_float(f, bits)


def split(s: str, sep: str) -> list[str]:
	return s.split(sep) if s else []
