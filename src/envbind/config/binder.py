from __future__ import annotations

import dataclasses
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ForwardRef, get_type_hints

from envbind.exceptions import BindError, NotARecordError, ParseError
from envbind.log import get_logger

from . import parse
from .field import EnvTag
from .kind import Kind, resolve

if TYPE_CHECKING:
	from collections.abc import Mapping
	from logging import (
		Logger as StdLogger,
	)

	from loguru import Logger as LoguruLogger

	type _loggers = StdLogger | LoguruLogger


@dataclass(init=True, slots=True, frozen=True)
class Binding:
	"""

	One row of a record class binding table.

	**Attributes:**

	- `name`: Attribute name on the record.
	- `key`: Environment variable name.
	- `sep`: Separator used when `kind` is Kind.STRINGS.
	- `kind`: Semantic type, None when the annotation is unsupported.
	- `bits`: Declared width of numeric kinds.
	- `container`: list or tuple for Kind.STRINGS.
	- `writable`: False for private names and frozen dataclasses.
	- `annotation`: The resolved type hint, kept for diagnostics.

	"""

	name: str
	key: str
	sep: str
	kind: Kind | None
	bits: int
	container: type | None
	writable: bool
	annotation: Any


def _is_record_class(obj: object) -> bool:
	return isinstance(obj, type) and dataclasses.is_dataclass(obj)


def _field_hint(cls: type, f: dataclasses.Field) -> Any:
	tp = f.type
	if isinstance(tp, ForwardRef):
		tp = tp.__forward_arg__
	if not isinstance(tp, str):
		return tp
	try:
		return eval(tp, vars(sys.modules[cls.__module__]), dict(vars(cls)))  # noqa: S307
	except (NameError, SyntaxError, TypeError):
		# left as a string, reported as an unsupported type
		return tp


def _hints(cls: type, bound: list[dataclasses.Field]) -> dict[str, Any]:
	try:
		return get_type_hints(cls, include_extras=True)
	except (NameError, TypeError):
		# an unresolvable annotation, possibly on a field that is not bound
		return {f.name: _field_hint(cls, f) for f in bound}


@lru_cache
def _table(cls: type) -> tuple[Binding, ...]:
	bound = [(f, tag) for f in dataclasses.fields(cls) if (tag := EnvTag.of(f)).key]
	hints = _hints(cls, [f for f, _ in bound])
	frozen = cls.__dataclass_params__.frozen

	rows = []
	for f, tag in bound:
		annotation = hints.get(f.name, f.type)
		shape = resolve(annotation)
		rows.append(
			Binding(
				name=f.name,
				key=tag.key,
				sep=tag.separator,
				kind=shape.kind,
				bits=shape.bits,
				container=shape.container,
				writable=not (frozen or f.name.startswith("_")),
				annotation=annotation,
			)
		)

	return tuple(rows)


def _coerce(binding: Binding, raw: str) -> Any:
	kind, bits = binding.kind, binding.bits
	if kind is Kind.STRING:
		return raw
	if kind is Kind.BOOL:
		return parse.parse_bool(raw) if raw else False
	if kind is Kind.INT:
		return parse.parse_int(raw, bits) if raw else 0
	if kind is Kind.UINT:
		return parse.parse_uint(raw, bits) if raw else 0
	if kind is Kind.FLOAT:
		return parse.parse_float(raw, bits) if raw else 0.0
	if kind is Kind.STRINGS:
		return binding.container(parse.split(raw, binding.sep))
	raise TypeError(f"unknown kind: {kind}")


def _skip(log: _loggers, key: str, msg: str, strict: bool) -> None:
	if strict:
		raise BindError(key, msg=msg)
	log.warning(msg)


def describe(record: Any) -> tuple[Binding, ...]:
	"""

	Return the binding table of a dataclass or dataclass instance.

	Fields without a binding key are not listed.

	**Raises:**

	- `NotARecordError`: If `record` is neither a dataclass nor an instance of one.

	"""

	cls = record if isinstance(record, type) else type(record)
	if not _is_record_class(cls):
		raise NotARecordError(record)
	return _table(cls)


def bind[R](
	record: R,
	*,
	environ: Mapping[str, str] | None = None,
	logger: _loggers | None = None,
	strict: bool = False,
) -> R:
	"""

	Populate the bound fields of `record` in place from environment variables.

	Fields are processed in declaration order. An unset variable and an empty one are
	treated the same: the field gets the zero value of its kind ("", False, 0, 0.0, empty
	sequence). The first parse failure stops the call; fields processed before it stay
	populated and later fields are left untouched.

	**Parameters:**

	- `record`: Dataclass instance to populate.
	- `environ`: Mapping to read variables from. Defaults to os.environ.
	- `logger`: Optional logging or loguru logger for diagnostics.
	- `strict`: If True, non-writable fields and unsupported field types raise instead of
	being skipped with a warning.

	**Returns:**

	The same `record`.

	**Raises:**

	- `NotARecordError`: If `record` is not a dataclass instance.
	- `BindError`: If a bool/int/float variable cannot be parsed, or on a skipped field in strict mode.

	**Example:**

		>>> @dataclass
		... class Config:
		...	 name: str = env_field("APP_NAME", default="")
		...	 port: int = env_field("PORT", default=0)
		...	 admin: bool = env_field("ENABLE_ADMIN", default=False)
		...	 roles: list[str] = env_field("ALLOWED_ROLES", sep=";", default_factory=list)

		>>> cfg = bind(Config())

	"""

	if isinstance(record, type) or not dataclasses.is_dataclass(record):
		raise NotARecordError(record)

	env = os.environ if environ is None else environ
	log = get_logger("envbind.config.binder") if logger is None else logger

	for binding in _table(type(record)):
		if not binding.writable:
			_skip(log, binding.key, f"cannot set field {binding.name} bound to {binding.key}", strict)
			continue

		if binding.kind is None:
			_skip(log, binding.key, f"unsupported field type {binding.annotation!r} for {binding.key}", strict)
			continue

		raw = env.get(binding.key) or ""
		try:
			value = _coerce(binding, raw)
		except ParseError as e:
			raise BindError(binding.key, e) from e

		setattr(record, binding.name, value)
		log.debug(f"evaluated {binding.name} from {binding.key}")

	return record


def load[R](
	cls: type[R],
	*,
	environ: Mapping[str, str] | None = None,
	logger: _loggers | None = None,
	strict: bool = False,
) -> R:
	"""

	Instantiate `cls` with its defaults and bind it, see `bind`.

	Every field of `cls` must have a default or a default_factory.

	"""

	if not _is_record_class(cls):
		raise NotARecordError(cls)
	return bind(cls(), environ=environ, logger=logger, strict=strict)
