from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Annotated, Any, TypeAliasType, get_args, get_origin

_INT_BITS = (8, 16, 32, 64)
_FLOAT_BITS = (32, 64)
_SEQUENCE_ORIGINS = (list, tuple, Sequence, MutableSequence)


class Kind(StrEnum):
	STRING = auto()
	BOOL = auto()
	INT = auto()
	UINT = auto()
	FLOAT = auto()
	STRINGS = auto()


@dataclass(init=True, slots=True, frozen=True)
class IntWidth:
	bits: int = 64
	signed: bool = True

	def __post_init__(self) -> None:
		if self.bits not in _INT_BITS:
			raise ValueError(f"integer width must be one of {_INT_BITS}, got {self.bits}")


@dataclass(init=True, slots=True, frozen=True)
class FloatWidth:
	bits: int = 64

	def __post_init__(self) -> None:
		if self.bits not in _FLOAT_BITS:
			raise ValueError(f"float width must be one of {_FLOAT_BITS}, got {self.bits}")


type Int8 = Annotated[int, IntWidth(8)]
type Int16 = Annotated[int, IntWidth(16)]
type Int32 = Annotated[int, IntWidth(32)]
type Int64 = Annotated[int, IntWidth(64)]

type UInt = Annotated[int, IntWidth(64, signed=False)]
type UInt8 = Annotated[int, IntWidth(8, signed=False)]
type UInt16 = Annotated[int, IntWidth(16, signed=False)]
type UInt32 = Annotated[int, IntWidth(32, signed=False)]
type UInt64 = Annotated[int, IntWidth(64, signed=False)]

type Float32 = Annotated[float, FloatWidth(32)]
type Float64 = Annotated[float, FloatWidth(64)]


@dataclass(init=True, slots=True, frozen=True)
class Shape:
	"""

	Semantic type of a field as seen by the binder.

	**Attributes:**

	- `kind`: Resolved Kind, None if the annotation is not supported.
	- `bits`: Declared width for numeric kinds.
	- `container`: Sequence constructor for Kind.STRINGS (list or tuple).

	"""

	kind: Kind | None
	bits: int = 64
	container: type | None = None


def _unwrap(tp: Any) -> tuple[Any, IntWidth | FloatWidth | None]:
	width = None
	while True:
		if isinstance(tp, TypeAliasType):
			tp = tp.__value__
		elif get_origin(tp) is Annotated:
			base, *extras = get_args(tp)
			if width is None:
				width = next((e for e in extras if isinstance(e, (IntWidth, FloatWidth))), None)
			tp = base
		else:
			return tp, width


def _is_str_sequence(tp: Any) -> bool:
	origin, args = get_origin(tp), get_args(tp)
	if origin is tuple:
		return args == (str, ...)
	return origin in _SEQUENCE_ORIGINS and args == (str,)


def resolve(annotation: Any) -> Shape:
	tp, width = _unwrap(annotation)

	# bool is a subclass of int, check it first
	if tp is bool:
		return Shape(Kind.BOOL)
	if tp is str:
		return Shape(Kind.STRING)
	if tp is int:
		w = width if isinstance(width, IntWidth) else IntWidth()
		return Shape(Kind.INT if w.signed else Kind.UINT, w.bits)
	if tp is float:
		w = width if isinstance(width, FloatWidth) else FloatWidth()
		return Shape(Kind.FLOAT, w.bits)
	if _is_str_sequence(tp):
		return Shape(Kind.STRINGS, container=tuple if get_origin(tp) is tuple else list)

	return Shape(None)
