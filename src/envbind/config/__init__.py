from .binder import Binding, bind, describe, load
from .field import DEFAULT_SEPARATOR, EnvTag, env_field
from .kind import (
	Float32,
	Float64,
	FloatWidth,
	Int8,
	Int16,
	Int32,
	Int64,
	IntWidth,
	Kind,
	UInt,
	UInt8,
	UInt16,
	UInt32,
	UInt64,
)

__all__ = [
	"DEFAULT_SEPARATOR",
	"Binding",
	"EnvTag",
	"Float32",
	"Float64",
	"FloatWidth",
	"Int8",
	"Int16",
	"Int32",
	"Int64",
	"IntWidth",
	"Kind",
	"UInt",
	"UInt8",
	"UInt16",
	"UInt32",
	"UInt64",
	"bind",
	"describe",
	"env_field",
	"load",
]
