from . import config, exceptions, log
from .config import (
	DEFAULT_SEPARATOR,
	Binding,
	EnvTag,
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
	bind,
	describe,
	env_field,
	load,
)
from .exceptions import BindError, NotARecordError, ParseError
from .log import get_logger

__all__ = [
	"config",
	"exceptions",
	"log",
	"DEFAULT_SEPARATOR",
	"Binding",
	"BindError",
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
	"NotARecordError",
	"ParseError",
	"UInt",
	"UInt8",
	"UInt16",
	"UInt32",
	"UInt64",
	"bind",
	"describe",
	"env_field",
	"get_logger",
	"load",
]


def __dir__():
	return __all__
