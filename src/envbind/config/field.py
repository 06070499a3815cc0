from collections.abc import Mapping
from dataclasses import MISSING, Field, dataclass, field
from typing import Any

ENV_KEY = "env"
SEP_KEY = "sep"
DEFAULT_SEPARATOR = ","


@dataclass(init=True, slots=True, frozen=True)
class EnvTag:
	"""

	Binding metadata read from a dataclass field.

	**Attributes:**

	- `key`: Environment variable name. Empty means the field is not bound.
	- `sep`: Separator for sequence fields. Empty means DEFAULT_SEPARATOR.

	"""

	key: str = ""
	sep: str = ""

	@property
	def separator(self) -> str:
		return self.sep or DEFAULT_SEPARATOR

	@classmethod
	def of(cls, f: Field) -> "EnvTag":
		return cls(key=f.metadata.get(ENV_KEY) or "", sep=f.metadata.get(SEP_KEY) or "")


def env_field(
	key: str,
	*,
	sep: str | None = None,
	default: Any = MISSING,
	default_factory: Any = MISSING,
	metadata: Mapping[str, Any] | None = None,
	**kwargs: Any,
) -> Any:
	"""

	Declare a dataclass field bound to the environment variable `key`.

	**Parameters:**

	- `key`: Environment variable name.
	- `sep`: Separator for sequence fields, "," when omitted.
	- `default`, `default_factory`, `**kwargs`: Forwarded to dataclasses.field.
	- `metadata`: Extra metadata merged with the binding entries.

	**Example:**

		>>> @dataclass
		... class Config:
		...	 name: str = env_field("APP_NAME", default="")
		...	 roles: list[str] = env_field("ALLOWED_ROLES", sep=";", default_factory=list)

	"""

	meta = {**(metadata or {}), ENV_KEY: key}
	if sep:
		meta[SEP_KEY] = sep
	return field(default=default, default_factory=default_factory, metadata=meta, **kwargs)
