class ParseError(ValueError):
	def __init__(self, func: str, text: str, reason: str) -> None:
		self.func = func
		self.text = text
		self.reason = reason
		super().__init__(f"{func} {text!r}: {reason}")


class BindError(Exception):
	"""

	Raised when a record field could not be populated from the environment.

	**Attributes:**

	- `key`: Binding key (environment variable name) of the offending field, None on misuse.
	- `cause`: Underlying exception, also available as `__cause__`.

	"""

	def __init__(self, key: str | None, cause: BaseException | None = None, msg: str | None = None) -> None:
		self.key = key
		self.cause = cause
		if msg is None:
			msg = f"failed to load environment variable {key!r}: {cause}"
		super().__init__(msg)


class NotARecordError(BindError, TypeError):
	def __init__(self, obj: object) -> None:
		got = f"class {obj.__name__}" if isinstance(obj, type) else type(obj).__name__
		super().__init__(None, msg=f"want a dataclass instance, got {got}")
