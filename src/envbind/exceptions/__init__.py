from .bind import BindError, NotARecordError, ParseError

__all__ = ["BindError", "NotARecordError", "ParseError"]
