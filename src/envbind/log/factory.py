from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
	from loguru import Logger


@lru_cache
def get_logger(logger_name: str | None = None) -> Logger:
	"""

	Logger used for binder diagnostics when the caller passes no `logger=`.

	Skipped fields are reported at warning level and bound fields at debug level. The module
	path is bound as extra["logger_name"] (" envbind -> config -> binder ") so a loguru sink
	can filter this package's records out of an application log.

	"""

	return logger if logger_name is None else logger.bind(logger_name=f" {logger_name.replace('.', ' -> ')} ")
