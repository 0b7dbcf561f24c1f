import logging
import sys

from ax_query.config import CONFIG

RESULT_LEVEL = 35


class AxQueryFormatter(logging.Formatter):
	"""Shortens `ax_query.service` style logger names to their last component."""

	def format(self, record: logging.LogRecord) -> str:
		if isinstance(record.name, str) and record.name.startswith('ax_query.'):
			record.name = record.name.split('.')[-1]
		return super().format(record)


def addLoggingLevel(levelName: str, levelNum: int, methodName: str | None = None) -> None:
	"""
	Comprehensively adds a new logging level to the `logging` module and the
	currently configured logging class.

	Existing levels and methods are left alone so the function can be called
	repeatedly.
	"""
	if not methodName:
		methodName = levelName.lower()

	if hasattr(logging, levelName) or hasattr(logging.getLoggerClass(), methodName):
		return

	def logForLevel(self, message, *args, **kwargs):
		if self.isEnabledFor(levelNum):
			self._log(levelNum, message, args, **kwargs)

	def logToRoot(message, *args, **kwargs):
		logging.log(levelNum, message, *args, **kwargs)

	logging.addLevelName(levelNum, levelName)
	setattr(logging, levelName, levelNum)
	setattr(logging.getLoggerClass(), methodName, logForLevel)
	setattr(logging, methodName, logToRoot)


def setup_logging(stream=None, log_level: str | None = None, force_setup: bool = False) -> logging.Logger:
	"""Install a single stream handler on the `ax_query` logger.

	Args:
		stream: Output stream, defaults to stdout
		log_level: Overrides AX_QUERY_LOGGING_LEVEL when given
		force_setup: Replace an existing handler instead of returning early
	"""
	addLoggingLevel('RESULT', RESULT_LEVEL)

	ax_logger = logging.getLogger('ax_query')
	if ax_logger.handlers and not force_setup:
		return ax_logger

	for handler in list(ax_logger.handlers):
		ax_logger.removeHandler(handler)

	log_type = (log_level or CONFIG.AX_QUERY_LOGGING_LEVEL).lower()

	handler = logging.StreamHandler(stream or sys.stdout)
	if log_type == 'result':
		handler.setFormatter(AxQueryFormatter('%(message)s'))
	else:
		handler.setFormatter(AxQueryFormatter('%(levelname)-8s [%(name)s] %(message)s'))
	ax_logger.addHandler(handler)

	if log_type == 'result':
		ax_logger.setLevel(RESULT_LEVEL)
	elif log_type == 'debug':
		ax_logger.setLevel(logging.DEBUG)
	elif log_type == 'warning':
		ax_logger.setLevel(logging.WARNING)
	elif log_type == 'error':
		ax_logger.setLevel(logging.ERROR)
	else:
		ax_logger.setLevel(logging.INFO)

	ax_logger.propagate = False
	return ax_logger
