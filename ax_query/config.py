"""Configuration for ax_query, read lazily from the environment."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TEXT_VIEW_LABEL_LIMIT = 50


class Config:
	"""Every property re-reads its environment variable so tests can monkeypatch the environment."""

	@property
	def AX_QUERY_LOGGING_LEVEL(self) -> str:
		return os.getenv('AX_QUERY_LOGGING_LEVEL', 'info').lower()

	@property
	def AX_QUERY_SETUP_LOGGING(self) -> bool:
		return os.getenv('AX_QUERY_SETUP_LOGGING', 'true').lower()[:1] in ('t', 'y', '1')

	@property
	def AX_QUERY_TEXT_VIEW_LABEL_LIMIT(self) -> int:
		raw = os.getenv('AX_QUERY_TEXT_VIEW_LABEL_LIMIT')
		if not raw:
			return DEFAULT_TEXT_VIEW_LABEL_LIMIT
		try:
			return int(raw)
		except ValueError:
			logger.warning(f'⚠️ Ignoring invalid AX_QUERY_TEXT_VIEW_LABEL_LIMIT={raw!r}, using {DEFAULT_TEXT_VIEW_LABEL_LIMIT}')
			return DEFAULT_TEXT_VIEW_LABEL_LIMIT


CONFIG = Config()
