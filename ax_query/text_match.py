"""
Text matching strategies for accessibility properties.

A `TextMatch` compares an optional string (an element's label, value or hint)
against a pattern. Absent strings never match the exact, substring or regex
strategies; a predicate sees the absence and decides for itself.
"""

import logging
import re
from collections.abc import Callable
from typing import Any, Literal, Protocol

import regex
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class RegexCompileError(Exception):
	def __init__(self, backend: str, pattern: str, reason: str):
		self.backend = backend
		self.pattern = pattern
		super().__init__(f'{backend} could not compile {pattern!r}: {reason}')


class RegexBackend(Protocol):
	name: str

	def compile(self, pattern: str, flags: int = 0) -> Any: ...


class StdlibRegexBackend:
	name = 're'

	def compile(self, pattern: str, flags: int = 0) -> re.Pattern[str]:
		try:
			return re.compile(pattern, flags)
		except re.error as e:
			raise RegexCompileError(self.name, pattern, str(e)) from e


class RegexModuleBackend:
	"""The third-party `regex` engine. Accepts `\\p{...}` classes, possessive quantifiers and other re extensions."""

	name = 'regex'

	def compile(self, pattern: str, flags: int = 0) -> Any:
		try:
			return regex.compile(pattern, flags)
		except regex.error as e:
			raise RegexCompileError(self.name, pattern, str(e)) from e


# Tried in order by TextMatch.regex_pattern
REGEX_BACKENDS: tuple[RegexBackend, ...] = (StdlibRegexBackend(), RegexModuleBackend())


class TextMatch(BaseModel):
	"""Base strategy. Build instances through the classmethods below."""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	def matches(self, candidate: str | None) -> bool:
		raise NotImplementedError

	@property
	def description(self) -> str:
		raise NotImplementedError

	def __str__(self) -> str:
		return self.description

	@classmethod
	def exact(cls, text: str) -> 'ExactMatch':
		return ExactMatch(expected=text)

	@classmethod
	def contains(cls, text: str, case_sensitive: bool = True) -> 'SubstringMatch':
		return SubstringMatch(needle=text, case_sensitive=case_sensitive)

	@classmethod
	def regex(cls, pattern: Any) -> 'RegexMatch':
		"""Wrap an already compiled `re` or `regex` pattern."""
		return RegexMatch(pattern=pattern)

	@classmethod
	def regex_pattern(cls, pattern: str, flags: int = 0) -> 'RegexMatch | ExactMatch':
		"""Compile `pattern` with the first backend that accepts it.

		Falls back to exact matching on the raw string when no backend can
		compile it, so a malformed pattern never raises.
		"""
		for backend in REGEX_BACKENDS:
			try:
				compiled = backend.compile(pattern, flags)
			except RegexCompileError as e:
				logger.debug(f'Regex backend fallback: {e}')
				continue
			return RegexMatch(pattern=compiled)

		logger.warning(f'⚠️ {pattern!r} is not a valid regular expression, matching it as exact text')
		return ExactMatch(expected=pattern)

	@classmethod
	def predicate(cls, fn: Callable[[str | None], bool]) -> 'PredicateMatch':
		return PredicateMatch(fn=fn)


class ExactMatch(TextMatch):
	kind: Literal['exact'] = 'exact'
	expected: str

	def matches(self, candidate: str | None) -> bool:
		return candidate is not None and candidate == self.expected

	@property
	def description(self) -> str:
		return f'exact("{self.expected}")'


class SubstringMatch(TextMatch):
	kind: Literal['substring'] = 'substring'
	needle: str
	case_sensitive: bool = True

	def matches(self, candidate: str | None) -> bool:
		if candidate is None:
			return False
		if self.case_sensitive:
			return self.needle in candidate
		return self.needle.lower() in candidate.lower()

	@property
	def description(self) -> str:
		return f'contains("{self.needle}", case_sensitive={self.case_sensitive})'


class RegexMatch(TextMatch):
	kind: Literal['regex'] = 'regex'
	pattern: Any

	@field_validator('pattern')
	@classmethod
	def validate_pattern(cls, pattern: Any) -> Any:
		if not callable(getattr(pattern, 'search', None)):
			raise ValueError('pattern must be a compiled regular expression, use TextMatch.regex_pattern for strings')
		return pattern

	def matches(self, candidate: str | None) -> bool:
		if candidate is None:
			return False
		return self.pattern.search(candidate) is not None

	@property
	def description(self) -> str:
		return f'regex("{self.pattern.pattern}")'


class PredicateMatch(TextMatch):
	kind: Literal['predicate'] = 'predicate'
	fn: Callable[[str | None], bool]

	def matches(self, candidate: str | None) -> bool:
		return bool(self.fn(candidate))

	@property
	def description(self) -> str:
		return f'predicate({getattr(self.fn, "__name__", "...")})'


def as_text_match(match: 'TextMatch | str') -> TextMatch:
	"""Plain strings are exact matches."""
	if isinstance(match, TextMatch):
		return match
	if isinstance(match, str):
		return ExactMatch(expected=match)
	raise TypeError(f'Expected TextMatch or str, got {type(match).__name__}')
