"""Tests for the text matching strategies and the regex backends."""

import logging
import re
import subprocess
import sys

import pytest
import regex

from ax_query.text_match import (
	REGEX_BACKENDS,
	ExactMatch,
	PredicateMatch,
	RegexCompileError,
	RegexMatch,
	RegexModuleBackend,
	StdlibRegexBackend,
	SubstringMatch,
	TextMatch,
	as_text_match,
)


class TestExactMatch:
	def test_matches_identical_text_only(self):
		match = TextMatch.exact('Save')
		assert match.matches('Save')
		assert not match.matches('Save As...')
		assert not match.matches('save')

	def test_absent_never_matches(self):
		assert not TextMatch.exact('').matches(None)

	def test_empty_string_matches_empty_string(self):
		assert TextMatch.exact('').matches('')


class TestSubstringMatch:
	def test_case_sensitive_by_default(self):
		match = TextMatch.contains('Shopping Cart')
		assert match.matches('Shopping Cart (3 items)')
		assert not match.matches('shopping cart (3 items)')

	def test_case_insensitive(self):
		match = TextMatch.contains('shopping cart', case_sensitive=False)
		assert match.matches('Shopping Cart (3 items)')
		assert match.matches('SHOPPING CART')

	def test_absent_never_matches(self):
		assert not TextMatch.contains('').matches(None)
		assert not TextMatch.contains('x', case_sensitive=False).matches(None)

	def test_empty_needle_matches_any_present_text(self):
		assert TextMatch.contains('').matches('')
		assert TextMatch.contains('').matches('anything')


class TestRegexMatch:
	def test_searches_anywhere_in_text(self):
		match = TextMatch.regex(re.compile(r'\d{3}-\d{4}'))
		assert match.matches('Phone (555) 123-4567')
		assert not match.matches('Phone unknown')

	def test_absent_never_matches(self):
		assert not TextMatch.regex(re.compile('.*')).matches(None)

	def test_accepts_precompiled_regex_module_pattern(self):
		match = TextMatch.regex(regex.compile(r'\p{Lu}{3}'))
		assert match.matches('Call NASA now')
		assert not match.matches('call nasa now')

	def test_rejects_uncompiled_pattern(self):
		with pytest.raises(ValueError):
			RegexMatch(pattern='not compiled')


class TestRegexPattern:
	def test_prefers_stdlib_backend(self):
		match = TextMatch.regex_pattern('Email.*@')
		assert isinstance(match, RegexMatch)
		assert isinstance(match.pattern, re.Pattern)
		assert match.matches('Email (invalid.email@)')

	def test_falls_back_to_regex_module(self):
		# \p{...} is not understood by the stdlib engine
		match = TextMatch.regex_pattern(r'^\p{Lu}')
		assert isinstance(match, RegexMatch)
		assert not isinstance(match.pattern, re.Pattern)
		assert match.matches('Upper')
		assert not match.matches('lower')

	def test_invalid_pattern_becomes_exact_match(self, caplog):
		with caplog.at_level(logging.WARNING, logger='ax_query'):
			match = TextMatch.regex_pattern('[unclosed')
		assert isinstance(match, ExactMatch)
		assert match.matches('[unclosed')
		assert not match.matches('unclosed')
		assert 'not a valid regular expression' in caplog.text

	def test_flags_are_forwarded(self):
		match = TextMatch.regex_pattern('submit', flags=re.IGNORECASE)
		assert match.matches('SUBMIT ORDER')

	def test_email_pattern(self):
		match = TextMatch.regex_pattern(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')
		assert match.matches('Contact: john.doe@example.com')
		assert not match.matches('Contact: nobody')


@pytest.mark.parametrize(
	'pattern,text,expected',
	[
		(r'v\d+\.\d+\.\d+-beta', 'MyApp v2.1.0-beta.3', True),
		(r'v\d+\.\d+\.\d+-beta', 'MyApp v1.0.0', False),
		(r'^Save$', 'Save', True),
		(r'^Save$', 'Save As...', False),
		(r'(?i)error \d+', 'ERROR 3', True),
		(r'\(\d{3}\)\s*\d{3}-\d{4}', 'Phone (555) 123-4567', True),
		(r'', 'anything', True),
	],
)
def test_backends_agree(pattern, text, expected):
	for backend in REGEX_BACKENDS:
		compiled = backend.compile(pattern)
		assert TextMatch.regex(compiled).matches(text) is expected, backend.name


def test_backends_raise_compile_error():
	for backend in (StdlibRegexBackend(), RegexModuleBackend()):
		with pytest.raises(RegexCompileError) as exc_info:
			backend.compile('(')
		assert exc_info.value.backend == backend.name


class TestPredicateMatch:
	def test_receives_absent_value(self):
		seen = []

		def record(text):
			seen.append(text)
			return text is None

		match = TextMatch.predicate(record)
		assert match.matches(None)
		assert not match.matches('value')
		assert seen == [None, 'value']

	def test_result_is_coerced_to_bool(self):
		match = TextMatch.predicate(lambda text: text and len(text))
		assert match.matches('abc') is True
		assert match.matches('') is False


def test_descriptions():
	assert str(TextMatch.exact('Save')) == 'exact("Save")'
	assert str(TextMatch.contains('cart', case_sensitive=False)) == 'contains("cart", case_sensitive=False)'
	assert str(TextMatch.regex_pattern('a+b')) == 'regex("a+b")'

	def is_short(text):
		return text is not None and len(text) < 5

	assert str(TextMatch.predicate(is_short)) == 'predicate(is_short)'


def test_text_matches_are_immutable():
	match = TextMatch.exact('Save')
	with pytest.raises(Exception):
		match.expected = 'Other'


def test_as_text_match():
	assert as_text_match('Save') == ExactMatch(expected='Save')
	contains = SubstringMatch(needle='a')
	assert as_text_match(contains) is contains
	with pytest.raises(TypeError):
		as_text_match(42)


def test_predicate_match_is_a_text_match():
	assert isinstance(TextMatch.predicate(lambda text: True), PredicateMatch)


def test_predicate_field_does_not_shadow_constructor():
	assert TextMatch.predicate(str.isupper).fn is str.isupper
	result = subprocess.run(
		[sys.executable, '-W', 'error::UserWarning', '-c', 'import ax_query.text_match'],
		capture_output=True,
		text=True,
	)
	assert result.returncode == 0, result.stderr
