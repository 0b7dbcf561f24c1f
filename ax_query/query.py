"""
Composable accessibility queries.

An `AxQuery` is a flat, ordered list of matchers reduced by one combinator.
Composition concatenates matcher lists and the combinator named by the
composing call applies to the whole result:

	AxQuery.role(AXTrait.BUTTON).or_(AxQuery.label('Save')).and_(AxQuery.enabled())

requires all three matchers, because `and_` replaces the earlier OR. There is
no grouping.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ax_query.accessibility import effective_label, effective_value, is_enabled, is_selected
from ax_query.text_match import TextMatch, as_text_match
from ax_query.views import AXTrait, Node


class Combinator(str, Enum):
	AND = 'and'
	OR = 'or'


@dataclass(frozen=True)
class RoleMatcher:
	traits: AXTrait

	def evaluate(self, node: Node) -> bool:
		return self.traits in node.traits

	def describe(self) -> str:
		return f'role({self.traits.describe()})'


@dataclass(frozen=True)
class LabelMatcher:
	match: TextMatch

	def evaluate(self, node: Node) -> bool:
		return self.match.matches(effective_label(node))

	def describe(self) -> str:
		return f'label({self.match})'


@dataclass(frozen=True)
class IdentifierMatcher:
	identifier: str

	def evaluate(self, node: Node) -> bool:
		return node.accessibility_identifier == self.identifier

	def describe(self) -> str:
		return f'identifier("{self.identifier}")'


@dataclass(frozen=True)
class ValueMatcher:
	match: TextMatch

	def evaluate(self, node: Node) -> bool:
		return self.match.matches(effective_value(node))

	def describe(self) -> str:
		return f'value({self.match})'


@dataclass(frozen=True)
class HintMatcher:
	match: TextMatch

	def evaluate(self, node: Node) -> bool:
		return self.match.matches(node.accessibility_hint)

	def describe(self) -> str:
		return f'hint({self.match})'


@dataclass(frozen=True)
class ActionMatcher:
	name: str

	def evaluate(self, node: Node) -> bool:
		return self.name in (node.custom_action_names or ())

	def describe(self) -> str:
		return f'action("{self.name}")'


@dataclass(frozen=True)
class EnabledMatcher:
	expected: bool

	def evaluate(self, node: Node) -> bool:
		return is_enabled(node) == self.expected

	def describe(self) -> str:
		return f'enabled({self.expected})'


@dataclass(frozen=True)
class SelectedMatcher:
	expected: bool

	def evaluate(self, node: Node) -> bool:
		return is_selected(node) == self.expected

	def describe(self) -> str:
		return f'selected({self.expected})'


Matcher = (
	RoleMatcher
	| LabelMatcher
	| IdentifierMatcher
	| ValueMatcher
	| HintMatcher
	| ActionMatcher
	| EnabledMatcher
	| SelectedMatcher
)


@dataclass(frozen=True)
class AxQuery:
	"""Immutable predicate over accessibility elements."""

	matchers: tuple[Matcher, ...] = ()
	combinator: Combinator = Combinator.AND

	# Constructors

	@classmethod
	def _single(cls, matcher: Matcher) -> 'AxQuery':
		return cls(matchers=(matcher,), combinator=Combinator.AND)

	@classmethod
	def empty(cls, combinator: Combinator = Combinator.AND) -> 'AxQuery':
		"""A query without matchers. AND matches every element, OR matches none."""
		return cls(matchers=(), combinator=combinator)

	@classmethod
	def role(cls, traits: AXTrait) -> 'AxQuery':
		return cls._single(RoleMatcher(traits))

	@classmethod
	def label(cls, match: TextMatch | str) -> 'AxQuery':
		return cls._single(LabelMatcher(as_text_match(match)))

	@classmethod
	def identifier(cls, identifier: str) -> 'AxQuery':
		return cls._single(IdentifierMatcher(identifier))

	@classmethod
	def value(cls, match: TextMatch | str) -> 'AxQuery':
		return cls._single(ValueMatcher(as_text_match(match)))

	@classmethod
	def hint(cls, match: TextMatch | str) -> 'AxQuery':
		return cls._single(HintMatcher(as_text_match(match)))

	@classmethod
	def action(cls, name: str) -> 'AxQuery':
		return cls._single(ActionMatcher(name))

	@classmethod
	def enabled(cls, expected: bool = True) -> 'AxQuery':
		return cls._single(EnabledMatcher(expected))

	@classmethod
	def selected(cls, expected: bool = True) -> 'AxQuery':
		return cls._single(SelectedMatcher(expected))

	# Composition

	def and_(self, other: 'AxQuery') -> 'AxQuery':
		return AxQuery(matchers=self.matchers + other.matchers, combinator=Combinator.AND)

	def or_(self, other: 'AxQuery') -> 'AxQuery':
		return AxQuery(matchers=self.matchers + other.matchers, combinator=Combinator.OR)

	def __and__(self, other: Any) -> 'AxQuery':
		if not isinstance(other, AxQuery):
			return NotImplemented
		return self.and_(other)

	def __or__(self, other: Any) -> 'AxQuery':
		if not isinstance(other, AxQuery):
			return NotImplemented
		return self.or_(other)

	# Evaluation

	def matches(self, node: Node) -> bool:
		results = [matcher.evaluate(node) for matcher in self.matchers]
		if self.combinator is Combinator.AND:
			return all(results)
		return any(results)

	@property
	def description(self) -> str:
		separator = ' AND ' if self.combinator is Combinator.AND else ' OR '
		return separator.join(matcher.describe() for matcher in self.matchers)

	def __str__(self) -> str:
		return self.description


role = AxQuery.role
label = AxQuery.label
identifier = AxQuery.identifier
value = AxQuery.value
hint = AxQuery.hint
action = AxQuery.action
enabled = AxQuery.enabled
selected = AxQuery.selected
