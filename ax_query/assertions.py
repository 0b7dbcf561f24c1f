"""
Assertion helpers built on the query engine.

`expect_absent` and `expect_count` report through `QueryResult` like the
retrieval functions. The property assertions raise
`AccessibilityAssertionError` subclasses, so they read naturally inside
pytest tests.
"""

from collections.abc import Callable

from ax_query.accessibility import effective_label, effective_value
from ax_query.exceptions import (
	CustomConditionFailed,
	ElementCountMismatch,
	ElementShouldNotExist,
	PropertyMismatch,
	TraitMismatch,
	UnexpectedProperty,
)
from ax_query.query import AxQuery
from ax_query.service import query_all_by
from ax_query.views import AXTrait, Node, QueryResult


def expect_absent(root: Node, query: AxQuery) -> QueryResult[None]:
	if query_all_by(root, query):
		return QueryResult.failure(ElementShouldNotExist(query.description))
	return QueryResult.success(None)


def expect_count(root: Node, query: AxQuery, expected: int) -> QueryResult[list[Node]]:
	matches = query_all_by(root, query)
	if len(matches) != expected:
		return QueryResult.failure(ElementCountMismatch(expected=expected, actual=len(matches), query=query.description))
	return QueryResult.success(matches)


def _assert_property(name: str, expected: str, actual: str | None) -> None:
	if actual != expected:
		raise PropertyMismatch(name, expected, actual)


def assert_label(node: Node, expected: str) -> None:
	"""Compare against the effective label, implicit fallbacks included."""
	_assert_property('accessibilityLabel', expected, effective_label(node))


def assert_not_label(node: Node, unexpected: str) -> None:
	if effective_label(node) == unexpected:
		raise UnexpectedProperty('accessibilityLabel', unexpected)


def assert_value(node: Node, expected: str) -> None:
	_assert_property('accessibilityValue', expected, effective_value(node))


def assert_hint(node: Node, expected: str) -> None:
	_assert_property('accessibilityHint', expected, node.accessibility_hint)


def assert_identifier(node: Node, expected: str) -> None:
	_assert_property('accessibilityIdentifier', expected, node.accessibility_identifier)


def assert_traits(node: Node, expected: AXTrait) -> None:
	if expected not in node.traits:
		raise TraitMismatch(expected, node.traits)


def assert_that(node: Node, condition: Callable[[Node], bool], description: str) -> None:
	if not condition(node):
		raise CustomConditionFailed(description)
