"""
Tree query engine.

Collects the elements under a root that assistive technology can reach and
filters them through an `AxQuery`. The retrieval functions share that match
set and differ only in how they report zero or several matches:

	get_by        exactly one, else NoElementsFound / MultipleElementsFound
	query_by      zero or one, else MultipleElementsFound
	get_all_by    one or more, else NoElementsFound
	query_all_by  any number, never fails
	contains      whether anything matches

Nothing is cached; every call walks the tree as it is at call time.
"""

import logging
from collections.abc import Iterator
from typing import Any

from ax_query.accessibility import is_exposed
from ax_query.exceptions import MultipleElementsFound, NoElementsFound
from ax_query.query import AxQuery
from ax_query.text_match import TextMatch
from ax_query.views import AXTrait, Node, QueryResult

logger = logging.getLogger(__name__)


def iter_tree(root: Node) -> Iterator[Node]:
	"""Yield `root` and every descendant, pre-order."""
	stack: list[Any] = [root]
	while stack:
		node = stack.pop()
		yield node
		stack.extend(reversed(list(node.children or ())))


def exposed_elements(root: Node) -> list[Node]:
	"""Elements under `root` (inclusive) that assistive technology can reach."""
	return [node for node in iter_tree(root) if is_exposed(node)]


def _matches(root: Node, query: AxQuery) -> list[Node]:
	matches = [node for node in exposed_elements(root) if query.matches(node)]
	logger.debug(f'🔎 {len(matches)} element(s) matching {query.description or "<empty query>"}')
	return matches


def get_by(root: Node, query: AxQuery) -> QueryResult[Node]:
	"""Find exactly one element matching `query`."""
	matches = _matches(root, query)
	if not matches:
		return QueryResult.failure(NoElementsFound(query.description))
	if len(matches) > 1:
		return QueryResult.failure(MultipleElementsFound(query.description, count=len(matches)))
	return QueryResult.success(matches[0])


def query_by(root: Node, query: AxQuery) -> QueryResult[Node | None]:
	"""Find zero or one element matching `query`. No match is a success with None."""
	matches = _matches(root, query)
	if len(matches) > 1:
		return QueryResult.failure(MultipleElementsFound(query.description, count=len(matches)))
	return QueryResult.success(matches[0] if matches else None)


def get_all_by(root: Node, query: AxQuery) -> QueryResult[list[Node]]:
	"""Find all elements matching `query`, requiring at least one."""
	matches = _matches(root, query)
	if not matches:
		return QueryResult.failure(NoElementsFound(query.description))
	return QueryResult.success(matches)


def query_all_by(root: Node, query: AxQuery) -> list[Node]:
	return _matches(root, query)


def contains(root: Node, query: AxQuery) -> bool:
	return bool(_matches(root, query))


# Same contracts, named after the "find" vocabulary of other testing libraries
find_by = get_by
find_all_by = query_all_by


# Shorthands


def get_by_role(root: Node, traits: AXTrait, name: TextMatch | str | None = None) -> QueryResult[Node]:
	"""Find one element by role, optionally narrowed by its accessible name."""
	query = AxQuery.role(traits)
	if name is not None:
		query = query.and_(AxQuery.label(name))
	return get_by(root, query)


def get_by_label_text(root: Node, match: TextMatch | str) -> QueryResult[Node]:
	return get_by(root, AxQuery.label(match))


def get_by_test_id(root: Node, identifier: str) -> QueryResult[Node]:
	return get_by(root, AxQuery.identifier(identifier))


def get_by_display_value(root: Node, match: TextMatch | str) -> QueryResult[Node]:
	return get_by(root, AxQuery.value(match))


def get_by_hint_text(root: Node, match: TextMatch | str) -> QueryResult[Node]:
	return get_by(root, AxQuery.hint(match))
