"""Errors reported by ax_query.

The engine never raises these. They travel inside `QueryResult` values and
are raised only when a caller asks for it with `QueryResult.unwrap()`.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from ax_query.views import AXTrait


class AxQueryError(Exception):
	"""Base class for every failure a cardinality operation can report."""

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message

	def __eq__(self, other: object) -> bool:
		return type(self) is type(other) and vars(self) == vars(other)

	def __hash__(self) -> int:
		return hash((type(self), self.message))


class NoElementsFound(AxQueryError):
	def __init__(self, query: str):
		self.query = query
		super().__init__(f'No elements found matching query: {query}')


class MultipleElementsFound(AxQueryError):
	def __init__(self, query: str, count: int):
		self.query = query
		self.count = count
		super().__init__(f'Found {count} elements matching query (expected 1): {query}')


class ElementShouldNotExist(AxQueryError):
	def __init__(self, query: str):
		self.query = query
		super().__init__(f'Element should not exist but was found: {query}')


class ElementCountMismatch(AxQueryError):
	def __init__(self, expected: int, actual: int, query: str):
		self.expected = expected
		self.actual = actual
		self.query = query
		super().__init__(f'Expected {expected} elements but found {actual} matching: {query}')


class InvalidQuery(AxQueryError):
	"""Reserved for malformed matcher combinations. Every query the builders produce is well formed."""

	def __init__(self, reason: str):
		self.reason = reason
		super().__init__(f'Invalid query: {reason}')


class AccessibilityAssertionError(AssertionError):
	"""Raised by the property assertions in `ax_query.assertions`."""


class PropertyMismatch(AccessibilityAssertionError):
	def __init__(self, property: str, expected: str, actual: str | None):
		self.property = property
		self.expected = expected
		self.actual = actual
		super().__init__(f"Expected {property} to be '{expected}' but was '{actual if actual is not None else 'None'}'")


class UnexpectedProperty(AccessibilityAssertionError):
	def __init__(self, property: str, value: str):
		self.property = property
		self.value = value
		super().__init__(f"Expected {property} to not have value '{value}'")


class TraitMismatch(AccessibilityAssertionError):
	def __init__(self, expected: 'AXTrait', actual: 'AXTrait'):
		self.expected = expected
		self.actual = actual
		super().__init__(f'Expected traits to contain {expected.describe()} but was {actual.describe()}')


class CustomConditionFailed(AccessibilityAssertionError):
	def __init__(self, description: str):
		self.description = description
		super().__init__(f'Custom assertion failed: {description}')
