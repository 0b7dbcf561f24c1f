"""
Visibility resolution for accessibility elements.

Decides which elements assistive technology can reach and which label/value
it announces for them. Explicit properties always win; otherwise a handler
registered for the element's kind supplies the implicit text.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from ax_query.config import CONFIG
from ax_query.views import AXTrait, Node, NodeKind


ImplicitHandler = Callable[[Any], str | None]

IMPLICIT_LABELS: dict[NodeKind, ImplicitHandler] = {}
IMPLICIT_VALUES: dict[NodeKind, ImplicitHandler] = {}


def implicit_label(*kinds: NodeKind) -> Callable[[ImplicitHandler], ImplicitHandler]:
	"""Register the decorated function as the implicit label of `kinds`, replacing any previous handler."""

	def decorator(func: ImplicitHandler) -> ImplicitHandler:
		for kind in kinds:
			IMPLICIT_LABELS[kind] = func
		return func

	return decorator


def implicit_value(*kinds: NodeKind) -> Callable[[ImplicitHandler], ImplicitHandler]:
	"""Register the decorated function as the implicit value of `kinds`, replacing any previous handler."""

	def decorator(func: ImplicitHandler) -> ImplicitHandler:
		for kind in kinds:
			IMPLICIT_VALUES[kind] = func
		return func

	return decorator


def is_exposed(node: Node) -> bool:
	"""True when `node` is an accessibility element and no container above it is exposed.

	An exposed container swallows its accessible descendants. Each ancestor is
	judged by its own container chain, so host nodes whose chains are not
	suffixes of one another are still resolved correctly.
	"""
	return _is_exposed(node, {})


def _is_exposed(node: Any, memo: dict[int, bool]) -> bool:
	key = id(node)
	if key in memo:
		return memo[key]
	# provisional answer while this node's chain is evaluated, ends responder cycles
	memo[key] = False
	exposed = bool(getattr(node, 'is_accessibility_element', False)) and not any(
		_is_exposed(ancestor, memo) for ancestor in node.container_chain
	)
	memo[key] = exposed
	return exposed


def is_enabled(node: Node) -> bool:
	return AXTrait.NOT_ENABLED not in node.traits


def is_selected(node: Node) -> bool:
	return AXTrait.SELECTED in node.traits


def effective_label(node: Node) -> str | None:
	explicit = node.accessibility_label
	if explicit:
		return explicit
	handler = IMPLICIT_LABELS.get(getattr(node, 'kind', NodeKind.VIEW))
	return handler(node) if handler else None


def effective_value(node: Node) -> str | None:
	explicit = node.accessibility_value
	if explicit:
		return explicit
	handler = IMPLICIT_VALUES.get(getattr(node, 'kind', NodeKind.VIEW))
	return handler(node) if handler else None


# Implicit labels


@implicit_label(NodeKind.LABEL)
def _label_text(node: Any) -> str | None:
	return getattr(node, 'text', None)


@implicit_label(NodeKind.BUTTON)
def _button_title(node: Any) -> str | None:
	title = getattr(node, 'title', None)
	if title:
		return title
	return getattr(node, 'attributed_title', None)


@implicit_label(NodeKind.TEXT_FIELD, NodeKind.SEARCH_FIELD)
def _placeholder(node: Any) -> str | None:
	# the typed text is the value, not the label
	return getattr(node, 'placeholder', None)


@implicit_label(NodeKind.TEXT_VIEW)
def _short_text(node: Any) -> str | None:
	text = getattr(node, 'text', None)
	if text and len(text) <= CONFIG.AX_QUERY_TEXT_VIEW_LABEL_LIMIT:
		return text
	return None


@implicit_label(NodeKind.ACTIVITY_INDICATOR)
def _activity_label(node: Any) -> str | None:
	return 'In progress' if getattr(node, 'is_animating', False) else None


# Implicit values


@implicit_value(NodeKind.TEXT_FIELD, NodeKind.SEARCH_FIELD)
def _field_text(node: Any) -> str | None:
	return getattr(node, 'text', None)


@implicit_value(NodeKind.TEXT_VIEW)
def _long_text(node: Any) -> str | None:
	text = getattr(node, 'text', None)
	if text and len(text) > CONFIG.AX_QUERY_TEXT_VIEW_LABEL_LIMIT:
		return text
	return None


@implicit_value(NodeKind.SLIDER, NodeKind.STEPPER, NodeKind.PROGRESS_VIEW)
def _numeric(node: Any) -> str | None:
	number = getattr(node, 'numeric_value', None)
	if number is None:
		return None
	return str(float(number))


@implicit_value(NodeKind.DATE_PICKER)
def _date(node: Any) -> str | None:
	date = getattr(node, 'date', None)
	return format_medium_datetime(date) if date is not None else None


@implicit_value(NodeKind.SWITCH)
def _switch_state(node: Any) -> str | None:
	return '1' if getattr(node, 'is_on', False) else '0'


@implicit_value(NodeKind.ACTIVITY_INDICATOR)
def _activity_state(node: Any) -> str | None:
	return 'animating' if getattr(node, 'is_animating', False) else 'stopped'


def format_medium_datetime(date: datetime) -> str:
	"""Medium date, short time: `Oct 17, 2026 at 3:04 PM`."""
	hour = date.hour % 12 or 12
	meridiem = 'AM' if date.hour < 12 else 'PM'
	return f'{date:%b} {date.day}, {date.year} at {hour}:{date.minute:02d} {meridiem}'
