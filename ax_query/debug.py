"""Readable dumps of an accessibility tree for failure messages."""

import logging
from typing import Any

from ax_query.accessibility import effective_label, effective_value, is_exposed
from ax_query.views import Node, NodeKind

logger = logging.getLogger(__name__)


def _format_node(node: Any) -> str:
	kind = getattr(node, 'kind', NodeKind.VIEW)
	parts = [kind.value if isinstance(kind, NodeKind) else str(kind)]

	traits = getattr(node, 'traits', None)
	if traits:
		parts.append(f'traits={traits.describe()}')

	label = effective_label(node)
	if label is not None:
		parts.append(f'label="{label}"')
	value = effective_value(node)
	if value is not None:
		parts.append(f'value="{value}"')
	if node.accessibility_identifier:
		parts.append(f'id="{node.accessibility_identifier}"')
	if node.accessibility_hint:
		parts.append(f'hint="{node.accessibility_hint}"')
	if node.custom_action_names:
		parts.append(f'actions={list(node.custom_action_names)}')

	return ' '.join(parts)


def format_tree(root: Node, exposed_only: bool = False) -> str:
	"""Indented outline of `root`. Exposed elements are prefixed with `*`.

	With `exposed_only`, hidden elements are skipped but their exposed
	descendants keep their depth.
	"""
	lines: list[str] = []

	def visit(node: Any, depth: int) -> None:
		exposed = is_exposed(node)
		if exposed or not exposed_only:
			marker = '*' if exposed else ' '
			lines.append(f'{"  " * depth}{marker} {_format_node(node)}')
		for child in node.children or ():
			visit(child, depth + 1)

	visit(root, 0)
	return '\n'.join(lines)


def debug_tree(root: Node, exposed_only: bool = False) -> None:
	logger.debug(f'Accessibility tree:\n{format_tree(root, exposed_only=exposed_only)}')
