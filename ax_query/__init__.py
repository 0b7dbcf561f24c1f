from ax_query.config import CONFIG
from ax_query.logging_config import setup_logging

if CONFIG.AX_QUERY_SETUP_LOGGING:
	setup_logging()

from ax_query.accessibility import effective_label, effective_value, implicit_label, implicit_value, is_exposed
from ax_query.exceptions import (
	AccessibilityAssertionError,
	AxQueryError,
	CustomConditionFailed,
	ElementCountMismatch,
	ElementShouldNotExist,
	InvalidQuery,
	MultipleElementsFound,
	NoElementsFound,
	PropertyMismatch,
	TraitMismatch,
	UnexpectedProperty,
)
from ax_query.query import AxQuery, Combinator
from ax_query.service import (
	contains,
	exposed_elements,
	find_all_by,
	find_by,
	get_all_by,
	get_by,
	get_by_display_value,
	get_by_hint_text,
	get_by_label_text,
	get_by_role,
	get_by_test_id,
	query_all_by,
	query_by,
)
from ax_query.text_match import TextMatch
from ax_query.views import AXElement, AXTrait, Node, NodeKind, QueryResult, build_tree, load_tree_json

__all__ = [
	'AXElement',
	'AXTrait',
	'AccessibilityAssertionError',
	'AxQuery',
	'AxQueryError',
	'Combinator',
	'CustomConditionFailed',
	'ElementCountMismatch',
	'ElementShouldNotExist',
	'InvalidQuery',
	'MultipleElementsFound',
	'NoElementsFound',
	'Node',
	'NodeKind',
	'PropertyMismatch',
	'QueryResult',
	'TextMatch',
	'TraitMismatch',
	'UnexpectedProperty',
	'build_tree',
	'contains',
	'effective_label',
	'effective_value',
	'exposed_elements',
	'find_all_by',
	'find_by',
	'get_all_by',
	'get_by',
	'get_by_display_value',
	'get_by_hint_text',
	'get_by_label_text',
	'get_by_role',
	'get_by_test_id',
	'implicit_label',
	'implicit_value',
	'is_exposed',
	'load_tree_json',
	'query_all_by',
	'query_by',
	'setup_logging',
]
