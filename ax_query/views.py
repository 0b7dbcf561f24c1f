from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, Flag, auto
from functools import reduce
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ax_query.exceptions import AxQueryError


class AXTrait(Flag):
	"""Role and state tags carried by an accessibility element. Combine with `|`."""

	NONE = 0
	BUTTON = auto()
	LINK = auto()
	HEADER = auto()
	SEARCH_FIELD = auto()
	IMAGE = auto()
	SELECTED = auto()
	PLAYS_SOUND = auto()
	KEYBOARD_KEY = auto()
	STATIC_TEXT = auto()
	SUMMARY_ELEMENT = auto()
	NOT_ENABLED = auto()
	UPDATES_FREQUENTLY = auto()
	STARTS_MEDIA_SESSION = auto()
	ADJUSTABLE = auto()
	ALLOWS_DIRECT_INTERACTION = auto()
	CAUSES_PAGE_TURN = auto()
	TAB_BAR = auto()
	TOGGLE_BUTTON = auto()

	@classmethod
	def from_names(cls, names: Sequence[str]) -> 'AXTrait':
		"""Combine trait names such as `['button', 'selected']`. Raises KeyError on unknown names."""
		return reduce(lambda acc, name: acc | cls[name.strip().upper()], names, cls.NONE)

	def describe(self) -> str:
		names = [member.name.lower() for member in type(self) if member.value and member in self]
		return '|'.join(names) if names else 'none'


class NodeKind(str, Enum):
	"""Control kinds the implicit label/value tables know about."""

	VIEW = 'view'
	LABEL = 'label'
	BUTTON = 'button'
	TEXT_FIELD = 'text_field'
	SEARCH_FIELD = 'search_field'
	TEXT_VIEW = 'text_view'
	SLIDER = 'slider'
	STEPPER = 'stepper'
	PROGRESS_VIEW = 'progress_view'
	DATE_PICKER = 'date_picker'
	SWITCH = 'switch'
	ACTIVITY_INDICATOR = 'activity_indicator'


@runtime_checkable
class Node(Protocol):
	"""Accessor contract the query engine reads from a host UI tree.

	Kind-specific fields (text, placeholder, numeric_value, ...) are optional and
	read with `getattr` defaults by the implicit label/value handlers.
	"""

	kind: NodeKind
	traits: AXTrait
	is_accessibility_element: bool
	accessibility_label: str | None
	accessibility_value: str | None
	accessibility_hint: str | None
	accessibility_identifier: str | None

	@property
	def custom_action_names(self) -> Sequence[str]: ...

	@property
	def children(self) -> Sequence['Node']: ...

	@property
	def container_chain(self) -> Sequence['Node']:
		"""Containers above this node, nearest first, following the responder chain outward."""
		...


@dataclass(eq=False)
class AXElement:
	"""In-memory accessibility element.

	Equality is identity: two elements with the same properties are still two
	different nodes in the tree.
	"""

	kind: NodeKind = NodeKind.VIEW
	is_accessibility_element: bool = False
	traits: AXTrait = AXTrait.NONE
	accessibility_label: str | None = None
	accessibility_value: str | None = None
	accessibility_hint: str | None = None
	accessibility_identifier: str | None = None
	custom_action_names: list[str] = field(default_factory=list)

	# kind-specific state consumed by the implicit label/value handlers
	text: str | None = None
	title: str | None = None
	attributed_title: str | None = None
	placeholder: str | None = None
	numeric_value: float | None = None
	date: datetime | None = None
	is_on: bool = False
	is_animating: bool = False

	children: list['AXElement'] = field(default_factory=list, repr=False)
	parent: 'AXElement | None' = field(default=None, repr=False)
	# overrides `parent` as the next hop of the container chain
	next_responder: Any = field(default=None, repr=False)

	def __post_init__(self) -> None:
		self.children = list(self.children)
		for child in self.children:
			if child.parent is not None and child.parent is not self:
				child.parent.remove_child(child)
			child.parent = self

	@classmethod
	def from_dict(cls, document: dict[str, Any]) -> 'AXElement':
		return build_tree(document)

	def add_child(self, *children: 'AXElement') -> 'AXElement':
		for child in children:
			if child.parent is not None and child.parent is not self:
				child.parent.remove_child(child)
			child.parent = self
			self.children.append(child)
		return self

	def remove_child(self, child: 'AXElement') -> None:
		self.children = [c for c in self.children if c is not child]
		if child.parent is self:
			child.parent = None

	@property
	def container_chain(self) -> list[Any]:
		chain: list[Any] = []
		seen = {id(self)}
		current = self.next_responder or self.parent
		while current is not None and id(current) not in seen:
			chain.append(current)
			seen.add(id(current))
			current = getattr(current, 'next_responder', None) or getattr(current, 'parent', None)
		return chain

	def walk(self) -> Iterator['AXElement']:
		"""Yield this element and all descendants, pre-order."""
		yield self
		for child in self.children:
			yield from child.walk()


class ElementSpec(BaseModel):
	"""Validated dict/JSON description of an element subtree."""

	model_config = ConfigDict(extra='forbid')

	kind: NodeKind = NodeKind.VIEW
	accessible: bool = False
	traits: list[str] = Field(default_factory=list)
	label: str | None = None
	value: str | None = None
	hint: str | None = None
	identifier: str | None = None
	actions: list[str] = Field(default_factory=list)

	text: str | None = None
	title: str | None = None
	attributed_title: str | None = None
	placeholder: str | None = None
	numeric_value: float | None = None
	date: datetime | None = None
	is_on: bool = False
	is_animating: bool = False

	children: list['ElementSpec'] = Field(default_factory=list)

	@field_validator('traits')
	@classmethod
	def validate_traits(cls, names: list[str]) -> list[str]:
		for name in names:
			if name.strip().upper() not in AXTrait.__members__:
				raise ValueError(f'Unknown accessibility trait: {name!r}')
		return names

	def to_element(self) -> AXElement:
		return AXElement(
			kind=self.kind,
			is_accessibility_element=self.accessible,
			traits=AXTrait.from_names(self.traits),
			accessibility_label=self.label,
			accessibility_value=self.value,
			accessibility_hint=self.hint,
			accessibility_identifier=self.identifier,
			custom_action_names=list(self.actions),
			text=self.text,
			title=self.title,
			attributed_title=self.attributed_title,
			placeholder=self.placeholder,
			numeric_value=self.numeric_value,
			date=self.date,
			is_on=self.is_on,
			is_animating=self.is_animating,
			children=[child.to_element() for child in self.children],
		)


def build_tree(document: dict[str, Any] | ElementSpec) -> AXElement:
	"""Build an `AXElement` tree from a nested dict. Raises `pydantic.ValidationError` on bad input."""
	spec = document if isinstance(document, ElementSpec) else ElementSpec.model_validate(document)
	return spec.to_element()


def load_tree_json(data: str | bytes) -> AXElement:
	return ElementSpec.model_validate_json(data).to_element()


T = TypeVar('T')


@dataclass(frozen=True)
class QueryResult(Generic[T]):
	"""Either a value or an `AxQueryError`, never both."""

	value: T | None = None
	error: AxQueryError | None = None

	@classmethod
	def success(cls, value: T) -> 'QueryResult[T]':
		return cls(value=value)

	@classmethod
	def failure(cls, error: AxQueryError) -> 'QueryResult[T]':
		return cls(error=error)

	@property
	def is_success(self) -> bool:
		return self.error is None

	@property
	def resolved_error(self) -> AxQueryError | None:
		return self.error

	@property
	def resolved_node(self) -> Any:
		"""The matched node, or None for failures and empty `query_by` results."""
		if self.error is not None or isinstance(self.value, list):
			return None
		return self.value

	@property
	def resolved_nodes(self) -> list[Any] | None:
		if self.error is not None or not isinstance(self.value, list):
			return None
		return self.value

	def unwrap(self) -> T:
		"""Return the value or raise the carried error."""
		if self.error is not None:
			raise self.error
		return self.value  # type: ignore[return-value]
