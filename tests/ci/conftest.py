"""Shared fixtures: small accessibility trees and element factories."""

import os

# keep the ax_query logger propagating so caplog sees its records
os.environ['AX_QUERY_SETUP_LOGGING'] = 'false'

import pytest

from ax_query.views import AXElement, AXTrait, NodeKind


def _button(label: str | None = None, enabled: bool = True, traits: AXTrait = AXTrait.BUTTON, **kwargs) -> AXElement:
	return AXElement(
		kind=NodeKind.BUTTON,
		is_accessibility_element=True,
		accessibility_label=label,
		traits=traits if enabled else traits | AXTrait.NOT_ENABLED,
		**kwargs,
	)


@pytest.fixture
def make_button():
	return _button


@pytest.fixture
def make_element():
	def factory(kind: NodeKind = NodeKind.VIEW, accessible: bool = True, **kwargs) -> AXElement:
		return AXElement(kind=kind, is_accessibility_element=accessible, **kwargs)

	return factory


@pytest.fixture
def login_form():
	"""Email and password fields plus a submit button, all explicitly labelled."""
	email = AXElement(
		kind=NodeKind.TEXT_FIELD,
		is_accessibility_element=True,
		accessibility_label='Email',
		accessibility_identifier='email-input',
	)
	password = AXElement(
		kind=NodeKind.TEXT_FIELD,
		is_accessibility_element=True,
		accessibility_label='Password',
		accessibility_identifier='password-input',
	)
	submit = _button('Submit Login', accessibility_identifier='login-submit')
	form = AXElement(children=[email, password, submit])
	return form


@pytest.fixture
def todo_list():
	"""Three checkbox-style buttons, the middle one selected."""
	items = [
		_button('Buy milk', custom_action_names=['Delete']),
		_button('Walk dog', traits=AXTrait.BUTTON | AXTrait.SELECTED, custom_action_names=['Delete', 'Edit']),
		_button('Write report'),
	]
	header = AXElement(
		kind=NodeKind.LABEL,
		is_accessibility_element=True,
		text='Todo',
		traits=AXTrait.HEADER,
	)
	return AXElement(children=[header, *items])
