import pytest

from render_engine.css import Stylesheet
from render_engine.dom import Document


@pytest.fixture
def document():
    """Empty html/head/body document."""
    return Document()


@pytest.fixture
def stylesheet():
    return Stylesheet()


def append(document, parent, tag_name, **attributes):
    """Create an element under parent; 'class_' maps to the class attribute."""
    pairs = [(key.rstrip('_'), value) for key, value in attributes.items()]
    element = document.create_element(tag_name, pairs)
    parent.append_child(element)
    return element
