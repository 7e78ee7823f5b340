"""Tests for the example registry."""

import pytest

from solid_examples.domain.core.exceptions import ExampleNotFoundError
from solid_examples.principles import EXAMPLES, load_example


def test_registry_follows_acronym_order():
    assert list(EXAMPLES) == ["srp", "ocp", "lsp", "isp", "dip"]


@pytest.mark.parametrize("name", list(EXAMPLES))
def test_every_example_is_runnable(name):
    module = load_example(name)

    assert callable(module.run)
    assert callable(module.main)


def test_load_example_is_case_insensitive():
    assert load_example("OCP").__name__ == "solid_examples.principles.ocp"


def test_unknown_example():
    with pytest.raises(ExampleNotFoundError) as exc_info:
        load_example("xyz")

    assert exc_info.value.name == "xyz"
    assert exc_info.value.available == list(EXAMPLES)
    assert "srp" in str(exc_info.value)
