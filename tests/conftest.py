"""Shared test fixtures for vertex-coloring."""

import pytest

from vertex_coloring.instances import (
    sample_5,
    myciel3,
    myciel4,
    greedy_adversarial_7,
    KNOWN_CHROMATIC,
)


@pytest.fixture
def graph_sample5():
    """5-vertex sample graph (chromatic number 3)."""
    return sample_5()


@pytest.fixture
def graph_myciel3():
    return myciel3()


@pytest.fixture
def graph_myciel4():
    return myciel4()


@pytest.fixture
def graph_adversarial():
    return greedy_adversarial_7()


@pytest.fixture(params=list(KNOWN_CHROMATIC.keys()))
def named_instance(request):
    """Parametrized fixture yielding (name, graph, expected_chromatic_number)."""
    from vertex_coloring.instances import FIXED_INSTANCES

    name = request.param
    return name, FIXED_INSTANCES[name](), KNOWN_CHROMATIC[name]
