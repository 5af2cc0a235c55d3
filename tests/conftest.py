import pytest

from kappa.builtin.env_builtin import register
from kappa.interpreter import Interpreter
from kappa.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global frame with every primitive registered."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
