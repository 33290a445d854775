import pytest

from sprig.builtin.env_builtin import register
from sprig.interpreter import Interpreter
from sprig.runtime_context import is_verbose, set_verbose
from sprig.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _restore_verbose():
    # The verbose toggle is process-global; keep tests independent of each other.
    saved = is_verbose()
    set_verbose(False)
    yield
    set_verbose(saved)
