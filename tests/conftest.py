import pytest

from parsley.context import Context


@pytest.fixture
def ctx():
    """Fresh context with the standard library loaded."""
    return Context.base()


@pytest.fixture
def core_ctx():
    """Context with only the special forms."""
    return Context()


@pytest.fixture(autouse=True)
def _no_prelude_env(monkeypatch):
    # Tests that need a prelude path set it explicitly
    monkeypatch.delenv("PARSLEY_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("PARSLEY_RECURSION_LIMIT", raising=False)
