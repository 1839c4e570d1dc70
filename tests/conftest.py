import pytest

from imgopts.adapters.defaults import reset_default_resolver_defaults

from fakes import make_defaults


@pytest.fixture
def defaults():
    return make_defaults()


@pytest.fixture(autouse=True)
def _reset_process_defaults():
    reset_default_resolver_defaults()
    yield
    reset_default_resolver_defaults()
