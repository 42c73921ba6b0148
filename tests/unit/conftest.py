import pytest
from pojopoly import ImplementationRegistry, capability_key


@pytest.fixture(name='registry')
def _fixture_registry():
    """A registry isolated from the process-wide default, so tests can't leak registrations."""
    return ImplementationRegistry()


@pytest.fixture(name='cap_key')
def _fixture_cap_key():
    return capability_key('Test.Capability')
