import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def shoppingmall_bed():
    from shoppingmall.domain import shoppingmall

    bed = DomainFixture(shoppingmall)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shoppingmall_bed):
    with shoppingmall_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()
