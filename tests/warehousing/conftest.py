import pytest
from protean import current_domain

from warehousing.location import reset_location_resolver


@pytest.fixture(scope="session")
def warehousing_domain():
    from warehousing.domain import warehousing
    from warehousing.utils.db import drop_db, setup_db

    warehousing.init()
    setup_db(warehousing)
    yield warehousing
    drop_db(warehousing)


@pytest.fixture(autouse=True)
def _ctx(warehousing_domain):
    with warehousing_domain.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()

    reset_location_resolver()
