"""
Integration tests against a running Dgraph alpha.

Tests cover:
- Installing the schema on an empty database
- Idempotent re-creation
- Dropping all data and schema
- Adding and reading back an affix

These drop everything in the target database. Run them against a throwaway
container, e.g. `docker run -p 8080:8080 dgraph/standalone`.
"""

import os

import pytest

from lexicon_api.clients.dgraph_client import DgraphClient
from lexicon_api.core.config import get_dgraph_config
from lexicon_api.core.deadline import Deadline
from lexicon_api.models.models import AffixType, NewAffix, Tongue
from lexicon_api.services.affix_service import AffixExistsError, AffixService
from lexicon_api.services.domain.schema import SchemaSynchronizer, ValidationOutcome

INTEGRATION_ENABLED = os.environ.get("DGRAPH_INTEGRATION", "0") == "1"
pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not INTEGRATION_ENABLED, reason="Dgraph integration tests disabled. Set DGRAPH_INTEGRATION=1 to enable."
    ),
]

TIMEOUT = 60


@pytest.fixture(scope="module")
def dgraph_client():
    config = get_dgraph_config()
    client = DgraphClient(config.URL, auth_token=config.AUTH_TOKEN, timeout=config.TIMEOUT)
    yield client
    client.close()


@pytest.fixture
def synchronizer(dgraph_client):
    """Synchronizer on an emptied database"""
    synchronizer = SchemaSynchronizer(dgraph_client)
    synchronizer.drop_all(Deadline(timeout=TIMEOUT))
    return synchronizer


class TestSchemaLifecycle:
    """Schema create/drop cycle on a live database"""

    def test_empty_database_has_no_schema(self, synchronizer):
        assert synchronizer.status(Deadline(timeout=TIMEOUT)) == ValidationOutcome.NO_SCHEMA

    def test_create_installs_schema(self, synchronizer):
        synchronizer.create(Deadline(timeout=TIMEOUT))

        assert synchronizer.status(Deadline(timeout=TIMEOUT)) == ValidationOutcome.MATCHES

    def test_create_twice(self, synchronizer):
        """A second create finds the schema in place and returns"""
        synchronizer.create(Deadline(timeout=TIMEOUT))
        synchronizer.create(Deadline(timeout=TIMEOUT))

        assert synchronizer.status(Deadline(timeout=TIMEOUT)) == ValidationOutcome.MATCHES

    def test_drop_all_after_create(self, synchronizer):
        synchronizer.create(Deadline(timeout=TIMEOUT))
        synchronizer.drop_all(Deadline(timeout=TIMEOUT))

        assert synchronizer.status(Deadline(timeout=TIMEOUT)) == ValidationOutcome.NO_SCHEMA


class TestAffixRoundTrip:
    """Affix writes through the generated GraphQL API"""

    def test_add_and_read_affix(self, synchronizer, dgraph_client):
        synchronizer.create(Deadline(timeout=TIMEOUT))
        service = AffixService(dgraph_client)

        added = service.add(NewAffix(
            morpheme="re", meaning=["again"], tongue=Tongue.ENGLISH, affix_type=[AffixType.PREFIX]
        ))

        assert service.one(added.id).morpheme == "re"
        assert service.one_by_morpheme("re").id == added.id

        with pytest.raises(AffixExistsError):
            service.add(NewAffix(morpheme="re"))
