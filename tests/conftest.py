import itertools

import pytest

from placement_admin.data import seed
from placement_admin.data.schemas import (
    APPLICATION_SCHEMA,
    EXAM_DATA_SCHEMA,
    INTERNSHIP_SCHEMA,
    STAFF_SCHEMA,
)
from placement_admin.data.store import EntityCollection


@pytest.fixture
def id_factory():
    counter = itertools.count(1000)
    return lambda: str(next(counter))


@pytest.fixture
def applications(id_factory):
    return EntityCollection(APPLICATION_SCHEMA, seed.APPLICATIONS, id_factory=id_factory)


@pytest.fixture
def exam_data(id_factory):
    return EntityCollection(EXAM_DATA_SCHEMA, seed.EXAM_DATA, id_factory=id_factory)


@pytest.fixture
def internships(id_factory):
    return EntityCollection(INTERNSHIP_SCHEMA, seed.INTERNSHIPS, id_factory=id_factory)


@pytest.fixture
def staff(id_factory):
    return EntityCollection(STAFF_SCHEMA, seed.STAFF, id_factory=id_factory)
