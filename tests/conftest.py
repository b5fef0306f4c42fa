"""Shared fixtures: a small Doctor entity and an in-memory collection of it."""
import dataclasses
import uuid
from datetime import datetime
from typing import Annotated

import pytest

from listquery.application.search import InMemoryQueryable
from listquery.kernel.fields import EntitySchema, FieldType, SchemaRegistry
from listquery.kernel.time import FrozenClock

NOW = datetime(2024, 5, 15, 12, 0, 0)


@dataclasses.dataclass
class Doctor:
    id: int
    first_name: str
    last_name: str
    specialization: str
    external_id: uuid.UUID
    rating: float | None = None
    license_no: Annotated[int, FieldType.INT64] = 0
    years: int | None = None
    active: bool = True
    created_date: datetime | None = None
    valid_from: datetime | None = None
    valid_to: datetime | None = None
    is_deleted: bool = False
    tags: list[str] = dataclasses.field(default_factory=list)

    @property
    def autocomplete_search(self) -> str:
        return f"{self.first_name} {self.last_name} {self.specialization}".lower()


def _uuid(n: int) -> uuid.UUID:
    return uuid.UUID(int=n)


@pytest.fixture
def doctor_schema() -> EntitySchema:
    return SchemaRegistry().get(Doctor)


@pytest.fixture
def doctors() -> list[Doctor]:
    return [
        Doctor(1, "Anna", "Nowak", "Cardiology", _uuid(1), rating=4.5, years=10,
               created_date=datetime(2024, 5, 1, 0, 0, 0),
               valid_from=datetime(2024, 1, 1), valid_to=datetime(2024, 12, 31)),
        Doctor(2, "Jan", "Kowalski", "Neurology", _uuid(2), rating=3.0, years=None, active=False,
               created_date=datetime(2024, 5, 1, 23, 59, 59, 999000),
               valid_from=datetime(2023, 1, 1), valid_to=datetime(2023, 12, 31)),
        Doctor(3, "Ewa", "Kowalska", "Cardiology", _uuid(3), rating=None, years=3,
               created_date=datetime(2024, 5, 2, 0, 0, 0),
               valid_from=datetime(2024, 6, 1), valid_to=datetime(2025, 6, 1)),
        Doctor(4, "Piotr", "Zielinski", "Oncology", _uuid(4), rating=5.0, years=20,
               created_date=None, valid_from=datetime(2024, 5, 1), valid_to=datetime(2024, 5, 31)),
        Doctor(5, "Marta", "Wisniewska", "Neurology", _uuid(5), rating=4.0, years=7,
               created_date=datetime(2024, 4, 30, 8, 0, 0), is_deleted=True),
    ]


@pytest.fixture
def doctor_query(doctors: list[Doctor], doctor_schema: EntitySchema) -> InMemoryQueryable[Doctor]:
    return InMemoryQueryable(doctors, doctor_schema)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW)
