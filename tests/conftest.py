import pytest

from canteen_data import Canteen, Meal
from errors import ServiceError


class StubDirectory:
    """Stands in for the canteen_data module and records every call."""

    def __init__(self, canteens=(), meals=None, by_id=None, failing=(), lookup_error=None):
        self.canteens = list(canteens)
        self.meals = meals or {}
        self.by_id = by_id or {}
        self.failing = set(failing)
        self.lookup_error = lookup_error
        self.calls = []

    def _lookup(self, name, *args):
        self.calls.append((name,) + args)
        if self.lookup_error is not None:
            raise ServiceError(self.lookup_error)

    def get_canteen_by_id(self, canteen_id):
        self._lookup('by_id', canteen_id)
        return self.by_id.get(canteen_id)

    def get_canteens_by_location(self, location):
        self._lookup('by_location', location)
        return list(self.canteens)

    def get_canteens_by_ids(self, canteen_ids):
        self._lookup('by_ids', list(canteen_ids))
        return [c for c in self.canteens if c.id in canteen_ids]

    def get_meals(self, canteen, date_str):
        self.calls.append(('meals', canteen.id, date_str))
        if canteen.id in self.failing:
            raise ServiceError(f"503 Service Unavailable for canteen {canteen.id}")
        return self.meals.get(canteen.id, [])


@pytest.fixture
def stub_directory():
    return StubDirectory


@pytest.fixture
def canteens():
    return [
        Canteen(id=1, name="Mensa Nord", city="Berlin"),
        Canteen(id=2, name="Mensa Süd", city="Berlin"),
        Canteen(id=3, name="Cafeteria Ost", city="Potsdam"),
    ]


@pytest.fixture
def lasagne():
    return Meal(
        id=10,
        name="Vegetarische Lasagne",
        category="Hauptgericht",
        prices={'students': 2.5, 'employees': 4.1, 'others': None},
        notes=('vegetarisch', 'mit Milch'),
    )
