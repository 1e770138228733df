# canteen_data.py

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import requests

import config
from errors import ServiceError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Canteen:
    id: int
    name: str
    city: str | None = None
    address: str | None = None
    coordinates: tuple[float, float] | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Canteen":
        coords = data.get('coordinates')
        return cls(
            id=int(data['id']),
            name=data.get('name') or '',
            city=data.get('city'),
            address=data.get('address'),
            coordinates=tuple(coords) if coords else None,
        )


@dataclass(frozen=True)
class Meal:
    id: int
    name: str
    category: str | None = None
    prices: dict[str, float | None] = field(default_factory=dict)
    notes: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Meal":
        return cls(
            id=int(data['id']),
            name=data.get('name') or '',
            category=data.get('category'),
            prices=_parse_prices(data.get('prices') or {}),
            notes=tuple(data.get('notes') or ()),
        )


def _parse_prices(raw: dict[str, Any]) -> dict[str, float | None]:
    """Prices per group as floats; anything else raises TypeError/ValueError."""
    prices = {}
    for group, value in dict(raw).items():
        if value is None:
            prices[group] = None
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            prices[group] = float(value)
        else:
            raise ValueError(f"Price for {group!r} is not a number: {value!r}")
    return prices


def _get(path: str, params: dict[str, Any] | None = None, allow_404: bool = False):
    """GET an OpenMensa endpoint and return (json, response).

    Returns (None, response) for a 404 when `allow_404` is set.
    """
    url = f"{config.OPENMENSA_API_URL}{path}"
    _logger.debug("GET %s %s", url, params or '')
    try:
        response = requests.get(url, params=params, timeout=config.REQUEST_TIMEOUT)
        if allow_404 and response.status_code == 404:
            return None, response
        response.raise_for_status()
        return response.json(), response
    except requests.RequestException as e:
        raise ServiceError(f"Error fetching {url}: {e}") from e
    except ValueError as e:
        raise ServiceError(f"Invalid JSON from {url}: {e}") from e


def _parse_canteens(payload) -> list[Canteen]:
    try:
        return [Canteen.from_json(c) for c in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise ServiceError(f"Unexpected canteen data: {e}") from e


def _all_canteens() -> list[Canteen]:
    """Walk every page of the canteen directory."""
    canteens: list[Canteen] = []
    page = 1
    while True:
        payload, response = _get('/canteens', {'page': page, 'limit': config.PAGE_LIMIT})
        canteens.extend(_parse_canteens(payload))
        try:
            total_pages = int(response.headers.get('X-Total-Pages', page))
        except ValueError:
            total_pages = page
        if page >= total_pages or not payload:
            return canteens
        page += 1


def get_canteen_by_id(canteen_id: int) -> Canteen | None:
    payload, _ = _get(f'/canteens/{canteen_id}', allow_404=True)
    if payload is None:
        return None
    return _parse_canteens([payload])[0]


def get_canteens_by_location(location: str) -> list[Canteen]:
    """Return canteens whose city or address contains `location` (case-insensitive)."""
    needle = location.strip().lower()
    out = []
    for c in _all_canteens():
        haystack = f"{c.city or ''} {c.address or ''}".lower()
        if needle in haystack:
            out.append(c)
    return out


def get_canteens_by_ids(canteen_ids: Sequence[int]) -> list[Canteen]:
    """Batch lookup, returned in the order of `canteen_ids`."""
    if not canteen_ids:
        return []
    ids_param = ','.join(str(i) for i in canteen_ids)
    payload, _ = _get('/canteens', {'ids': ids_param, 'limit': config.PAGE_LIMIT})
    by_id = {c.id: c for c in _parse_canteens(payload)}
    out = []
    for canteen_id in canteen_ids:
        canteen = by_id.get(canteen_id)
        if canteen is None:
            _logger.warning("Canteen %s is unknown to OpenMensa, skipping", canteen_id)
            continue
        out.append(canteen)
    return out


def get_meals(canteen: Canteen, date_str: str) -> list[Meal]:
    """Meals served by `canteen` on `date_str` (YYYY-MM-DD).

    OpenMensa answers 404 for days without a published menu; that is an empty day.
    """
    payload, _ = _get(f'/canteens/{canteen.id}/days/{date_str}/meals', allow_404=True)
    if payload is None:
        return []
    try:
        return [Meal.from_json(m) for m in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise ServiceError(f"Unexpected meal data: {e}") from e
