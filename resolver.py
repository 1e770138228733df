# resolver.py

"""Decide which canteens a report covers.

The user selects canteens by id, by free-text location, or not at all, in
which case the configured default list is used. Exactly one of these applies
per invocation.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import canteen_data
from canteen_data import Canteen
from errors import CanteenNotFound, ConflictingSelectors, LookupFailed, ServiceError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ById:
    canteen_id: int


@dataclass(frozen=True)
class ByLocation:
    text: str


@dataclass(frozen=True)
class Default:
    pass


Selection = ById | ByLocation | Default


def selection_from_inputs(canteen_id: int | None = None, location: str | None = None) -> Selection:
    """Build the selection from raw CLI/bot inputs; both set is an error."""
    if canteen_id is not None and location is not None:
        raise ConflictingSelectors()
    if canteen_id is not None:
        return ById(canteen_id)
    if location is not None:
        return ByLocation(location)
    return Default()


def resolve_canteens(selection: Selection, defaults: Sequence[int], directory=canteen_data) -> list[Canteen]:
    """Look up the canteens for `selection`.

    `directory` provides get_canteen_by_id, get_canteens_by_location and
    get_canteens_by_ids; the OpenMensa client module is used unless a stub
    is passed in.
    """
    if isinstance(selection, ById):
        _logger.debug("Resolving canteen by id %s", selection.canteen_id)
        try:
            canteen = directory.get_canteen_by_id(selection.canteen_id)
        except ServiceError as e:
            raise LookupFailed(str(e)) from e
        if canteen is None:
            raise CanteenNotFound(selection.canteen_id)
        return [canteen]

    if isinstance(selection, ByLocation):
        _logger.debug("Resolving canteens near %r", selection.text)
        try:
            return list(directory.get_canteens_by_location(selection.text))
        except ServiceError as e:
            raise LookupFailed(str(e)) from e

    if isinstance(selection, Default):
        _logger.debug("Resolving default canteens %s", list(defaults))
        try:
            return list(directory.get_canteens_by_ids(list(defaults)))
        except ServiceError as e:
            raise LookupFailed(str(e)) from e

    raise TypeError(f"Unknown selection {selection!r}")
