# facts.py

import logging
from dataclasses import dataclass

import requests

import config
from errors import ServiceError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fact:
    text: str
    language: str | None = None
    source: str | None = None
    permalink: str | None = None


def _fetch_fact(kind: str, language: str) -> Fact:
    url = f"{config.FACTS_API_URL}/{kind}"
    _logger.debug("GET %s language=%s", url, language)
    try:
        response = requests.get(url, params={'language': language}, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
        return Fact(
            text=data['text'],
            language=data.get('language'),
            source=data.get('source'),
            permalink=data.get('permalink'),
        )
    except requests.RequestException as e:
        raise ServiceError(f"Error fetching {kind} fact: {e}") from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ServiceError(f"Unexpected fact data: {e}") from e


def get_random_fact(language: str = config.FACT_LANGUAGE) -> Fact:
    return _fetch_fact('random', language)


def get_daily_fact(language: str = config.FACT_LANGUAGE) -> Fact:
    """The fact of the day; stays the same for the whole day."""
    return _fetch_fact('today', language)
