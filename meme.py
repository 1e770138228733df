# meme.py

import logging
from dataclasses import dataclass

import requests

import config
from errors import ServiceError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Meme:
    title: str
    url: str
    post_link: str | None = None
    subreddit: str | None = None


def get_meme() -> Meme:
    """Fetch a random meme from meme-api.com."""
    _logger.debug("GET %s", config.MEME_API_URL)
    try:
        response = requests.get(config.MEME_API_URL, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
        return Meme(
            title=data.get('title', ''),
            url=data['url'],
            post_link=data.get('postLink'),
            subreddit=data.get('subreddit'),
        )
    except requests.RequestException as e:
        raise ServiceError(f"Error fetching meme: {e}") from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ServiceError(f"Unexpected meme data: {e}") from e
