from unittest.mock import MagicMock, patch

import pytest
import requests

import config
import facts
import meme
from errors import ServiceError


def _response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


@patch("meme.requests.get")
def test_get_meme(mock_get):
    mock_get.return_value = _response({
        "postLink": "https://redd.it/abc",
        "subreddit": "ProgrammerHumor",
        "title": "It works on my machine",
        "url": "https://i.redd.it/abc.png",
    })
    result = meme.get_meme()
    assert result.url == "https://i.redd.it/abc.png"
    assert result.subreddit == "ProgrammerHumor"
    assert mock_get.call_args.args[0] == config.MEME_API_URL


@patch("meme.requests.get")
def test_get_meme_without_url(mock_get):
    mock_get.return_value = _response({"code": 530, "message": "overloaded"})
    with pytest.raises(ServiceError):
        meme.get_meme()


@patch("meme.requests.get", side_effect=requests.ConnectionError("down"))
def test_get_meme_connection_error(mock_get):
    with pytest.raises(ServiceError):
        meme.get_meme()


@patch("facts.requests.get")
def test_random_fact_uses_german(mock_get):
    mock_get.return_value = _response({"id": "x", "text": "Schnecken können drei Jahre schlafen.", "language": "de"})
    fact = facts.get_random_fact()

    assert fact.text == "Schnecken können drei Jahre schlafen."
    assert mock_get.call_args.args[0] == f"{config.FACTS_API_URL}/random"
    assert mock_get.call_args.kwargs["params"] == {"language": "de"}


@patch("facts.requests.get")
def test_daily_fact_endpoint(mock_get):
    mock_get.return_value = _response({"text": "Fakt des Tages"})
    assert facts.get_daily_fact().text == "Fakt des Tages"
    assert mock_get.call_args.args[0] == f"{config.FACTS_API_URL}/today"


@patch("facts.requests.get")
def test_fact_http_error(mock_get):
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("502")
    mock_get.return_value = response
    with pytest.raises(ServiceError):
        facts.get_random_fact()
