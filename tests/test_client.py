import pytest
import requests
from hangmanai.service import AlreadyTried, GameServiceError, GameStart, GuessOutcome, HangmanClient

URL = "http://hangman.test/hangman"


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session; returns queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def _next(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        return self.responses.pop(0)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)

    def put(self, url, **kwargs):
        return self._next("PUT", url, **kwargs)

    def close(self):
        self.closed = True


def test_start_game():
    s = FakeSession(FakeResponse(201, {"hangman": "_____", "token": "abc"}))
    client = HangmanClient(URL, timeout=5, session=s)
    assert client.start_game() == GameStart("_____", "abc")
    assert s.requests == [("POST", URL, {"timeout": 5})]


def test_check_guess_sends_form_fields():
    s = FakeSession(FakeResponse(200, {"hangman": "_a___", "correct": True, "token": "def"}))
    client = HangmanClient(URL, timeout=5, session=s)
    assert client.check_guess("a", "abc") == GuessOutcome("a", True, "_a___", "def")
    method, url, kwargs = s.requests[0]
    assert method == "PUT" and url == URL
    assert kwargs["data"] == {"letter": "a", "token": "abc"}


def test_check_guess_not_modified_is_already_tried():
    s = FakeSession(FakeResponse(304))
    assert HangmanClient(URL, session=s).check_guess("e", "abc") == AlreadyTried("e")


def test_http_errors_propagate():
    s = FakeSession(FakeResponse(500, {"error": "boom"}))
    with pytest.raises(requests.HTTPError):
        HangmanClient(URL, session=s).check_guess("e", "abc")


@pytest.mark.parametrize("payload", [None, ["_____"], {"token": "abc"}])
def test_malformed_reply(payload):
    s = FakeSession(FakeResponse(200, payload))
    with pytest.raises(GameServiceError):
        HangmanClient(URL, session=s).start_game()


def test_context_manager_closes_session():
    s = FakeSession()
    with HangmanClient(URL, session=s):
        pass
    assert s.closed
