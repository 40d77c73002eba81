import httpx
import pytest

from clockify_connector.core.httpx_client import HTTPClient

BASE_URL = "https://api.clockify.test/api/v1"
API_KEY = "FAKE_KEY"


class TrackingStream(httpx.SyncByteStream):
    """Body de réponse qui compte ses fermetures."""

    def __init__(self, content: bytes = b""):
        self._content = content
        self.close_calls = 0

    def __iter__(self):
        yield self._content

    def close(self):
        self.close_calls += 1


@pytest.fixture
def make_client():
    """
    Fabrique un HTTPClient dont le réseau est remplacé par httpx.MockTransport.
    Le handler reçoit la requête telle qu'envoyée (X-Api-Key compris).
    """
    clients = []

    def _make(handler, **kwargs):
        client = HTTPClient(BASE_URL, API_KEY, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    """Client dont le transport ne doit jamais être appelé."""

    def fail(request):
        raise AssertionError(f"Appel réseau inattendu: {request.method} {request.url}")

    return make_client(fail)


@pytest.fixture
def tracking_stream():
    """Retourne la classe TrackingStream, pour construire des réponses mockées."""
    return TrackingStream
