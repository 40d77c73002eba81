# clockify_connector/core/transport.py
import httpx

API_KEY_HEADER = "X-Api-Key"


class ApiKeyTransport(httpx.BaseTransport):
    """
    Transport httpx qui ajoute le header X-Api-Key à chaque requête sortante,
    puis délègue au transport encapsulé.

    Pas de retry, pas de timeout, pas d'inspection de la réponse.
    Les headers de la requête sont modifiés en place.
    """

    def __init__(self, next_transport: httpx.BaseTransport, api_key: str):
        self._next = next_transport
        self._api_key = api_key

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.headers[API_KEY_HEADER] = self._api_key
        return self._next.handle_request(request)

    def close(self) -> None:
        self._next.close()
