# clockify_connector/core/httpx_client.py
import json
from typing import Any, Optional, Protocol, Tuple

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from clockify_connector.core import config
from clockify_connector.core.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    MissingAPIKeyError,
    NotFoundError,
)
from clockify_connector.core.logger import get_logger
from clockify_connector.core.query import QueryAppender
from clockify_connector.core.schema import APIErrorModel
from clockify_connector.core.transport import ApiKeyTransport

log = get_logger(__name__)


class RequestLogger(Protocol):
    """Hook de log optionnel : un seul appel printf-style (un logging.Logger convient)."""

    def debug(self, msg: str, *args: Any) -> None:
        ...


class HTTPClient:
    """
    Client HTTP synchrone basé sur httpx pour l'API REST Clockify.

    - new_request() construit la requête (URL, query, body JSON, headers)
    - do() l'exécute, lit le body puis le décode en résultat typé ou en erreur

    La clé API est injectée par ApiKeyTransport sur chaque requête sortante.
    L'URL de base et la clé ne changent plus après la construction.
    """

    def __init__(
            self,
            base_url: str,
            api_key: str,
            *,
            logger: Optional[RequestLogger] = None,
            transport: Optional[httpx.BaseTransport] = None,
            timeout: Optional[float] = None,
    ):
        """
        :param base_url: ex "https://api.clockify.me/api/v1"
        :param api_key: clé envoyée dans X-Api-Key, obligatoire
        :param logger: hook de log des requêtes/réponses (None = pas de log)
        :param transport: transport réseau sous-jacent (httpx.HTTPTransport par défaut)
        :param timeout: timeout du client httpx, en secondes (None = pas de timeout)
        """
        if not api_key:
            raise MissingAPIKeyError()

        try:
            self._base_url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"URL de base invalide '{base_url}': {e}") from e

        self.logger = logger
        self._client = httpx.Client(
            transport=ApiKeyTransport(
                next_transport=transport if transport is not None else httpx.HTTPTransport(),
                api_key=api_key,
            ),
            timeout=timeout,
        )
        log.debug("HTTPClient initialisé pour %s", self._base_url)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "HTTPClient":
        """
        Construit le client depuis l'environnement (.env inclus) :
        CLOCKIFY_TOKEN, CLOCKIFY_BASE_URL et CLOCKIFY_DEBUG.
        """
        if config.is_debug_enabled() and "logger" not in kwargs:
            kwargs["logger"] = get_logger("clockify_connector.http", level="DEBUG")

        return cls(config.get_clockify_base_url(), config.get_clockify_token(), **kwargs)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def _logf(self, fmt: str, *args: Any) -> None:
        if self.logger is None:
            return
        self.logger.debug(fmt, *args)

    # ---------------- Construction de la requête ----------------

    def new_request(self, method: str, uri: str, body: Any = None) -> httpx.Request:
        """
        Construit une requête prête à être envoyée par do(). Aucun I/O réseau.

        :param method: méthode HTTP ("GET", "POST", ...)
        :param uri: chemin relatif à l'URL de base (ex: "workspaces/abc/projects")
        :param body: valeur sérialisable en JSON, ou None.
            Si elle implémente QueryAppender, elle complète la query string.
            Pour un GET, elle n'est jamais encodée dans le body.
        """
        path = "/".join([self._base_url.path.rstrip("/"), uri.lstrip("/")])
        url = self._base_url.join(path)

        if isinstance(body, QueryAppender):
            url = body.append_to_query(url)

        if method == "GET":
            body = None

        content = None
        if body is not None:
            content = self._encode_body(body)
            self._logf("request body: %s", content.decode("utf-8"))

        headers = {"Accept": "application/json"}
        if content is not None:
            headers["Content-Type"] = "application/json"

        return httpx.Request(method, url, content=content, headers=headers)

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        # NaN / Infinity ne sont pas du JSON valide : refusés à l'encodage
        try:
            payload = to_jsonable_python(body, by_alias=True)
            return json.dumps(payload, allow_nan=False, separators=(",", ":")).encode("utf-8")
        except ValueError as e:  # PydanticSerializationError en hérite
            raise DecodeError(f"Impossible d'encoder le body de la requête en JSON: {e}") from e

    @staticmethod
    def _first_json_value(body: bytes) -> Any:
        """Décode la première valeur JSON du body, la suite est ignorée."""
        value, _ = json.JSONDecoder().raw_decode(body.decode("utf-8").lstrip())
        return value

    # ---------------- Exécution et décodage ----------------

    def do(self, request: httpx.Request, result_type: Any = None) -> Tuple[httpx.Response, Any]:
        """
        Exécute la requête et décode la réponse.

        :param request: requête construite par new_request()
        :param result_type: type attendu pour le body en succès (modèle pydantic,
            list[Model], dict, ...). None = body ignoré.
        :return: (response, résultat décodé ou None)
        :raises httpx.TransportError: erreur réseau, non encapsulée
        :raises NotFoundError: HTTP 404, quel que soit le body
        :raises APIError: statut hors succès avec un body {"message", "code"}
        :raises DecodeError: body de réponse illisible
        """
        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as e:
            log.warning("Erreur de transport sur %s %s: %s", request.method, request.url, e)
            raise

        # Lecture complète du body avant la fermeture
        try:
            body = response.read()
        finally:
            response.close()

        status = response.status_code
        self._logf('url: %s, status: %d, body: "%s"', request.url, status, body.decode("utf-8", errors="replace"))

        if status == 404:
            raise NotFoundError(response)

        # 300 est volontairement traité comme un succès
        if status < 200 or status > 300:
            try:
                value = self._first_json_value(body)
                # un body `null` donne une erreur vide
                payload = APIErrorModel() if value is None else APIErrorModel.model_validate(value)
            except ValueError as e:  # JSONDecodeError, UnicodeDecodeError et ValidationError en héritent
                raise DecodeError(f"Réponse d'erreur illisible (HTTP {status}): {e}", response) from e
            raise APIError(payload.message, payload.code, response)

        if result_type is None or not body:
            return response, None

        try:
            value = self._first_json_value(body)
            if value is None:
                return response, None
            result = TypeAdapter(result_type).validate_python(value)
        except ValueError as e:
            raise DecodeError(f"Réponse illisible pour {result_type!r}: {e}", response) from e

        return response, result

    # ---------------- Context manager ----------------

    def close(self) -> None:
        """Ferme le client httpx et le transport sous-jacent."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
