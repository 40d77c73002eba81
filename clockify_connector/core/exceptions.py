# clockify_connector/core/exceptions.py
from typing import Optional

import httpx


class ClockifyError(Exception):
    """Erreur de base du client Clockify"""
    pass


class ConfigurationError(ClockifyError):
    """Configuration invalide du client (clé API absente, URL de base invalide)."""
    pass


class MissingAPIKeyError(ConfigurationError):
    """La clé API (X-Api-Key) n'a pas été renseignée."""

    def __init__(self, message: str = "api Key must be informed"):
        super().__init__(message)


class DecodeError(ClockifyError):
    """
    Échec d'encodage JSON du body de la requête, ou de décodage
    du body de la réponse (succès ou erreur).
    """

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


class NotFoundError(ClockifyError):
    """
    Réponse HTTP 404.
    Le body n'est jamais décodé : on teste ce cas par le type, pas par le message.
    """

    message = "Nothing was found"

    def __init__(self, response: Optional[httpx.Response] = None):
        super().__init__(self.message)
        self.response = response


class APIError(ClockifyError):
    """Erreur renvoyée par l'API : {"message": ..., "code": ...}"""

    def __init__(self, message: str, code: int, response: Optional[httpx.Response] = None):
        super().__init__(message, code)
        self.message = message
        self.code = code
        self.response = response

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code})"
