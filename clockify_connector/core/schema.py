from pydantic import BaseModel, ConfigDict, Field


class APIErrorModel(BaseModel):
    """Payload d'erreur renvoyé par l'API pour un statut hors [200, 300]."""
    message: str    = Field("", description="Message lisible de l'erreur")
    code: int       = Field(0, description="Code numérique de l'erreur")

    model_config = ConfigDict(extra="ignore")
