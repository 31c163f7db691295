"""
Configuration de trakt-api via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TRAKT_,
et peut optionnellement être fournie via un fichier .env.

Seul client_id est nécessaire pour les endpoints publics ; client_secret et
access_token activent les échanges OAuth et les endpoints authentifiés.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trakt_api.utils.constants import API_URL, SITE_URL, STAGING_API_URL, STAGING_SITE_URL


class Settings(BaseSettings):
    """Paramètres du client avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TRAKT_.
    Exemple : TRAKT_CLIENT_ID=xxx TRAKT_STAGING=true
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAKT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identifiants de l'application (https://trakt.tv/oauth/applications)
    client_id: str = Field(default="")
    client_secret: Optional[str] = Field(default=None)
    access_token: Optional[str] = Field(default=None)

    # Environnement
    staging: bool = Field(default=False)
    base_url: Optional[str] = Field(default=None)

    # HTTP
    timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=1, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/trakt-api.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return str(v).upper()

    @property
    def api_url(self) -> str:
        """URL de l'API : base_url explicite, sinon production ou staging."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return STAGING_API_URL if self.staging else API_URL

    @property
    def site_url(self) -> str:
        """URL du site utilisée pour la page d'autorisation OAuth."""
        return STAGING_SITE_URL if self.staging else SITE_URL

    @property
    def auth_enabled(self) -> bool:
        """Vérifie si un access token est configuré."""
        return bool(self.access_token)
