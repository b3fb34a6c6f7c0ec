"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ANIFETCH_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ANIFETCH_.
    Exemple : ANIFETCH_REQUEST_INTERVAL=2.5
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIFETCH_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API Jikan
    jikan_base_url: str = Field(default="https://api.jikan.moe/v4")
    media_type: str = Field(default="anime")
    request_interval: float = Field(default=1.0, ge=0)
    request_timeout: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/anifetch.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("jikan_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le slash final pour concaténer les chemins proprement."""
        return v.rstrip("/")
