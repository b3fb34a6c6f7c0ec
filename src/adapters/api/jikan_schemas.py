"""
Schemas pydantic des reponses brutes de l'API Jikan v4.

Ces modeles decrivent les trois charges utiles consommees par le pipeline:
- /anime/{id}/full       -> RawTitle
- /anime/{id}/characters -> list[RawCharacterEntry]
- /anime/{id}/staff      -> list[RawStaffEntry]

Chaque scalaire optionnel vaut None par defaut. Les listes restent None
quand l'API les omet: c'est le mapper qui decide de la politique
"liste absente = liste vide". Les champs supplementaires sont ignores.

Usage:
    raw = parse_raw_title(await client.fetch("/anime/52991/full"))
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.core.exceptions import MalformedResponseError


class RawModel(BaseModel):
    """Base commune: champs inconnus ignores, alias acceptes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RawMeta(RawModel):
    """Reference courte (genre, producteur, entree de relation)."""

    mal_id: int = Field(ge=0)
    name: str
    type: Optional[str] = None


class RawJpgImage(RawModel):
    image_url: Optional[str] = None
    small_image_url: Optional[str] = None
    large_image_url: Optional[str] = None


class RawImages(RawModel):
    jpg: Optional[RawJpgImage] = None


class RawAired(RawModel):
    # "from" est un mot reserve Python
    string: Optional[str] = None
    from_: Optional[datetime] = Field(default=None, alias="from")
    to: Optional[datetime] = None


class RawTheme(RawModel):
    openings: Optional[list[str]] = None
    endings: Optional[list[str]] = None


class RawRelation(RawModel):
    relation: str
    entry: Optional[list[RawMeta]] = None


class RawTitle(RawModel):
    """Charge utile de /anime/{id}/full."""

    mal_id: int = Field(ge=0)
    title: Optional[str] = None
    title_english: Optional[str] = None
    title_japanese: Optional[str] = None
    images: Optional[RawImages] = None
    type: Optional[str] = None
    source: Optional[str] = None
    episodes: Optional[int] = None
    status: Optional[str] = None
    aired: Optional[RawAired] = None
    duration: Optional[str] = None
    rating: Optional[str] = None
    score: Optional[float] = None
    rank: Optional[int] = None
    popularity: Optional[int] = None
    members: Optional[int] = None
    favorites: Optional[int] = None
    synopsis: Optional[str] = None
    background: Optional[str] = None
    producers: Optional[list[RawMeta]] = None
    licensors: Optional[list[RawMeta]] = None
    studios: Optional[list[RawMeta]] = None
    genres: Optional[list[RawMeta]] = None
    relations: Optional[list[RawRelation]] = None
    theme: Optional[RawTheme] = None


class RawPerson(RawModel):
    """Personne ou personnage reference dans les listes de cast/staff."""

    mal_id: int = Field(ge=0)
    name: str
    images: Optional[RawImages] = None


class RawVoiceActor(RawModel):
    person: RawPerson
    language: str


class RawCharacterEntry(RawModel):
    """Element de /anime/{id}/characters."""

    character: RawPerson
    role: str
    voice_actors: Optional[list[RawVoiceActor]] = None


class RawStaffEntry(RawModel):
    """Element de /anime/{id}/staff (positions: ["Director", "Storyboard"])."""

    person: RawPerson
    positions: Optional[list[str]] = None


_CHARACTERS_ADAPTER = TypeAdapter(list[RawCharacterEntry])
_STAFF_ADAPTER = TypeAdapter(list[RawStaffEntry])


def parse_raw_title(payload: Any) -> RawTitle:
    """
    Valide la charge utile des metadonnees completes.

    Raises:
        MalformedResponseError: Si la charge utile ne respecte pas le schema
    """
    try:
        return RawTitle.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid title payload: {e}") from e


def parse_raw_characters(payload: Any) -> list[RawCharacterEntry]:
    """Valide la liste des personnages (MalformedResponseError si invalide)."""
    try:
        return _CHARACTERS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid characters payload: {e}") from e


def parse_raw_staff(payload: Any) -> list[RawStaffEntry]:
    """Valide la liste du staff (MalformedResponseError si invalide)."""
    try:
        return _STAFF_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid staff payload: {e}") from e
