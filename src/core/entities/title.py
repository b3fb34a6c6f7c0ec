"""
Title aggregate entities.

The Title is the aggregate root built from the Jikan metadata, characters
and staff payloads. It is the sole access path to its nested collections.

All entities are frozen dataclasses: an aggregate is built once per
pipeline run and never updated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class OrganizationRole(str, Enum):
    """Role of an organization credited on a title."""

    PRODUCER = "Producer"
    LICENSOR = "Licensor"
    STUDIO = "Studio"


class ThemeKind(str, Enum):
    """Kind of theme song."""

    OPENING = "Opening"
    ENDING = "Ending"


class CastRole(str, Enum):
    """Importance of a character in a title."""

    MAIN = "Main"
    SUPPORTING = "Supporting"


@dataclass(frozen=True)
class Genre:
    id: int
    name: str


@dataclass(frozen=True)
class Organization:
    """Company credited on a title (producer, licensor or studio)."""

    id: int
    name: str


@dataclass(frozen=True)
class Person:
    """
    Real person (voice actor or staff member).

    Attributes:
        id: MyAnimeList person id
        name: Display name as returned upstream
        image: Image URL, None when upstream has none
    """

    id: int
    name: str
    image: Optional[str] = None


@dataclass(frozen=True)
class Character:
    id: int
    name: str
    image: Optional[str] = None


@dataclass(frozen=True)
class TitleStats:
    """
    Popularity metrics of a title.

    Every metric is independently nullable: upstream omits them for
    titles that are not yet aired or not ranked.
    """

    score: Optional[float] = None
    ranked: Optional[int] = None
    popularity: Optional[int] = None
    members: Optional[int] = None
    favorites: Optional[int] = None


@dataclass(frozen=True)
class TitleOrganization:
    organization: Organization
    role: OrganizationRole


@dataclass(frozen=True)
class Theme:
    kind: ThemeKind
    text: str


@dataclass(frozen=True)
class RelatedEntry:
    """
    Link to another title of the same media type.

    Attributes:
        relation: Relation label (Sequel, Prequel, Side story...)
        related_id: MyAnimeList id of the related title
        related_title: Display name of the related title
    """

    relation: str
    related_id: int
    related_title: str


@dataclass(frozen=True)
class VoiceActorAssignment:
    person: Person
    language: str


@dataclass(frozen=True)
class TitleCharacter:
    """Character of a title with its role and voice actors (input order kept)."""

    character: Character
    role: CastRole
    voice_actors: tuple[VoiceActorAssignment, ...] = ()


@dataclass(frozen=True)
class TitleStaff:
    """
    One staff credit.

    A person credited with several positions upstream yields one
    TitleStaff per position, all sharing the same Person.
    """

    person: Person
    role: str


@dataclass(frozen=True)
class Title:
    """
    Aggregate root for a media title.

    Attributes:
        id: MyAnimeList id, equal to the id of the metadata payload
        title: Default (romanized) title
        title_english: English title
        title_japanese: Japanese title
        type: Media format (TV, Movie, OVA...)
        status: Airing status
        episodes: Episode count
        duration: Runtime label ("24 min per ep")
        rating: Content rating
        source: Originating medium (Manga, Light novel...)
        aired_string: Human readable airing period
        aired_from: Start of airing
        aired_to: End of airing
        main_picture: Poster URL (large variant preferred)
        synopsis: Plot summary
        background: Background notes
        stats: Popularity metrics
        genres: Genres
        organizations: Producers, then licensors, then studios
        themes: Openings, then endings
        related_entries: Related titles of the same media type
        characters: Cast
        staff: Staff credits, one per position
    """

    id: int
    title: Optional[str] = None
    title_english: Optional[str] = None
    title_japanese: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    episodes: Optional[int] = None
    duration: Optional[str] = None
    rating: Optional[str] = None
    source: Optional[str] = None
    aired_string: Optional[str] = None
    aired_from: Optional[datetime] = None
    aired_to: Optional[datetime] = None
    main_picture: Optional[str] = None
    synopsis: Optional[str] = None
    background: Optional[str] = None
    stats: TitleStats = field(default_factory=TitleStats)
    genres: tuple[Genre, ...] = ()
    organizations: tuple[TitleOrganization, ...] = ()
    themes: tuple[Theme, ...] = ()
    related_entries: tuple[RelatedEntry, ...] = ()
    characters: tuple[TitleCharacter, ...] = ()
    staff: tuple[TitleStaff, ...] = ()

    def organizations_with_role(self, role: OrganizationRole) -> tuple[Organization, ...]:
        """Retourne les organisations creditees avec le role donne."""
        return tuple(o.organization for o in self.organizations if o.role == role)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise l'agregat en dictionnaire compatible JSON.

        Les dates sont converties en ISO 8601 et les enums en leur libelle.

        Returns:
            Dictionnaire pret pour json.dumps
        """
        return {
            "id": self.id,
            "title": self.title,
            "title_english": self.title_english,
            "title_japanese": self.title_japanese,
            "type": self.type,
            "status": self.status,
            "episodes": self.episodes,
            "duration": self.duration,
            "rating": self.rating,
            "source": self.source,
            "aired_string": self.aired_string,
            "aired_from": self.aired_from.isoformat() if self.aired_from else None,
            "aired_to": self.aired_to.isoformat() if self.aired_to else None,
            "main_picture": self.main_picture,
            "synopsis": self.synopsis,
            "background": self.background,
            "stats": {
                "score": self.stats.score,
                "ranked": self.stats.ranked,
                "popularity": self.stats.popularity,
                "members": self.stats.members,
                "favorites": self.stats.favorites,
            },
            "genres": [{"id": g.id, "name": g.name} for g in self.genres],
            "organizations": [
                {
                    "organization": {"id": o.organization.id, "name": o.organization.name},
                    "role": o.role.value,
                }
                for o in self.organizations
            ],
            "themes": [{"kind": t.kind.value, "text": t.text} for t in self.themes],
            "related_entries": [
                {
                    "relation": r.relation,
                    "related_id": r.related_id,
                    "related_title": r.related_title,
                }
                for r in self.related_entries
            ],
            "characters": [
                {
                    "character": _person_dict(c.character),
                    "role": c.role.value,
                    "voice_actors": [
                        {"person": _person_dict(va.person), "language": va.language}
                        for va in c.voice_actors
                    ],
                }
                for c in self.characters
            ],
            "staff": [
                {"person": _person_dict(s.person), "role": s.role} for s in self.staff
            ],
        }


def _person_dict(person: Person | Character) -> dict[str, Any]:
    return {"id": person.id, "name": person.name, "image": person.image}
