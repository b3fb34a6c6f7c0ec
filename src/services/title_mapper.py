"""
Mapping des reponses brutes Jikan vers l'agregat Title.

Fonctions pures, sans I/O: chaque fonction prend un schema brut valide
(voir src.adapters.api.jikan_schemas) et retourne des objets du domaine.

Regles:
- Un scalaire absent devient None, jamais une valeur sentinelle
- Une liste absente devient une liste vide
- Les organisations sont ordonnees producteurs, licencies, studios
- Les themes sont ordonnes openings puis endings
- Un membre du staff avec N positions produit N entrees
"""

from typing import Optional

from src.adapters.api.jikan_schemas import (
    RawCharacterEntry,
    RawImages,
    RawMeta,
    RawPerson,
    RawRelation,
    RawStaffEntry,
    RawTheme,
    RawTitle,
)
from src.core.entities.title import (
    CastRole,
    Character,
    Genre,
    Organization,
    OrganizationRole,
    Person,
    RelatedEntry,
    Theme,
    ThemeKind,
    Title,
    TitleCharacter,
    TitleOrganization,
    TitleStaff,
    TitleStats,
    VoiceActorAssignment,
)
from src.core.exceptions import MalformedResponseError

DEFAULT_MEDIA_TYPE = "anime"


def select_image(images: Optional[RawImages]) -> Optional[str]:
    """Retourne l'URL jpg standard, ou None si absente ou vide."""
    if images is None or images.jpg is None:
        return None
    return images.jpg.image_url or None


def select_main_picture(images: Optional[RawImages]) -> Optional[str]:
    """
    Selectionne l'image principale d'un titre.

    Prefere la variante "large", sinon la variante standard.

    Args:
        images: Bloc images brut de la reponse

    Returns:
        URL de l'image, ou None si aucune variante n'est disponible
    """
    if images is None or images.jpg is None:
        return None
    return images.jpg.large_image_url or images.jpg.image_url or None


def map_genres(genres: Optional[list[RawMeta]]) -> tuple[Genre, ...]:
    return tuple(Genre(id=g.mal_id, name=g.name) for g in genres or [])


def map_organizations(raw: RawTitle) -> tuple[TitleOrganization, ...]:
    """
    Fusionne producteurs, licencies et studios en une seule liste.

    L'ordre est fixe (producteurs, puis licencies, puis studios) et l'ordre
    d'entree est conserve dans chaque groupe. Une meme organisation peut
    apparaitre plusieurs fois sous des roles differents.
    """
    groups = (
        (raw.producers, OrganizationRole.PRODUCER),
        (raw.licensors, OrganizationRole.LICENSOR),
        (raw.studios, OrganizationRole.STUDIO),
    )
    return tuple(
        TitleOrganization(
            organization=Organization(id=meta.mal_id, name=meta.name),
            role=role,
        )
        for metas, role in groups
        for meta in metas or []
    )


def map_themes(theme: Optional[RawTheme]) -> tuple[Theme, ...]:
    """Openings (Opening) puis endings (Ending); sous-listes absentes = vides."""
    if theme is None:
        return ()
    openings = [Theme(kind=ThemeKind.OPENING, text=t) for t in theme.openings or []]
    endings = [Theme(kind=ThemeKind.ENDING, text=t) for t in theme.endings or []]
    return tuple(openings + endings)


def map_related_entries(
    relations: Optional[list[RawRelation]],
    media_type: str = DEFAULT_MEDIA_TYPE,
) -> tuple[RelatedEntry, ...]:
    """
    Aplatit les groupes de relations en ne gardant que le meme type de media.

    Args:
        relations: Groupes de relations bruts ({relation, entry[]})
        media_type: Type d'entree a conserver ("anime" exclut les mangas)

    Returns:
        Entrees liees dans l'ordre des groupes puis des entrees
    """
    return tuple(
        RelatedEntry(
            relation=group.relation,
            related_id=entry.mal_id,
            related_title=entry.name,
        )
        for group in relations or []
        for entry in group.entry or []
        if entry.type == media_type
    )


def _map_person(raw: RawPerson) -> Person:
    return Person(id=raw.mal_id, name=raw.name, image=select_image(raw.images))


def _parse_cast_role(role: str) -> CastRole:
    try:
        return CastRole(role)
    except ValueError as e:
        raise MalformedResponseError(f"Unknown character role: {role!r}") from e


def map_characters(entries: list[RawCharacterEntry]) -> tuple[TitleCharacter, ...]:
    """
    Mappe les personnages et leurs doubleurs.

    Le role est restreint a CastRole; un role inconnu leve
    MalformedResponseError. L'ordre des doubleurs est conserve.
    """
    return tuple(
        TitleCharacter(
            character=Character(
                id=entry.character.mal_id,
                name=entry.character.name,
                image=select_image(entry.character.images),
            ),
            role=_parse_cast_role(entry.role),
            voice_actors=tuple(
                VoiceActorAssignment(person=_map_person(va.person), language=va.language)
                for va in entry.voice_actors or []
            ),
        )
        for entry in entries
    )


def map_staff(entries: list[RawStaffEntry]) -> tuple[TitleStaff, ...]:
    """
    Aplatit le staff: une entree par position.

    Une personne creditee "Director" et "Storyboard" produit deux TitleStaff
    partageant la meme Person, dans l'ordre des positions.
    """
    staff: list[TitleStaff] = []
    for entry in entries:
        person = _map_person(entry.person)
        for position in entry.positions or []:
            staff.append(TitleStaff(person=person, role=position))
    return tuple(staff)


def map_stats(raw: RawTitle) -> TitleStats:
    return TitleStats(
        score=raw.score,
        ranked=raw.rank,
        popularity=raw.popularity,
        members=raw.members,
        favorites=raw.favorites,
    )


def map_title(
    raw: RawTitle,
    characters: list[RawCharacterEntry],
    staff: list[RawStaffEntry],
    media_type: str = DEFAULT_MEDIA_TYPE,
) -> Title:
    """
    Assemble l'agregat Title a partir des trois reponses brutes.

    Args:
        raw: Metadonnees completes (/full)
        characters: Personnages (/characters)
        staff: Staff (/staff)
        media_type: Type de media pour filtrer les relations

    Returns:
        Title dont l'id est celui des metadonnees

    Raises:
        MalformedResponseError: Si un role de personnage est inconnu
    """
    aired = raw.aired
    return Title(
        id=raw.mal_id,
        title=raw.title,
        title_english=raw.title_english,
        title_japanese=raw.title_japanese,
        type=raw.type,
        status=raw.status,
        episodes=raw.episodes,
        duration=raw.duration,
        rating=raw.rating,
        source=raw.source,
        aired_string=aired.string if aired else None,
        aired_from=aired.from_ if aired else None,
        aired_to=aired.to if aired else None,
        main_picture=select_main_picture(raw.images),
        synopsis=raw.synopsis,
        background=raw.background,
        stats=map_stats(raw),
        genres=map_genres(raw.genres),
        organizations=map_organizations(raw),
        themes=map_themes(raw.theme),
        related_entries=map_related_entries(raw.relations, media_type),
        characters=map_characters(characters),
        staff=map_staff(staff),
    )
