"""
Controles de coherence d'un agregat Title recupere en direct.

Utilise par la commande `verify` pour valider qu'un titre complet
(ex: Sousou no Frieren, 52991) est correctement reconstruit:
identite, titre, synopsis, studio, personnage principal double en
japonais, staff et themes.
"""

from dataclasses import dataclass

from src.core.entities.title import CastRole, OrganizationRole, Title


@dataclass(frozen=True)
class CheckResult:
    """Resultat d'un controle."""

    name: str
    passed: bool
    detail: str = ""


def run_title_checks(title: Title, expected_id: int) -> list[CheckResult]:
    """
    Execute les controles sur un agregat.

    Args:
        title: Agregat retourne par le pipeline
        expected_id: ID demande au pipeline

    Returns:
        Liste des resultats, dans l'ordre d'execution
    """
    studios = title.organizations_with_role(OrganizationRole.STUDIO)
    main_characters = [c for c in title.characters if c.role == CastRole.MAIN]
    japanese_voiced = [
        c for c in main_characters
        if any(va.language == "Japanese" for va in c.voice_actors)
    ]

    return [
        CheckResult(
            "Identifiant",
            title.id == expected_id,
            f"attendu {expected_id}, recu {title.id}",
        ),
        CheckResult("Titre", bool(title.title), title.title or "absent"),
        CheckResult(
            "Synopsis",
            bool(title.synopsis),
            f"{len(title.synopsis or '')} caracteres",
        ),
        CheckResult(
            "Studio",
            bool(studios),
            ", ".join(s.name for s in studios) or "aucun studio",
        ),
        CheckResult(
            "Personnage principal",
            bool(main_characters),
            f"{len(main_characters)} personnage(s) Main",
        ),
        CheckResult(
            "Doubleur japonais",
            bool(japanese_voiced),
            japanese_voiced[0].character.name if japanese_voiced else "aucun",
        ),
        CheckResult("Staff", bool(title.staff), f"{len(title.staff)} credit(s)"),
        CheckResult("Themes", bool(title.themes), f"{len(title.themes)} theme(s)"),
    ]
