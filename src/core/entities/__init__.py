"""
Business entities representing core domain concepts.

Exports:
- Title: Aggregate root for a media title
- TitleStats: Popularity metrics of a title
- Genre, Organization, Person, Character: Referenced entities
- TitleOrganization, Theme, RelatedEntry, TitleCharacter,
  VoiceActorAssignment, TitleStaff: Members of the aggregate collections
- OrganizationRole, ThemeKind, CastRole: Closed tag sets
"""

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

__all__ = [
    "CastRole",
    "Character",
    "Genre",
    "Organization",
    "OrganizationRole",
    "Person",
    "RelatedEntry",
    "Theme",
    "ThemeKind",
    "Title",
    "TitleCharacter",
    "TitleOrganization",
    "TitleStaff",
    "TitleStats",
    "VoiceActorAssignment",
]
