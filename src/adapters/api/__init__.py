"""
Clients API externes pour la recuperation des metadonnees.

Ce module fournit l'adaptateur pour communiquer avec Jikan (MyAnimeList):
- JikanClient: passerelle HTTP implementant ITitleGateway
- RequestPacer: delai de courtoisie entre requetes successives
- jikan_schemas: schemas pydantic des reponses brutes
"""

from src.adapters.api.jikan_client import JikanClient
from src.adapters.api.pacing import RequestPacer

__all__ = [
    "JikanClient",
    "RequestPacer",
]
