"""
Interfaces ports pour les clients API.

Le domaine a besoin d'une passerelle capable de recuperer un document
JSON depuis l'API de metadonnees. L'adaptateur concret (JikanClient)
est fourni par la couche adapters.
"""

from abc import ABC, abstractmethod
from typing import Any


class ITitleGateway(ABC):
    """
    Interface de la passerelle de transport vers l'API de métadonnées.

    Une implémentation émet une requête GET par appel, déballe l'enveloppe
    de la réponse et lève UpstreamError sur un statut non-succès.
    """

    @abstractmethod
    async def fetch(self, path_suffix: str) -> Any:
        """
        Récupère la charge utile d'une ressource.

        Args :
            path_suffix : Chemin ajouté à l'URL de base (ex: "/anime/52991/full")

        Retourne :
            Le contenu du champ d'enveloppe de la réponse

        Lève :
            UpstreamError : statut HTTP non-succès
            MalformedResponseError : corps illisible ou enveloppe absente
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'jikan')."""
        ...
