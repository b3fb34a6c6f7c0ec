"""
Client Jikan pour la recuperation des metadonnees anime.

Implemente l'interface ITitleGateway pour Jikan (API non officielle de
MyAnimeList). Chaque appel emet une seule requete GET, sans retry ni
backoff: le rythme des appels est gere par le pipeline (RequestPacer).

Usage:
    client = JikanClient(base_url="https://api.jikan.moe/v4")
    raw = await client.fetch("/anime/52991/full")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.core.exceptions import MalformedResponseError, UpstreamError
from src.core.ports.api_clients import ITitleGateway


class JikanClient(ITitleGateway):
    """
    Passerelle HTTP vers l'API Jikan v4.

    - Requete GET sur base_url + suffixe de chemin
    - Statut non-succes converti en UpstreamError (statut + libelle)
    - Corps JSON deballe depuis l'enveloppe "data"

    Attributes:
        JIKAN_BASE_URL: URL de base par defaut de l'API Jikan v4
        ENVELOPE_FIELD: Champ de l'enveloppe contenant la charge utile
    """

    JIKAN_BASE_URL = "https://api.jikan.moe/v4"
    ENVELOPE_FIELD = "data"

    def __init__(
        self,
        base_url: str = JIKAN_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client Jikan.

        Args:
            base_url: URL de base de l'API (sans slash final)
            timeout: Timeout par requete en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "jikan"

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(self, path_suffix: str) -> Any:
        """
        Recupere la charge utile d'une ressource Jikan.

        Args:
            path_suffix: Chemin ajoute a l'URL de base (ex: "/anime/52991/full")

        Returns:
            Le contenu du champ "data" de la reponse

        Raises:
            UpstreamError: Si l'API retourne un statut non-succes
            MalformedResponseError: Si le corps n'est pas du JSON ou
                ne contient pas l'enveloppe attendue
        """
        logger.debug("Requete Jikan", path=path_suffix, base_url=self._base_url)

        client = self._get_client()
        response = await client.get(path_suffix)

        if not response.is_success:
            raise UpstreamError(response.status_code, response.reason_phrase)

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Invalid JSON body for {path_suffix}"
            ) from e

        if not isinstance(body, dict) or self.ENVELOPE_FIELD not in body:
            raise MalformedResponseError(
                f"Missing '{self.ENVELOPE_FIELD}' envelope for {path_suffix}"
            )

        return body[self.ENVELOPE_FIELD]

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
