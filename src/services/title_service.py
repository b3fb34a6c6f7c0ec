"""
Service de recuperation des details complets d'un titre.

Orchestre trois appels sequentiels a la passerelle (metadonnees,
personnages, staff) espaces par un delai de courtoisie, puis fusionne
les reponses en un agregat Title.

Toute erreur d'un appel interrompt le pipeline: aucun agregat partiel
n'est jamais retourne.
"""

import asyncio
import time
from typing import Awaitable, Callable

from loguru import logger

from src.adapters.api.jikan_schemas import (
    parse_raw_characters,
    parse_raw_staff,
    parse_raw_title,
)
from src.adapters.api.pacing import RequestPacer
from src.core.entities.title import Title
from src.core.ports.api_clients import ITitleGateway
from src.services.title_mapper import DEFAULT_MEDIA_TYPE, map_title


class TitleService:
    """
    Pipeline fetch-and-normalize pour un titre.

    Les appels sont volontairement sequentiels: les paralleliser
    depasserait la limite de requetes de l'API.
    """

    def __init__(
        self,
        gateway: ITitleGateway,
        request_interval: float = 1.0,
        media_type: str = DEFAULT_MEDIA_TYPE,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialise le service.

        Args:
            gateway: Passerelle vers l'API (JikanClient)
            request_interval: Delai en secondes avant chaque appel apres le premier
            media_type: Segment de ressource ("anime") et type des relations conservees
            sleep: Fonction d'attente async (injectable pour les tests)
        """
        self._gateway = gateway
        self._request_interval = request_interval
        self._media_type = media_type
        self._sleep = sleep

    async def get_full_title_details(self, title_id: int) -> Title:
        """
        Recupere et normalise les details complets d'un titre.

        Sequence fixe: /full, pause, /characters, pause, /staff, mapping.

        Args:
            title_id: ID MyAnimeList du titre

        Returns:
            Agregat Title

        Raises:
            UpstreamError: Si un des appels retourne un statut non-succes
            MalformedResponseError: Si une reponse ne respecte pas le schema
        """
        pacer = RequestPacer(self._request_interval, sleep=self._sleep)
        base_path = f"/{self._media_type}/{title_id}"
        start = time.monotonic()

        logger.info("Recuperation du titre", title_id=title_id)

        await pacer.wait()
        raw_title = parse_raw_title(await self._gateway.fetch(f"{base_path}/full"))

        await pacer.wait()
        raw_characters = parse_raw_characters(
            await self._gateway.fetch(f"{base_path}/characters")
        )

        await pacer.wait()
        raw_staff = parse_raw_staff(await self._gateway.fetch(f"{base_path}/staff"))

        title = map_title(
            raw_title, raw_characters, raw_staff, media_type=self._media_type
        )

        logger.info(
            "Titre recupere",
            title_id=title.id,
            characters=len(title.characters),
            staff=len(title.staff),
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return title
