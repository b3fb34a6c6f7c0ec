"""
Espacement des requetes vers les API externes.

Jikan limite le nombre de requetes par seconde. Plutot que de compter sur
la latence d'un appel pour espacer le suivant, le pipeline attend un
intervalle fixe avant chaque requete sauf la premiere.

Usage:
    pacer = RequestPacer(interval_seconds=1.0)
    await pacer.wait()  # immediat
    await client.fetch(...)
    await pacer.wait()  # attend 1 seconde
    await client.fetch(...)
"""

import asyncio
from typing import Awaitable, Callable

from loguru import logger


class RequestPacer:
    """
    Delai de courtoisie uniforme entre requetes successives.

    Une instance est creee par execution du pipeline: aucun etat n'est
    partage entre deux executions.

    Attributes:
        interval_seconds: Attente avant chaque requete apres la premiere
        requests_made: Nombre d'appels a wait() deja effectues
    """

    def __init__(
        self,
        interval_seconds: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialise le pacer.

        Args:
            interval_seconds: Delai en secondes (0 desactive l'attente)
            sleep: Fonction d'attente async (injectable pour les tests)

        Raises:
            ValueError: Si l'intervalle est negatif
        """
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self.requests_made = 0
        self._sleep = sleep

    async def wait(self) -> None:
        """Attend l'intervalle configure si une requete a deja ete emise."""
        if self.requests_made > 0 and self.interval_seconds > 0:
            logger.debug("Pause rate limit", seconds=self.interval_seconds)
            await self._sleep(self.interval_seconds)
        self.requests_made += 1
