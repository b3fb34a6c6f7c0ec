"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.jikan_client import JikanClient
from .config import Settings
from .services.title_service import TitleService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.title_service()
        title = await service.get_full_title_details(52991)
        await container.jikan_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client API - Singleton, parametres depuis config
    jikan_client = providers.Singleton(
        JikanClient,
        base_url=config.provided.jikan_base_url,
        timeout=config.provided.request_timeout,
    )

    # Service - Factory, un pacer neuf par appel du pipeline
    title_service = providers.Factory(
        TitleService,
        gateway=jikan_client,
        request_interval=config.provided.request_interval,
        media_type=config.provided.media_type,
    )
