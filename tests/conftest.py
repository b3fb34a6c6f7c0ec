"""
Fixtures pytest partagees pour les tests AniFetch.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de la passerelle ITitleGateway
- Fonction d'attente factice pour le rate limiting
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from src.config import Settings
from src.core.ports.api_clients import ITitleGateway


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """
    Mock de ITitleGateway pour les tests.

    Les valeurs de retour de fetch() doivent etre configurees dans chaque test
    (side_effect avec les trois charges utiles dans l'ordre des appels).
    """
    gateway = AsyncMock(spec=ITitleGateway)
    gateway.source = "jikan"
    return gateway


@pytest.fixture
def fake_sleep() -> AsyncMock:
    """Remplace asyncio.sleep: enregistre les attentes sans bloquer."""
    return AsyncMock(return_value=None)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test sans delai et avec un fichier de log temporaire."""
    return Settings(
        jikan_base_url="https://api.jikan.moe/v4",
        request_interval=0,
        log_file=tmp_path / "test.log",
    )
