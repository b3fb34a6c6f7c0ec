"""
Couche application (services).

- title_mapper : fonctions pures de mapping des réponses brutes vers Title
- title_service : orchestration des trois appels et fusion en agrégat
"""

from src.services.title_service import TitleService

__all__ = [
    "TitleService",
]
