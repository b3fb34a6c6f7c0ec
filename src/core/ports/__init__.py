"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les services externes
- ITitleGateway : Passerelle de transport vers l'API de métadonnées
"""

from src.core.ports.api_clients import ITitleGateway

__all__ = [
    "ITitleGateway",
]
