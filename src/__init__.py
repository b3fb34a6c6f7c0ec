"""
AniFetch - Récupération et normalisation des métadonnées anime.

Ce package récupère les métadonnées, personnages et staff d'un titre
depuis l'API Jikan (MyAnimeList) et les fusionne en un agrégat Title.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (agrégat Title, ports, exceptions)
- services/ : Couche application (mapping, orchestration)
- adapters/ : Couche infrastructure (client Jikan, CLI)
"""
