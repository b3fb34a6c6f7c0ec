"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites) et exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Agrégat Title et ses objets valeur
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- exceptions.py : Taxonomie d'erreurs (UpstreamError, MalformedResponseError)
"""
