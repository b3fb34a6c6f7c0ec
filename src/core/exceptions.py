"""
Exceptions du domaine AniFetch.

Hierarchie :
- AniFetchError : base commune
- UpstreamError : l'API a repondu avec un statut non-succes
- MalformedResponseError : la reponse ne respecte pas le format attendu
  (JSON invalide, enveloppe absente, schema non respecte, role inconnu)

Le coeur ne fait aucune recuperation locale : ces erreurs remontent
telles quelles jusqu'a l'appelant.
"""


class AniFetchError(Exception):
    """Classe de base des erreurs AniFetch."""


class UpstreamError(AniFetchError):
    """
    Exception levee quand l'API retourne un statut HTTP non-succes.

    Attributes:
        status_code: Code HTTP retourne par l'API
        reason: Libelle du statut (ex: "Too Many Requests")
    """

    def __init__(self, status_code: int, reason: str) -> None:
        """
        Initialise l'erreur avec le statut HTTP.

        Args:
            status_code: Code HTTP retourne
            reason: Libelle lisible du statut
        """
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Jikan API Error {status_code}: {reason}")


class MalformedResponseError(AniFetchError):
    """Exception levee quand une reponse de l'API ne peut pas etre interpretee."""
