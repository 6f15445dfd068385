"""Calcul de distance Levenshtein et de similarité normalisée."""
from functools import lru_cache

import Levenshtein as lev

from dishsearch.config import settings


def normalize(text: str) -> str:
    """Minuscules puis suppression des espaces (et retours à la ligne) en bordure."""
    return (text or "").lower().strip()


class StringDistance:
    """Classe pour calculer les distances entre chaînes."""

    @lru_cache(maxsize=settings.DISTANCE_CACHE_SIZE)
    def distance(self, s1: str, s2: str) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Args:
            s1: Première chaîne
            s2: Deuxième chaîne

        Returns:
            Nombre minimal d'insertions, suppressions ou substitutions
        """
        if not s1 or not s2:
            return max(len(s1), len(s2))

        # python-Levenshtein (implémentation C)
        return lev.distance(s1, s2)

    def similarity(self, s1: str, s2: str) -> float:
        """
        Similarité normalisée dans [0, 1] entre deux chaînes.

        Les deux chaînes sont normalisées (casse, espaces en bordure) puis
        ``1 - distance / max(len1, len2)``. Deux chaînes vides sont identiques : 1.0.
        """
        a = normalize(s1)
        b = normalize(s2)
        longest = max(len(a), len(b))
        if longest == 0:
            return 1.0
        return 1 - (self.distance(a, b) / longest)


# Instance globale réutilisable
string_distance = StringDistance()
