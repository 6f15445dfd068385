"""Classement d'une collection de records par similarité avec une requête."""
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence

from dishsearch.scoring.distance import StringDistance, string_distance


def default_label(record: Any) -> str:
    """Libellé d'un record : clé ``label`` d'un mapping ou attribut ``label``."""
    if isinstance(record, Mapping):
        label = record.get("label")
    else:
        label = getattr(record, "label", None)
    return label if isinstance(label, str) else ""


@dataclass(frozen=True)
class ScoredRecord:
    """Association transitoire d'un score et du record d'origine."""
    score: float
    record: Any


class StringSimilarityRanker:
    """Trie des records par similarité décroissante entre leur libellé et la requête.

    Le tri est stable : à score égal, l'ordre d'entrée est conservé. Les records
    ne sont jamais modifiés.
    """

    def __init__(
        self,
        label_getter: Optional[Callable[[Any], str]] = None,
        distance: Optional[StringDistance] = None,
    ):
        self.label_getter = label_getter or default_label
        self.distance = distance or string_distance

    def score(self, query: str, label: str) -> float:
        return self.distance.similarity(query, label)

    def rank_with_scores(self, query: str, records: Sequence[Any]) -> List[ScoredRecord]:
        """Classe les records et conserve leur score."""
        scored = [
            ScoredRecord(score=self.score(query, self.label_getter(record)), record=record)
            for record in records
        ]
        return sorted(scored, key=lambda item: -item.score)

    def rank(self, query: str, records: Sequence[Any]) -> List[Any]:
        """Retourne les records du meilleur au moins bon match."""
        return [item.record for item in self.rank_with_scores(query, records)]
