# tests/test_ranking.py
import pytest

from dishsearch.models import Record
from dishsearch.scoring.ranking import StringSimilarityRanker, default_label
from .test_utils import reported


@pytest.fixture
def ranker():
    return StringSimilarityRanker()


class TestRank:
    """Propriétés du classement par similarité."""

    def test_stir_fry_scenario(self, ranker, records):
        with reported("test_stir_fry_scenario"):
            ranked = ranker.rank("stir fry", records)
            assert [r.label for r in ranked] == ["stir fry", "stir-fry noodles", "pizza"]

    def test_empty_records(self, ranker):
        with reported("test_empty_records"):
            assert ranker.rank("pizza", []) == []
            assert ranker.rank("", []) == []

    def test_output_is_permutation(self, ranker, records):
        with reported("test_output_is_permutation"):
            for query in ("", "pizza", "zzz", "  STIR  "):
                ranked = ranker.rank(query, records)
                assert len(ranked) == len(records)
                assert sorted(map(id, ranked)) == sorted(map(id, records))

    def test_exact_match_ranks_first(self, ranker, records):
        with reported("test_exact_match_ranks_first"):
            ranked = ranker.rank_with_scores("PIZZA\n", records)
            assert ranked[0].record.label == "pizza"
            assert ranked[0].score == 1.0

    def test_case_and_whitespace_insensitive(self, ranker, records):
        with reported("test_case_and_whitespace_insensitive"):
            assert ranker.rank("Pizza", records) == ranker.rank("  pizza  ", records)

    def test_stable_for_equal_labels(self, ranker):
        with reported("test_stable_for_equal_labels"):
            first = Record(label="Pizza", payload={"n": 1})
            second = Record(label=" pizza ", payload={"n": 2})
            other = Record(label="tacos", payload={"n": 3})

            ranked = ranker.rank("pizza", [other, first, second])
            assert [r.payload["n"] for r in ranked] == [1, 2, 3]

            ranked = ranker.rank("pizza", [second, other, first])
            assert [r.payload["n"] for r in ranked] == [2, 1, 3]

    def test_empty_query(self, ranker):
        with reported("test_empty_query"):
            a = Record(label="a")
            empty = Record(label="")
            ranked = ranker.rank_with_scores("", [a, empty])
            assert [item.record for item in ranked] == [empty, a]
            assert [item.score for item in ranked] == [1.0, 0.0]

    def test_records_not_mutated(self, ranker, records):
        with reported("test_records_not_mutated"):
            before = [r.model_dump() for r in records]
            order = list(records)
            ranker.rank("stir", records)
            assert [r.model_dump() for r in records] == before
            assert records == order

    def test_scores_descending(self, ranker, records):
        with reported("test_scores_descending"):
            scores = [item.score for item in ranker.rank_with_scores("noodles", records)]
            assert scores == sorted(scores, reverse=True)
            assert all(0.0 <= s <= 1.0 for s in scores)


class TestLabels:
    """Lecture du libellé des records."""

    def test_mapping_and_attribute(self):
        with reported("test_mapping_and_attribute"):
            assert default_label({"label": "soup"}) == "soup"
            assert default_label(Record(label="soup")) == "soup"

    def test_missing_label_is_empty(self, ranker):
        with reported("test_missing_label_is_empty"):
            assert default_label({"name": "soup"}) == ""
            assert default_label(object()) == ""
            assert default_label({"label": None}) == ""

            unlabeled = {"name": "soup"}
            labeled = {"label": "x"}
            assert ranker.rank("", [labeled, unlabeled]) == [unlabeled, labeled]

    def test_custom_label_getter(self):
        with reported("test_custom_label_getter"):
            ranker = StringSimilarityRanker(label_getter=lambda dish: dish["name"])
            dishes = [{"name": "tomato soup"}, {"name": "beef tacos"}]
            assert ranker.rank("tacos", dishes)[0] == {"name": "beef tacos"}


class TestScore:
    """Score de similarité normalisé."""

    def test_single_substitution(self, ranker):
        with reported("test_single_substitution"):
            assert ranker.score("cat", "cap") == pytest.approx(1 - 1 / 3)

    def test_symmetry(self, ranker):
        with reported("test_symmetry"):
            pairs = [("stir fry", "stir-fry noodles"), ("", "abc"), ("Kitten", "sitting"), ("a", "a")]
            for a, b in pairs:
                assert ranker.score(a, b) == ranker.score(b, a)

    def test_both_empty_is_perfect(self, ranker):
        with reported("test_both_empty_is_perfect"):
            assert ranker.score("", "") == 1.0
            assert ranker.score("  \n", "\t") == 1.0

    def test_disjoint_strings(self, ranker):
        with reported("test_disjoint_strings"):
            assert ranker.score("abc", "xyz") == 0.0
            assert ranker.score("abc", "") == 0.0
