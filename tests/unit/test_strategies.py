"""Unit tests for the individual match strategies."""

import pytest
from grocery_search.core.fuzzy_matcher import FuzzyMatcher
from grocery_search.core.strategies import (
    ExactMatchStrategy,
    FuzzyMatchStrategy,
    StartsWithMatchStrategy,
    SubstringMatchStrategy,
    SynonymMatchStrategy,
    default_strategies,
)
from grocery_search.core.synonyms import SynonymService
from grocery_search.models.catalog import SearchableItem


@pytest.fixture
def items():
    """Sample catalog for strategy tests."""
    return [
        SearchableItem(id="1", name="Zanahoria", category="Verduras"),
        SearchableItem(id="2", name="Aguacate", category="Frutas"),
        SearchableItem(id="3", name="Zanahoria rallada", category="Verduras"),
        SearchableItem(id="4", name="Jugo de zanahoria", category="Bebidas"),
        SearchableItem(id="5", name="Naranja"),
    ]


@pytest.fixture
def synonym_service():
    """Synonym service over the bundled vocabulary."""
    return SynonymService()


def ids(results):
    return [result.item.id for result in results]


class TestExactMatchStrategy:
    """Test cases for exact matching."""

    @pytest.fixture
    def strategy(self):
        return ExactMatchStrategy()

    def test_metadata(self, strategy):
        """Test type and priority."""
        assert strategy.type == "exact"
        assert strategy.priority() == 100

    def test_name_match(self, strategy, items):
        """Test exact name matches score 1.0."""
        results = strategy.find_matches(items, "ZANAHORIA", "zanahoria")

        assert ids(results) == ["1"]
        assert results[0].score == 1.0
        assert results[0].match_type == "exact"
        assert results[0].matched_terms == ["Zanahoria"]
        assert results[0].original_query == "ZANAHORIA"

    def test_category_match(self, strategy, items):
        """Test exact category matches score 0.95."""
        results = strategy.find_matches(items, "Verduras", "verduras")

        assert ids(results) == ["1", "3"]
        assert all(result.score == 0.95 for result in results)
        assert results[0].matched_terms == ["Verduras"]

    def test_missing_category(self, strategy, items):
        """Test items without a category are handled."""
        results = strategy.find_matches(items, "naranja", "naranja")
        assert ids(results) == ["5"]

    def test_empty_query(self, strategy, items):
        """Test empty queries match nothing."""
        assert strategy.find_matches(items, "   ", "") == []


class TestStartsWithMatchStrategy:
    """Test cases for prefix matching."""

    @pytest.fixture
    def strategy(self):
        return StartsWithMatchStrategy()

    def test_metadata(self, strategy):
        """Test type and priority."""
        assert strategy.type == "starts_with"
        assert strategy.priority() == 90

    def test_prefix_scores(self, strategy, items):
        """Test scores grow with the share of the name covered."""
        results = strategy.find_matches(items, "zana", "zana")

        assert ids(results) == ["1", "3"]
        assert results[0].score == pytest.approx(0.85 + 4 / 9 * 0.1)
        assert results[1].score == pytest.approx(0.85 + 4 / 17 * 0.1)
        assert all(result.match_type == "partial" for result in results)

    def test_no_prefix(self, strategy, items):
        """Test names containing the query elsewhere do not match."""
        assert strategy.find_matches(items, "horia", "horia") == []


class TestSynonymMatchStrategy:
    """Test cases for synonym matching."""

    @pytest.fixture
    def strategy(self, synonym_service):
        return SynonymMatchStrategy(synonym_service)

    def test_metadata(self, strategy):
        """Test type and priority."""
        assert strategy.type == "synonym"
        assert strategy.priority() == 85

    def test_regional_term(self, strategy, items):
        """Test a regional term finds items named with the canonical term."""
        results = strategy.find_matches(items, "palta", "palta")

        assert ids(results) == ["2"]
        assert results[0].score == pytest.approx(0.9 * 0.95)
        assert results[0].match_type == "synonym"
        assert results[0].matched_terms == ["Aguacate", "palta → aguacate"]

    def test_scoring_variants(self, strategy, items):
        """Test exact, prefix and substring scoring of the canonical term."""
        results = strategy.find_matches(items, "carrot", "carrot")
        by_id = {result.item.id: result for result in results}

        assert set(by_id) == {"1", "3", "4"}
        assert by_id["1"].score == pytest.approx(0.9 * 0.95)
        assert by_id["3"].score == pytest.approx(0.9 * (0.85 + 9 / 17 * 0.1))
        assert by_id["4"].score == pytest.approx(
            0.9 * (0.7 + 9 / 17 * 0.15) * (1 - 8 / 17 * 0.3)
        )
        assert "carrot → zanahoria" in by_id["4"].matched_terms

    def test_category_match(self, items):
        """Test canonical terms matching a category."""
        service = SynonymService.from_vocabulary({"verduras": {"vegetales": ["MX"]}})
        strategy = SynonymMatchStrategy(service)

        results = strategy.find_matches(items, "vegetales", "vegetales")

        assert ids(results) == ["1", "3"]
        assert results[0].score == pytest.approx(0.9 * 0.8)
        assert results[0].matched_terms == ["Verduras", "vegetales → verduras"]

    def test_short_canonical_term_needs_prefix(self):
        """Test canonical terms under four characters only match as a prefix."""
        service = SynonymService.from_vocabulary({"te": {"tea": ["GB"]}})
        strategy = SynonymMatchStrategy(service)
        catalog = [
            SearchableItem(id="1", name="Té verde"),
            SearchableItem(id="2", name="Mate"),
        ]

        results = strategy.find_matches(catalog, "tea", "tea")
        assert ids(results) == ["1"]

    def test_unknown_term(self, strategy, items):
        """Test terms without synonyms match nothing."""
        assert strategy.find_matches(items, "tomate", "tomate") == []

    def test_empty_query(self, strategy, items):
        """Test empty queries match nothing."""
        assert strategy.find_matches(items, "", "") == []

    def test_debug_info(self, strategy):
        """Test the resolution summary."""
        info = strategy.get_debug_info("palta")

        assert info["synonyms_found"] == 1
        assert info["synonyms"][0]["canonical"] == "aguacate"
        assert info["synonyms"][0]["region"] == "Argentina"
        assert strategy.get_debug_info("tomate")["synonyms_found"] == 0


class TestFuzzyMatchStrategy:
    """Test cases for approximate matching."""

    @pytest.fixture
    def strategy(self):
        return FuzzyMatchStrategy(FuzzyMatcher())

    def test_metadata(self, strategy):
        """Test type and priority."""
        assert strategy.type == "fuzzy"
        assert strategy.priority() == 80

    def test_typo(self, strategy, items):
        """Test typos are matched with a damped score."""
        results = strategy.find_matches(items, "zanaoria", "zanaoria")
        by_id = {result.item.id: result for result in results}

        assert {"1", "3", "4"} <= set(by_id)
        expected = (1 - (1 / 8) ** (0.8 / 1.1)) * 0.8
        assert by_id["1"].score == pytest.approx(expected)
        assert by_id["1"].match_type == "fuzzy"
        assert by_id["1"].matched_terms == ["Zanahoria"]
        assert max(results, key=lambda r: r.score).item.id == "1"

    def test_scores_capped(self, strategy, items):
        """Test fuzzy scores never exceed 0.8."""
        results = strategy.find_matches(items, "naranja", "naranja")
        assert all(0.0 <= result.score <= 0.8 for result in results)

    def test_index_reused_for_same_snapshot(self, strategy, items):
        """Test the index is built once per snapshot."""
        snapshot = tuple(items)
        first = strategy.index_for(snapshot)

        assert strategy.index_for(snapshot) is first
        assert strategy.index_for(snapshot[:2]) is not first

    def test_empty_query(self, strategy, items):
        """Test empty queries match nothing."""
        assert strategy.find_matches(items, "", "") == []


class TestSubstringMatchStrategy:
    """Test cases for substring matching."""

    @pytest.fixture
    def strategy(self):
        return SubstringMatchStrategy()

    def test_metadata(self, strategy):
        """Test type and priority."""
        assert strategy.type == "substring"
        assert strategy.priority() == 70

    def test_name_substring(self, strategy, items):
        """Test name substrings score 0.6."""
        results = strategy.find_matches(items, "ahor", "ahor")

        assert ids(results) == ["1", "3", "4"]
        assert all(result.score == 0.6 for result in results)
        assert all(result.match_type == "partial" for result in results)

    def test_category_substring(self, strategy, items):
        """Test category substrings score 0.5."""
        results = strategy.find_matches(items, "dura", "dura")

        assert ids(results) == ["1", "3"]
        assert results[0].score == 0.5
        assert results[0].matched_terms == ["Verduras"]

    def test_name_and_category(self, strategy):
        """Test the best field score wins and both fields are reported."""
        catalog = [SearchableItem(id="1", name="Fresas", category="Frutas rojas")]
        results = strategy.find_matches(catalog, "fr", "fr")

        assert results[0].score == 0.6
        assert results[0].matched_terms == ["Fresas", "Frutas rojas"]


class TestDefaultStrategies:
    """Test cases for the standard strategy set."""

    def test_ordered_by_priority(self, synonym_service):
        """Test the standard set is ordered highest priority first."""
        strategies = default_strategies(synonym_service)
        assert [s.type for s in strategies] == [
            "exact", "starts_with", "synonym", "fuzzy", "substring"
        ]

    def test_without_synonyms(self):
        """Test the synonym strategy needs a synonym service."""
        strategies = default_strategies()
        assert "synonym" not in [s.type for s in strategies]
