"""Unit tests for regional synonym resolution."""

import pytest
from grocery_search.core.normalizer import TextNormalizer
from grocery_search.core.synonyms import SynonymService, build_synonym_index
from grocery_search.data.vocabulary import REGIONAL_VOCABULARY


class TestSynonymIndex:
    """Test cases for building the synonym index."""

    @pytest.fixture
    def normalizer(self):
        """Create a normalizer instance for testing."""
        return TextNormalizer()

    @pytest.fixture
    def index(self, normalizer):
        """Index built from the bundled vocabulary."""
        return build_synonym_index(REGIONAL_VOCABULARY, normalizer)

    def test_keys_are_normalized(self, index, normalizer):
        """Test every key is already in normalized form."""
        for key in index:
            assert key == normalizer.normalize(key)

    def test_canonical_terms_are_keys(self, index, normalizer):
        """Test every canonical term is indexed with full confidence."""
        for canonical in REGIONAL_VOCABULARY:
            entry = index[normalizer.normalize(canonical)]
            assert entry.canonical_term == canonical
            assert entry.confidence == 1.0
            assert entry.region_info is None

    def test_synonym_entry(self, index):
        """Test synonym entries carry confidence and primary region."""
        entry = index["palta"]
        assert entry.canonical_term == "aguacate"
        assert entry.confidence == 0.9
        assert entry.region_info.region == "AR"
        assert entry.region_info.country == "Argentina"
        assert entry.region_info.language == "es"

    def test_accented_synonym_key(self, index):
        """Test accented synonyms are keyed without accents."""
        assert "name" in index
        assert index["name"].canonical_term == "batata"
        assert "ñame" not in index

    def test_synonym_never_replaces_canonical(self):
        """Test a synonym equal to a canonical term keeps the canonical entry."""
        index = build_synonym_index({
            "banana": {"banana": ["AR"], "banano": ["CO"]},
            "platano": {"banana": ["MX"]},
        })
        assert index["banana"].canonical_term == "banana"
        assert index["banana"].confidence == 1.0
        assert index["banano"].canonical_term == "banana"

    def test_language_inference(self):
        """Test language is 'es' for two-letter codes and 'en' otherwise."""
        index = build_synonym_index({"cacahuate": {"peanut": ["USA"], "mani": ["AR"]}})
        assert index["peanut"].region_info.language == "en"
        assert index["peanut"].region_info.country == "USA"
        assert index["mani"].region_info.language == "es"

    def test_synonym_without_regions(self):
        """Test synonyms with no region list carry no region info."""
        index = build_synonym_index({"pan": {"bread": []}})
        assert index["bread"].region_info is None

    def test_index_is_read_only(self, index):
        """Test the index cannot be mutated."""
        with pytest.raises(TypeError):
            index["tomate"] = index["palta"]


class TestSynonymService:
    """Test cases for the SynonymService class."""

    @pytest.fixture
    def service(self):
        """Create a synonym service over the bundled vocabulary."""
        return SynonymService()

    def test_find_synonyms_hit(self, service):
        """Test resolving a regional term."""
        match = service.find_synonyms("palta")

        assert match is not None
        assert match.canonical_term == "aguacate"
        assert match.original_term == "palta"
        assert match.confidence == 0.9
        assert match.region_info.country == "Argentina"

    def test_find_synonyms_is_case_and_accent_insensitive(self, service):
        """Test lookups normalize the term."""
        match = service.find_synonyms("ÑAME")
        assert match is not None
        assert match.canonical_term == "batata"
        assert match.original_term == "ÑAME"
        assert match.region_info.region == "CO"

    def test_find_synonyms_canonical(self, service):
        """Test canonical terms resolve to themselves."""
        match = service.find_synonyms("Aguacate")
        assert match.canonical_term == "aguacate"
        assert match.confidence == 1.0
        assert match.region_info is None

    def test_find_synonyms_miss(self, service):
        """Test unknown and blank terms."""
        assert service.find_synonyms("tomate") is None
        assert service.find_synonyms("") is None
        assert service.find_synonyms("   ") is None

    def test_has_synonyms(self, service):
        """Test existence checks."""
        assert service.has_synonyms("camote") is True
        assert service.has_synonyms("pochoclo") is True
        assert service.has_synonyms("tomate") is False
        assert service.has_synonyms("") is False

    def test_get_canonical_term(self, service):
        """Test canonical term lookup."""
        assert service.get_canonical_term("Camote") == "batata"
        assert service.get_canonical_term("cotufas") == "palomitas de maíz"
        assert service.get_canonical_term("xyz") is None

    def test_get_region_info(self, service):
        """Test region info lookup."""
        assert service.get_region_info("boniato").country == "España"
        assert service.get_region_info("batata") is None
        assert service.get_region_info("xyz") is None

    def test_find_all_variations(self, service):
        """Test listing the synonyms of a canonical term."""
        variations = service.find_all_variations("aguacate")
        terms = [variation.original_term for variation in variations]

        assert sorted(terms) == ["avocado", "palta"]
        assert all(variation.canonical_term == "aguacate" for variation in variations)
        assert all(variation.confidence == 0.9 for variation in variations)

    def test_find_all_variations_accent_insensitive(self, service):
        """Test the canonical term is compared in normalized form."""
        terms = {variation.original_term for variation in service.find_all_variations("BROCOLI")}
        assert terms == {"brecol", "broccoli"}

    def test_find_all_variations_unknown(self, service):
        """Test unknown canonical terms have no variations."""
        assert service.find_all_variations("tomate") == []
        assert service.find_all_variations("") == []

    def test_stats(self, service):
        """Test index statistics."""
        stats = service.get_stats()

        assert stats["total_terms"] == len(service.index)
        assert stats["with_region_info"] == stats["total_terms"] - len(REGIONAL_VOCABULARY)

    def test_from_vocabulary(self):
        """Test building a service from a custom vocabulary."""
        service = SynonymService.from_vocabulary({"frijol": {"poroto": ["AR", "CL"]}})

        assert service.get_canonical_term("poroto") == "frijol"
        assert service.get_stats() == {"total_terms": 2, "with_region_info": 1}
