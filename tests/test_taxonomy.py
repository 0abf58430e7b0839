import pytest

from transcript_tagger.intelligence.tagger import Tagger
from transcript_tagger.intelligence.taxonomy import (
    DEFAULT_TAXONOMY,
    EXTENDED_TAXONOMY,
    PRESETS,
    Category,
    Taxonomy,
    TaxonomyError,
    get_preset,
)


def test_default_taxonomy_order():
    assert DEFAULT_TAXONOMY.names == ["idea", "todo", "reminder", "journal", "work", "personal"]


def test_extended_taxonomy_order():
    assert EXTENDED_TAXONOMY.names == ["todo", "idea", "question", "reminder", "work", "personal", "health", "finance"]


def test_declared_overlaps():
    kws = DEFAULT_TAXONOMY.as_dict()
    assert "deadline" in kws["reminder"] and "deadline" in kws["work"]
    assert "don't forget" in kws["todo"] and "don't forget" in kws["reminder"]


def test_all_keywords_lowercase():
    for tax in PRESETS.values():
        for cat in tax:
            assert all(kw == kw.lower() for kw in cat.keywords)


def test_taxonomy_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_TAXONOMY.categories = ()
    assert isinstance(DEFAULT_TAXONOMY.categories[0].keywords, tuple)


def test_as_dict_returns_copies():
    d = DEFAULT_TAXONOMY.as_dict()
    d["idea"].append("zzz")
    assert "zzz" not in DEFAULT_TAXONOMY.as_dict()["idea"]


def test_from_mapping_keeps_order():
    tax = Taxonomy.from_mapping({"b": ["y"], "a": ["x"]})
    assert tax.names == ["b", "a"]
    assert len(tax) == 2
    assert list(tax)[0] == Category(name="b", keywords=("y",))


@pytest.mark.parametrize(
    "mapping",
    [
        {"": ["x"]},
        {"a": []},
        {"a": ["X"]},
        {"a": ["x", "x"]},
        {"a": [""]},
        {"a": ["  "]},
        {"a": [3]},
        {"a": "xyz"},
    ],
)
def test_invalid_mapping(mapping):
    with pytest.raises(TaxonomyError):
        Taxonomy.from_mapping(mapping)


def test_duplicate_category_names():
    with pytest.raises(TaxonomyError):
        Taxonomy(categories=(Category("a", ("x",)), Category("a", ("y",))))


def test_taxonomy_error_is_value_error():
    assert issubclass(TaxonomyError, ValueError)


def test_same_phrase_across_categories_allowed():
    tax = Taxonomy.from_mapping({"a": ["x"], "b": ["x"]})
    assert tax.names == ["a", "b"]


@pytest.mark.parametrize("name,expected", [("default", DEFAULT_TAXONOMY), (" Extended ", EXTENDED_TAXONOMY)])
def test_get_preset(name, expected):
    assert get_preset(name) is expected


@pytest.mark.parametrize("name", ["nope", "", None])
def test_get_preset_unknown(name):
    with pytest.raises(TaxonomyError):
        get_preset(name)


class TestConstructorsFreezeInput:
    """Direct constructors get the same validation and immutability as from_mapping."""

    def test_category_rejects_string_keywords(self):
        with pytest.raises(TaxonomyError):
            Category("a", "idea")

    def test_category_rejects_non_iterable_keywords(self):
        with pytest.raises(TaxonomyError):
            Category("a", 3)

    def test_category_validates_keywords(self):
        with pytest.raises(TaxonomyError):
            Category("a", ["Idea"])
        with pytest.raises(TaxonomyError):
            Category("", ["idea"])

    def test_category_copies_keyword_list(self):
        kws = ["x"]
        cat = Category("a", kws)
        kws.append("y")
        assert cat.keywords == ("x",)

    def test_taxonomy_copies_category_list(self):
        cats = [Category("a", ("x",))]
        tax = Taxonomy(categories=cats)
        tagger = Tagger(tax)
        assert tagger.tag("y") == []
        cats.append(Category("b", ("y",)))
        assert tax.names == ["a"]
        assert isinstance(tax.categories, tuple)
        assert tagger.tag("y") == []

    def test_taxonomy_rejects_non_category(self):
        with pytest.raises(TaxonomyError):
            Taxonomy(categories=(("a", ("x",)),))
