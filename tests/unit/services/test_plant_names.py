"""Unit tests for Latin binomial extraction."""

from naijamed_atlas.models.article import ArticleRecord
from naijamed_atlas.services.plant_names import extract_plant_names


def _article(title: str, abstract: str, pmid: str = "1") -> ArticleRecord:
    return ArticleRecord(pmid=pmid, title=title, abstract=abstract, journal="J")


def test_in_vitro_rejected_moringa_kept():
    article = _article("leaf study", "In vitro studies on Moringa oleifera")

    names = extract_plant_names([article])

    assert "Moringa oleifera" in names
    assert "In vitro" not in names


def test_short_epithets_are_rejected():
    article = _article("note", "Results of the assay. Extracts in rats.")

    assert extract_plant_names([article]) == []


def test_authority_abbreviation_is_not_part_of_name():
    article = _article("note", "leaves of Vernonia amygdalina Del. and Ocimum gratissimum L. were")

    assert extract_plant_names([article]) == ["Vernonia amygdalina", "Ocimum gratissimum"]


def test_blacklisted_places_and_phrases_are_rejected():
    article = _article(
        "samples from West Africa and South Africa",
        "fed ad libitum; see Smith et al. Per cent yields were low.",
    )

    assert extract_plant_names([article]) == []


def test_order_of_first_occurrence_and_deduplication():
    articles = [
        _article("Khaya senegalensis bark", "compared with Moringa oleifera", pmid="1"),
        _article("Moringa oleifera seeds", "and Khaya senegalensis again", pmid="2"),
    ]

    assert extract_plant_names(articles) == ["Khaya senegalensis", "Moringa oleifera"]


def test_no_articles_returns_empty_list():
    assert extract_plant_names([]) == []


def test_epithet_must_end_at_a_word_boundary():
    article = _article("note", "Cells grew Thereafter slowlyX then")

    assert extract_plant_names([article]) == ["Cells grew"]
