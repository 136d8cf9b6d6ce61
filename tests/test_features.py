import pytest

from news_summarizer.datatypes import SentenceCandidate
from news_summarizer.features import (
    extract_features, metric_categories, duplicate_trigram_count,
    has_duplicate_information, ScoringConfig, FINANCIAL, PERCENTAGE, SCALE, OTHER,
)


def features(text, index=1, total=10, paragraph=0):
    return extract_features(SentenceCandidate(text=text, paragraph_index=paragraph), index, total)


def test_metric_categories_are_classified_by_surface_cues():
    assert metric_categories("costs of $12 and 45% over 3 million units in 7 plants") == {
        FINANCIAL, PERCENTAGE, SCALE, OTHER,
    }
    assert metric_categories("revenue grew 5% to $5%") == {PERCENTAGE, FINANCIAL}
    assert metric_categories("no figures at all") == set()


def test_metric_diversity_counts_categories_not_occurrences():
    once = features("Revenue grew 5% in the quarter as expected by most analysts.")
    twice = features("Revenue grew 5% and 5% in the quarter as expected by most analysts.")
    assert once["metric_diversity"] == twice["metric_diversity"] == 2.0


def test_concept_links_match_whole_words_only():
    f = features("Sales rose but margins fell, however the butter business held up while others slid.")
    assert f["concept_links"] == pytest.approx(3 * 1.5)


def test_list_penalty_for_bullets():
    assert features("- The plant will add two hundred new jobs next spring.")["list_penalty"] == -5.0
    assert features("• The plant will add two hundred new jobs next spring.")["list_penalty"] == -5.0
    assert features("The plant will add two hundred new jobs next spring.")["list_penalty"] == 0.0


def test_position_decays_linearly():
    assert features("Plain sentence here.", index=0)["position"] == 1.0
    assert features("Plain sentence here.", index=5, total=10)["position"] == pytest.approx(1 - 0.5 * 0.15)


@pytest.mark.parametrize("index,paragraph,expected", [
    (0, 0, 0.5),
    (3, 0, 0.0),
    (3, 2, 0.5),
])
def test_paragraph_opening_bonus(index, paragraph, expected):
    assert features("Plain sentence here.", index=index, paragraph=paragraph)["paragraph_opening"] == expected


def test_content_patterns_count_every_match():
    f = features("Sales grew and profits grew while costs fell.")
    assert f["pattern_comparison"] == pytest.approx(3 * 1.2)
    assert f["pattern_numbers"] == 0.0


def test_numbers_pattern_weight():
    f = features("Output climbed 12% to $4 billion across 3 regions this year.")
    assert f["pattern_numbers"] == pytest.approx(3 * 1.5)


def test_length_penalty():
    assert features("Too few words in this one.")["length"] == -1.0
    assert features(" ".join(["word"] * 50) + ".")["length"] == pytest.approx(-0.5)
    assert features(" ".join(["word"] * 20) + ".")["length"] == 0.0


def test_topical_bonuses():
    f = features("The new regulation will have an effect on exporters.")
    assert f["regulatory"] == 2.0
    assert f["impact_statement"] == 1.5
    f = features("Exporters shipped more goods to neighbouring countries.")
    assert f["regulatory"] == 0.0
    assert f["impact_statement"] == 0.0


def test_duplicate_trigrams():
    repeated = "the market rose and the market rose and the market rose"
    assert duplicate_trigram_count(repeated) == 5
    assert has_duplicate_information(repeated)
    assert duplicate_trigram_count("no repeated phrases appear anywhere in this sentence") == 0
    assert not has_duplicate_information("no repeated phrases appear anywhere in this sentence")


def test_duplicate_limit_is_configurable():
    text = "prices went up and prices went up again"
    assert duplicate_trigram_count(text) == 1
    assert has_duplicate_information(text, ScoringConfig(duplicate_trigram_limit=0))
    assert not has_duplicate_information(text)


def test_weights_come_from_config():
    cfg = ScoringConfig(regulatory_bonus=10.0, list_penalty=1.0)
    f = extract_features(SentenceCandidate("- A new law passed today in the capital city.", 0), 0, 1, cfg)
    assert f["regulatory"] == 10.0
    assert f["list_penalty"] == -1.0


def test_redundancy_threshold_is_strictly_greater_than_limit():
    two = "prices went up and prices went up and"
    three = "prices went up and prices went up and prices"
    assert duplicate_trigram_count(two) == 2
    assert not has_duplicate_information(two)
    assert duplicate_trigram_count(three) == 3
    assert has_duplicate_information(three)
