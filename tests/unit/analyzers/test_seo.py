"""
Tests for the SEO analyzer.
"""
import pytest

from writescore.analyzers.seo import (
    SEOAnalyzer,
    generate_recommendations,
    identify_issues,
    score_content_length,
    score_heading_structure,
    score_linking,
)

STUFFED_TEXT = (
    "Brewing great coffee starts with fresh beans. Grind the coffee right before brewing, "
    "measure water carefully, and keep equipment clean. Many baristas recommend filtered "
    "water because minerals change flavor. Coffee tastes best within weeks after roasting. "
    "Store coffee beans away from sunlight, moisture and strong odors."
)


class TestSEOAnalyzer:
    """Test suite for SEOAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        return SEOAnalyzer()

    def test_01_keyword_stuffing_names_keyword(self, analyzer):
        """A keyword above 5% density is reported by name."""
        result = analyzer.analyze(STUFFED_TEXT)

        stuffing = [i for i in result.issues if i.type == 'keyword-stuffing']
        assert len(stuffing) == 1
        assert 'coffee' in stuffing[0].message
        assert stuffing[0].examples == ('coffee',)
        assert stuffing[0].severity == 'high'

    def test_02_missing_headings_on_long_text(self, analyzer):
        result = analyzer.analyze(STUFFED_TEXT)

        assert any(i.type == 'structure' for i in result.issues)

    def test_03_empty_text(self, analyzer):
        result = analyzer.analyze("")

        assert result.heading_structure_score == 50
        assert result.keyword_optimization_score == 0
        assert result.internal_linking_score == 70
        assert result.meta_elements_score == 50
        assert result.content_length_score == 60
        assert result.score == 46
        assert result.issues == ()

    def test_04_structured_article(self, analyzer, article_text):
        result = analyzer.analyze(article_text)

        assert result.heading_structure_score >= 85
        assert result.internal_linking_score == 100
        assert not any(i.type == 'structure' for i in result.issues)

    def test_05_overall_is_mean_of_sub_scores(self, analyzer, article_text):
        result = analyzer.analyze(article_text)

        mean = (result.heading_structure_score + result.keyword_optimization_score
                + result.internal_linking_score + result.meta_elements_score
                + result.content_length_score) / 5
        assert abs(result.score - mean) <= 0.5


class TestHeadings:

    def test_01_multiple_h1_penalized(self):
        single = "<h1>Title</h1><p>Body</p>"
        double = "<h1>Title</h1><h1>Other</h1><p>Body</p>"

        # one top term appears in a heading: +5
        assert score_heading_structure(single) == 80
        assert score_heading_structure(double) == 45

    def test_02_no_headings(self):
        assert score_heading_structure("plain text only") == 50


class TestLinking:

    def test_01_site_url_marks_absolute_links_internal(self):
        link = '<a href="https://mysite.com/pricing">pricing details</a>'

        assert score_linking(link, site_url="https://mysite.com") == 100
        assert score_linking(link) == 95

    def test_02_generic_anchor_penalized(self):
        assert score_linking('<a href="/docs">click here</a>') == 75

    def test_03_no_links(self):
        assert score_linking("no links here") == 70

    def test_04_analyzer_uses_site_url(self):
        link = '<a href="https://mysite.com/pricing">pricing details</a>'
        result = SEOAnalyzer(site_url="https://mysite.com").analyze(link)

        assert result.internal_linking_score == 100


class TestContentLength:

    @pytest.mark.parametrize("words,expected", [
        (0, 60),
        (150, 60),
        (250, 85),
        (400, 100),
        (600, 100),
        (900, 95),
        (1500, 90),
        (2500, 80),
    ])
    def test_01_length_bands(self, words, expected):
        assert score_content_length(" ".join(["word"] * words)) == expected

    def test_02_tags_not_counted(self):
        text = "<p>" + " ".join(["word"] * 250) + "</p>"
        assert score_content_length(text) == 85


class TestRecommendations:

    def test_01_all_good(self):
        scores = dict.fromkeys(
            ['heading_structure', 'keyword_optimization', 'internal_linking',
             'meta_elements', 'content_length'], 90)
        assert generate_recommendations(scores) == [
            'Great SEO optimization! Consider A/B testing for further improvements'
        ]

    def test_02_weak_areas_listed(self):
        scores = {
            'heading_structure': 50,
            'keyword_optimization': 90,
            'internal_linking': 70,
            'meta_elements': 90,
            'content_length': 100,
        }
        recommendations = generate_recommendations(scores)

        assert len(recommendations) == 2
        assert recommendations[0].startswith('Improve heading structure')

    def test_03_short_text_has_no_structure_issue(self):
        issues = identify_issues("Short text without headings.")
        assert not any(i.type == 'structure' for i in issues)
