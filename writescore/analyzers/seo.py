#!/usr/bin/env python3
"""
SEO Analyzer - Heading, keyword, linking, meta-shape and length heuristics.

Works on plain text with optional lightweight HTML markup (<h1>-<h4>, <a>).
"""

from collections import Counter
from typing import Dict, List, Optional
import logging
import re

from writescore.analyzers import catalogs
from writescore.analyzers import text_metrics as tm
from writescore.analyzers.models import Issue, SEOResult

logger = logging.getLogger(__name__)

HEADING_RES = {
    level: re.compile(rf"<h{level}[^>]*>.*?</h{level}>", re.IGNORECASE)
    for level in (1, 2, 3, 4)
}
LINK_RE = re.compile(r"""<a[^>]+href=["'][^"']*["'][^>]*>.*?</a>""", re.IGNORECASE)
ANCHOR_TEXT_RE = re.compile(r">([^<]*)<")
PHRASE_RE = re.compile(r"\b\w+\s+\w+\s+\w+\b")
TITLE_RE = re.compile(r"^.{30,60}$")

STUFFING_DENSITY = 5.0
HEADINGLESS_MAX_CHARS = 300

RECOMMENDATIONS = (
    ('heading_structure', 'Improve heading structure with proper H1, H2, H3 hierarchy'),
    ('keyword_optimization', 'Optimize keyword usage and avoid over-optimization'),
    ('internal_linking', 'Add internal links with descriptive anchor text'),
    ('meta_elements', 'Include meta-friendly introductory content'),
    ('content_length', 'Adjust content length for optimal SEO performance'),
)


def _content_frequencies(tokens: List[str]) -> Counter:
    return Counter(t for t in tokens if t not in catalogs.SEO_STOP_WORDS)


def score_heading_structure(content: str) -> int:
    score = 60

    headings = {level: regex.findall(content) for level, regex in HEADING_RES.items()}

    h1_count = len(headings[1])
    if h1_count == 1:
        score += 15
    elif h1_count == 0:
        score -= 10
    else:
        score -= 20

    if headings[2]:
        score += 10
    if headings[3]:
        score += 5

    heading_text = ' '.join(
        tm.strip_tags(tag).lower()
        for level in (1, 2, 3, 4)
        for tag in headings[level]
    )

    if heading_text:
        frequencies = Counter(tm.word_tokens(content, min_length=4))
        in_headings = sum(1 for word in tm.top_terms(frequencies, 5) if word in heading_text)
        if in_headings > 2:
            score += 15
        elif in_headings > 0:
            score += 5

    return int(tm.clamp_score(score))


def score_keyword_optimization(content: str) -> int:
    score = 70

    tokens = tm.word_tokens(content, min_length=4)
    if not tokens:
        return 0

    frequencies = _content_frequencies(tokens)
    for word in tm.top_terms(frequencies, 3):
        density = frequencies[word] / len(tokens) * 100
        if 1 <= density <= 3:
            score += 10
        elif 3 < density <= 5:
            score += 5
        elif density > 5:
            score -= 10

    phrases = Counter(PHRASE_RE.findall(content.lower()))
    if any(count > 1 for count in phrases.values()):
        score += 10

    return int(tm.clamp_score(score))


def _has_scheme(link: str) -> bool:
    return 'http://' in link or 'https://' in link


def score_linking(content: str, site_url: Optional[str] = None) -> int:
    score = 70

    links = LINK_RE.findall(content)

    def on_site(link: str) -> bool:
        return bool(site_url) and site_url in link

    internal = [link for link in links if not _has_scheme(link) or on_site(link)]
    external = [link for link in links if _has_scheme(link) and not on_site(link)]

    if internal:
        score += 15
    if external:
        score += 10

    anchors = []
    for link in links:
        match = ANCHOR_TEXT_RE.search(link)
        anchors.append(match.group(1).lower() if match else '')
    generic = [a for a in anchors if a in catalogs.GENERIC_ANCHORS]

    if not generic and links:
        score += 15
    elif len(generic) < len(links) / 2:
        score += 5
    elif generic:
        score -= 10

    return int(tm.clamp_score(score))


def score_meta_elements(content: str) -> int:
    score = 50

    sentences = tm.split_sentences(content)
    first_sentence = sentences[0].strip() if sentences else ''
    if 120 <= len(first_sentence) <= 160:
        score += 20
    elif 100 <= len(first_sentence) <= 200:
        score += 10

    potential_title = tm.strip_tags(content.split('\n')[0]).strip()
    if TITLE_RE.match(potential_title):
        score += 20
    elif potential_title:
        score += 10

    markers = tm.count_present(catalogs.STRUCTURED_CONTENT_MARKERS, content.lower())
    if markers > 2:
        score += 10

    return int(tm.clamp_score(score))


def score_content_length(content: str) -> int:
    word_count = len(tm.strip_tags(content).split())

    if 300 <= word_count <= 600:
        return 100
    if 600 <= word_count <= 1200:
        return 95
    if 200 <= word_count <= 300:
        return 85
    if 1200 <= word_count <= 2000:
        return 90
    if word_count < 200:
        return 60
    return 80


def generate_recommendations(scores: Dict[str, int]) -> List[str]:
    recommendations = [message for key, message in RECOMMENDATIONS if scores[key] < 80]
    if not recommendations:
        recommendations.append('Great SEO optimization! Consider A/B testing for further improvements')
    return recommendations


def identify_issues(content: str) -> List[Issue]:
    issues = []

    tokens = tm.word_tokens(content, min_length=4)
    frequencies = _content_frequencies(tokens)
    stuffed = [
        word for word, count in frequencies.items()
        if count / len(tokens) * 100 > STUFFING_DENSITY
    ]
    if stuffed:
        issues.append(Issue(
            type='keyword-stuffing',
            message=f"Potential keyword stuffing detected for: {', '.join(stuffed)}",
            severity='high',
            examples=stuffed,
        ))

    has_headings = any(tag in content for tag in ('<h1', '<h2', '<h3'))
    if not has_headings and len(content) > HEADINGLESS_MAX_CHARS:
        issues.append(Issue(
            type='structure',
            message='No headings found - add H1, H2, H3 tags for better structure',
            severity='medium',
        ))

    return issues


class SEOAnalyzer:
    """Stateless SEO scorer.

    ``site_url`` marks absolute links pointing at the publishing site as
    internal; without it only relative links count as internal.
    """

    name = 'seo'

    def __init__(self, site_url: Optional[str] = None):
        self.site_url = site_url or None

    def analyze(self, content: str) -> SEOResult:
        scores = {
            'heading_structure': score_heading_structure(content),
            'keyword_optimization': score_keyword_optimization(content),
            'internal_linking': score_linking(content, self.site_url),
            'meta_elements': score_meta_elements(content),
            'content_length': score_content_length(content),
        }
        overall = tm.round_half_up(sum(scores.values()) / len(scores))

        logger.debug(f"SEO sub-scores: {scores}")

        return SEOResult(
            score=overall,
            heading_structure_score=scores['heading_structure'],
            keyword_optimization_score=scores['keyword_optimization'],
            internal_linking_score=scores['internal_linking'],
            meta_elements_score=scores['meta_elements'],
            content_length_score=scores['content_length'],
            recommendations=generate_recommendations(scores),
            issues=identify_issues(content),
        )
