#!/usr/bin/env python3
"""
Writing Quality Analyzer - Grammar, structure, vocabulary and coherence.

Each sub-score starts from a fixed base and is adjusted by heuristics; the
overall score is their unweighted mean.
"""

from collections import Counter
from typing import List, Tuple
import logging

from writescore.analyzers import catalogs
from writescore.analyzers import text_metrics as tm
from writescore.analyzers.models import Issue, WritingQualityResult

logger = logging.getLogger(__name__)

FRAGMENT_MAX_WORDS = 3
RUN_ON_MIN_WORDS = 40


def score_grammar(text: str) -> Tuple[int, int]:
    """Grammar score (base 100) and the number of run-on sentences found."""
    score = 100

    for rule in catalogs.GRAMMAR_CONFUSION_RULES:
        matches = tm.count_matches(rule.pattern, text)
        if matches:
            score -= matches * 2
            logger.debug(f"Potential {rule.label} ({matches} instances)")

    lengths = tm.sentence_lengths(tm.split_sentences(text))
    fragments = sum(1 for n in lengths if n < FRAGMENT_MAX_WORDS)
    run_ons = sum(1 for n in lengths if n > RUN_ON_MIN_WORDS)
    score -= fragments * 3
    score -= run_ons * 5

    return int(tm.clamp_score(score)), run_ons


def score_structure(text: str) -> int:
    score = 80

    sentences = tm.split_sentences(text)
    words = tm.split_words(text)
    paragraphs = tm.split_paragraphs(text)

    lengths = tm.sentence_lengths(sentences)
    avg_sentence_length = tm.mean(lengths)
    if 15 < avg_sentence_length < 25:
        score += 5
    if tm.variance(lengths) > 20:
        score += 10

    if len(paragraphs) > 1:
        score += 10
        avg_paragraph_length = tm.mean([len(p.split()) for p in paragraphs])
        if 30 < avg_paragraph_length < 150:
            score += 5

    lower_text = text.lower()
    transitions = tm.count_present(catalogs.TRANSITION_PHRASES, lower_text)
    if transitions > len(words) / 200:
        score += 5

    if len(text) > 500 and paragraphs:
        first_paragraph = paragraphs[0].lower()
        last_paragraph = paragraphs[-1].lower()
        if any(marker in first_paragraph for marker in catalogs.INTRO_MARKERS):
            score += 5
        if any(marker in last_paragraph for marker in catalogs.CONCLUSION_MARKERS):
            score += 5

    return int(tm.clamp_score(score))


def score_vocabulary(text: str) -> int:
    score = 75

    lower_text = text.lower()
    tokens = tm.word_tokens(text)

    if tokens:
        richness = tm.type_token_ratio(tokens)
        if richness > 0.7:
            score += 15
        elif richness > 0.6:
            score += 10
        elif richness > 0.5:
            score += 5

    sophisticated = tm.count_present(catalogs.SOPHISTICATED_WORDS, lower_text)
    if sophisticated > 0:
        score += min(10, sophisticated * 2)

    weak = tm.count_whole_words(catalogs.WEAK_WORDS, lower_text)
    if weak > len(tokens) / 100:
        score -= min(15, weak)

    frequencies = Counter(
        t for t in tokens if t not in catalogs.COMMON_WORDS and len(t) > 3
    )
    overused = [word for word, count in frequencies.items() if count > 5]
    if overused:
        score -= min(10, len(overused) * 2)

    return int(tm.clamp_score(score))


def _positions(lower_text: str, word: str) -> List[int]:
    positions = []
    index = lower_text.find(word)
    while index != -1:
        positions.append(index)
        index = lower_text.find(word, index + 1)
    return positions


def score_coherence(text: str) -> int:
    score = 80

    sentences = tm.split_sentences(text)
    lower_text = text.lower()

    flow = tm.count_present(catalogs.FLOW_INDICATORS, lower_text)
    if flow > len(sentences) / 10:
        score += 10

    frequencies = Counter(t for t in tm.word_tokens(text) if len(t) > 4)
    for word in tm.top_terms(frequencies, 10)[:5]:
        positions = [p / len(text) for p in _positions(lower_text, word)]
        if len(positions) > 1 and max(positions) - min(positions) > 0.5:
            score += 2

    return int(tm.clamp_score(score))


def find_issues(text: str, run_ons: int) -> List[Issue]:
    issues = []

    for rule in catalogs.PASSIVE_VOICE_RULES:
        matches = tm.count_matches(rule.pattern, text)
        if matches > 3:
            issues.append(Issue(
                type='style',
                message=f"Frequent passive voice usage ({matches} instances)",
                severity='medium',
                suggestion='Consider using more active voice constructions',
            ))
            break

    if run_ons > 0:
        issues.append(Issue(
            type='run-on',
            message=f"{run_ons} very long sentence(s) over {RUN_ON_MIN_WORDS} words (potential run-ons)",
            severity='high' if run_ons >= 3 else 'medium',
            suggestion='Split long sentences into shorter, focused ones',
        ))

    paragraphs = tm.split_paragraphs(text)
    if len(paragraphs) == 1 and len(text) > 300:
        issues.append(Issue(
            type='structure',
            message='Consider breaking long content into multiple paragraphs',
            severity='medium',
        ))

    short_paragraphs = [p for p in paragraphs if len(p.split()) < 20]
    if len(short_paragraphs) > len(paragraphs) / 2:
        issues.append(Issue(
            type='structure',
            message='Many paragraphs are quite short - consider expanding ideas',
            severity='low',
        ))

    counts = Counter(tm.word_tokens(text, min_length=4))
    overused = sorted(
        ((word, count) for word, count in counts.items()
         if count > 4 and word not in catalogs.OVERUSE_EXEMPT_WORDS),
        key=lambda item: -item[1],
    )
    if overused:
        word, count = overused[0]
        issues.append(Issue(
            type='vocabulary',
            message=f'Word "{word}" appears {count} times - consider using synonyms',
            severity='medium' if count > 6 else 'low',
        ))

    return issues


def _band(score: int, messages: Tuple[str, str, str, str]) -> str:
    if score >= 90:
        return messages[0]
    if score >= 80:
        return messages[1]
    if score >= 70:
        return messages[2]
    return messages[3]


def generate_feedback(grammar: int, structure: int, vocabulary: int, coherence: int,
                      issues: List[Issue]) -> List[str]:
    feedback = [
        _band(grammar, (
            'Excellent grammar and mechanics',
            'Good grammar with minor issues',
            'Adequate grammar, some improvement needed',
            'Grammar needs significant improvement',
        )),
        _band(structure, (
            'Well-structured and organized content',
            'Good structure with clear flow',
            'Adequate structure, could be improved',
            'Structure needs significant improvement',
        )),
        _band(vocabulary, (
            'Rich and varied vocabulary',
            'Good vocabulary usage',
            'Adequate vocabulary, consider expanding',
            'Vocabulary could be more varied and sophisticated',
        )),
        _band(coherence, (
            'Excellent coherence and flow',
            'Good logical flow',
            'Generally coherent with some gaps',
            'Coherence and logical flow need improvement',
        )),
    ]

    if any(issue.severity == 'high' for issue in issues):
        feedback.append('Address critical writing issues identified')

    return feedback


class WritingQualityAnalyzer:
    """Stateless grammar/structure/vocabulary/coherence scorer."""

    name = 'writing_quality'

    def analyze(self, text: str) -> WritingQualityResult:
        grammar, run_ons = score_grammar(text)
        structure = score_structure(text)
        vocabulary = score_vocabulary(text)
        coherence = score_coherence(text)

        issues = find_issues(text, run_ons)
        overall = tm.round_half_up((grammar + structure + vocabulary + coherence) / 4)

        return WritingQualityResult(
            score=overall,
            grammar_score=grammar,
            structure_score=structure,
            vocabulary_score=vocabulary,
            coherence_score=coherence,
            issues=issues,
            feedback=generate_feedback(grammar, structure, vocabulary, coherence, issues),
        )
