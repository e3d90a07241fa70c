#!/usr/bin/env python3
"""
English Proficiency Analyzer - Heuristics tuned to second-language patterns.

Four sub-scores (fluency, grammar accuracy, vocabulary usage, sentence
complexity) are averaged into the overall score, which also maps onto a
coarse language-confidence label.
"""

from collections import Counter
from typing import Iterable, List, Tuple
import logging

from writescore.analyzers import catalogs
from writescore.analyzers import text_metrics as tm
from writescore.analyzers.catalogs import PatternRule
from writescore.analyzers.models import EnglishProficiencyResult, Issue

logger = logging.getLogger(__name__)

# (minimum score, label), checked in order
CONFIDENCE_LEVELS = (
    (90, 'native'),
    (80, 'advanced'),
    (65, 'intermediate'),
)
MAX_GRAMMAR_PENALTY = 40


def _weighted_matches(rules: Iterable[PatternRule], text: str) -> float:
    return sum(tm.count_matches(rule.pattern, text) * rule.weight for rule in rules)


def score_fluency(text: str) -> int:
    score = 80

    sentences = tm.split_sentences(text)
    words = tm.split_words(text)
    if not sentences or not words:
        return 0

    avg_words = len(words) / len(sentences)
    if 10 <= avg_words <= 25:
        score += 10
    elif avg_words < 5 or avg_words > 35:
        score -= 15

    connectives = tm.count_present(catalogs.FLUENCY_CONNECTIVES, text.lower())
    if connectives > 0:
        score += min(10, connectives * 2)

    starters = Counter(s for s in (tm.first_word(sentence) for sentence in sentences) if s)
    if any(count > 3 for count in starters.values()):
        score -= 15

    score -= _weighted_matches(catalogs.UNNATURAL_COLLOCATIONS, text)

    return int(tm.clamp_score(score))


def score_grammar_accuracy(text: str) -> int:
    score = 85

    score -= min(MAX_GRAMMAR_PENALTY, _weighted_matches(catalogs.ESL_GRAMMAR_RULES, text))
    score -= _weighted_matches(catalogs.SUBJECT_VERB_RULES, text)

    return int(tm.clamp_score(score))


def score_vocabulary_usage(text: str) -> int:
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
        elif richness < 0.4:
            score -= 10

    advanced = tm.count_present(catalogs.ADVANCED_WORDS, lower_text)
    if advanced > 3:
        score += 15
    elif advanced > 1:
        score += 10
    elif advanced > 0:
        score += 5

    simple = tm.count_whole_words(catalogs.SIMPLE_WORDS, lower_text)
    if simple > len(tokens) / 50:
        score -= 10

    score -= _weighted_matches(catalogs.WORD_FORM_RULES, text)

    return int(tm.clamp_score(score))


def sentence_complexity(sentence: str) -> int:
    """Length, clause and grammatical-structure points for one sentence."""
    word_count = len(sentence.split())
    # split() keeps captured markers, so each marker adds two pieces
    clauses = len(catalogs.CLAUSE_SPLIT_RE.split(sentence))

    complexity = 0
    if word_count > 20:
        complexity += 3
    elif word_count > 15:
        complexity += 2
    elif word_count > 10:
        complexity += 1
    elif word_count < 5:
        complexity -= 1

    if clauses > 3:
        complexity += 2
    elif clauses > 2:
        complexity += 1

    for rule in catalogs.COMPLEX_STRUCTURE_RULES:
        complexity += tm.count_matches(rule.pattern, sentence)

    return complexity


def score_sentence_complexity(text: str) -> int:
    score = 70

    sentences = tm.split_sentences(text)
    if not sentences:
        return 0

    complexities = [sentence_complexity(s) for s in sentences]
    complex_sentences = sum(1 for c in complexities if c > 3)
    avg_complexity = sum(complexities) / len(sentences)

    if 1.5 <= avg_complexity <= 3:
        score += 15
    elif 1 <= avg_complexity <= 4:
        score += 10
    elif avg_complexity < 0.5:
        score -= 15
    elif avg_complexity > 5:
        score -= 10

    complex_ratio = complex_sentences / len(sentences)
    if 0.2 <= complex_ratio <= 0.6:
        score += 10
    elif complex_ratio > 0.8:
        score -= 5

    return int(tm.clamp_score(score))


def language_confidence(score: int) -> str:
    for minimum, label in CONFIDENCE_LEVELS:
        if score >= minimum:
            return label
    return 'beginner'


def identify_issues(text: str) -> List[Issue]:
    issues = []
    for rule in catalogs.LANGUAGE_ISSUE_RULES:
        examples = [m.group(0).strip() for m in rule.pattern.finditer(text)]
        if examples:
            issues.append(Issue(
                type=rule.label,
                message=rule.message,
                severity=rule.severity,
                examples=examples,
            ))
    return issues


def _band(score: int, messages: Tuple[str, str, str, str]) -> str:
    if score >= 85:
        return messages[0]
    if score >= 75:
        return messages[1]
    if score >= 65:
        return messages[2]
    return messages[3]


def generate_feedback(fluency: int, grammar: int, vocabulary: int, complexity: int) -> List[str]:
    return [
        _band(fluency, (
            'Excellent fluency and natural expression',
            'Good fluency with minor issues',
            'Adequate fluency, some improvement needed',
            'Fluency needs significant improvement',
        )),
        _band(grammar, (
            'Strong grammatical accuracy',
            'Good grammar with minor errors',
            'Acceptable grammar, focus on common errors',
            'Grammar needs substantial work',
        )),
        _band(vocabulary, (
            'Rich and appropriate vocabulary usage',
            'Good vocabulary range',
            'Adequate vocabulary, could be expanded',
            'Limited vocabulary range',
        )),
        _band(complexity, (
            'Excellent sentence complexity and variety',
            'Good sentence structure variety',
            'Adequate complexity, add more variety',
            'Sentences are too simple or too complex',
        )),
    ]


class EnglishProficiencyAnalyzer:
    """Stateless fluency/grammar/vocabulary/complexity scorer."""

    name = 'english_proficiency'

    def analyze(self, text: str) -> EnglishProficiencyResult:
        fluency = score_fluency(text)
        grammar = score_grammar_accuracy(text)
        vocabulary = score_vocabulary_usage(text)
        complexity = score_sentence_complexity(text)

        overall = tm.round_half_up((fluency + grammar + vocabulary + complexity) / 4)

        return EnglishProficiencyResult(
            score=overall,
            fluency_score=fluency,
            grammar_accuracy_score=grammar,
            vocabulary_usage_score=vocabulary,
            sentence_complexity_score=complexity,
            language_confidence=language_confidence(overall),
            issues=identify_issues(text),
            feedback=generate_feedback(fluency, grammar, vocabulary, complexity),
        )
