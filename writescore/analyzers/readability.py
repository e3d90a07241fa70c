#!/usr/bin/env python3
"""
Readability Analyzer - Classic reading-grade formulas.

Computes Flesch-Kincaid Grade, Flesch Reading Ease, Gunning Fog, SMOG,
Automated Readability Index and Coleman-Liau from sentence/word/syllable/
character counts. The five grade-level formulas are averaged into one
grade, which is mapped to a score band (grade 8-12 is the sweet spot for
general-audience content) and nudged by Reading Ease.
"""

from typing import List
import logging
import math
import re

from writescore.analyzers import text_metrics as tm
from writescore.analyzers.models import ReadabilityMetrics, ReadabilityResult

logger = logging.getLogger(__name__)

EMPTY_FEEDBACK = 'No content to analyze'

# (upper grade bound, base score); grades above the last bound score 60
GRADE_BANDS = (
    (6, 70),
    (8, 85),
    (12, 95),
    (16, 80),
)
GRADE_FALLBACK_SCORE = 60


def grade_band_score(grade_level: float) -> int:
    for upper, score in GRADE_BANDS:
        if grade_level <= upper:
            return score
    return GRADE_FALLBACK_SCORE


def reading_ease_adjustment(reading_ease: float) -> int:
    if reading_ease >= 90:
        return 5
    if reading_ease >= 80:
        return 3
    if reading_ease >= 70:
        return 1
    if reading_ease < 30:
        return -10
    return 0


def generate_feedback(reading_ease: float, grade_level: float, words: int, sentences: int) -> List[str]:
    feedback = []
    avg_words_per_sentence = words / sentences

    if reading_ease >= 90:
        feedback.append('Excellent readability - very easy to understand')
    elif reading_ease >= 80:
        feedback.append('Good readability - easy to read')
    elif reading_ease >= 70:
        feedback.append('Fair readability - fairly easy to read')
    elif reading_ease >= 60:
        feedback.append('Acceptable readability - standard difficulty')
    elif reading_ease >= 50:
        feedback.append('Difficult to read - consider simplifying')
    else:
        feedback.append('Very difficult to read - needs significant simplification')

    if grade_level <= 8:
        feedback.append('Appropriate for general audiences')
    elif grade_level <= 12:
        feedback.append('Good for educated general audience')
    elif grade_level <= 16:
        feedback.append('Academic level - may be too complex for general audience')
    else:
        feedback.append('Graduate level - likely too complex for most readers')

    if avg_words_per_sentence > 25:
        feedback.append('Consider shortening sentences for better readability')
    elif avg_words_per_sentence > 20:
        feedback.append('Sentence length is good but could be more varied')
    else:
        feedback.append('Good sentence length variety')

    return feedback


class ReadabilityAnalyzer:
    """Stateless reading-grade estimator."""

    name = 'readability'

    def analyze(self, text: str) -> ReadabilityResult:
        if not text or not text.strip():
            return ReadabilityResult(score=0, feedback=[EMPTY_FEEDBACK])

        sentences = tm.count_sentences(text)
        words = tm.count_words(text)
        syllables = tm.count_syllables(text)
        complex_words = tm.count_complex_words(text)
        characters = len(re.sub(r"\s", "", text))

        words_per_sentence = words / sentences
        syllables_per_word = syllables / words

        flesch_kincaid_grade = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
        flesch_reading_ease = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
        gunning_fog = 0.4 * (words_per_sentence + 100 * (complex_words / words))
        smog = 1.0430 * math.sqrt(complex_words * (30 / sentences)) + 3.1291
        ari = 4.71 * (characters / words) + 0.5 * words_per_sentence - 21.43
        letters_per_100 = (characters / words) * 100
        sentences_per_100 = (sentences / words) * 100
        coleman_liau = 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8

        grade_level = (flesch_kincaid_grade + gunning_fog + smog + ari + coleman_liau) / 5

        score = grade_band_score(grade_level) + reading_ease_adjustment(flesch_reading_ease)
        feedback = generate_feedback(flesch_reading_ease, grade_level, words, sentences)

        logger.debug(f"Readability: grade={grade_level:.1f}, ease={flesch_reading_ease:.1f}, score={score}")

        return ReadabilityResult(
            score=tm.clamp_score(tm.round_half_up(score)),
            grade_level=tm.round_half_up(grade_level, 1),
            reading_ease=tm.round_half_up(flesch_reading_ease, 1),
            flesch_kincaid_grade=tm.round_half_up(flesch_kincaid_grade, 1),
            flesch_reading_ease=tm.round_half_up(flesch_reading_ease, 1),
            gunning_fog_index=tm.round_half_up(gunning_fog, 1),
            smog_index=tm.round_half_up(smog, 1),
            automated_readability_index=tm.round_half_up(ari, 1),
            coleman_liau_index=tm.round_half_up(coleman_liau, 1),
            metrics=ReadabilityMetrics(
                sentences=sentences,
                words=words,
                syllables=syllables,
                avg_sentence_length=tm.round_half_up(words_per_sentence, 1),
                avg_syllables_per_word=tm.round_half_up(syllables_per_word, 1),
            ),
            feedback=feedback,
        )
