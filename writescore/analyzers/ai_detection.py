#!/usr/bin/env python3
"""
AI Detection Analyzer - Heuristic human-vs-machine authorship estimate.

None of this is a trained language model. Each signal is a cheap statistic
that tends to differ between human and machine text:

- perplexity: bigram "surprise" over the sample's own word frequencies
- burstiness: irregularity of sentence lengths
- vocabulary diversity: type-token ratio and filler-word clustering
- sentence variation: starter/structure variety and canonical AI lead-ins
- stylometry: function-word ratio, punctuation density, personal markers

The blended score is a human-likelihood: 100 means very likely human.
"""

from collections import Counter
from typing import Dict, List, Sequence, Tuple
import logging
import math
import re

from writescore.analyzers import catalogs
from writescore.analyzers import text_metrics as tm
from writescore.analyzers.models import AIDetectionAnalysis, AIDetectionResult, Indicator

logger = logging.getLogger(__name__)

SIGNAL_WEIGHTS = {
    'perplexity': 0.25,
    'burstiness': 0.20,
    'vocabulary': 0.20,
    'sentences': 0.20,
    'stylometry': 0.15,
}

NEUTRAL_SIGNAL = 50
MIN_PROBABILITY = 0.001
STRONG_INDICATOR_CONFIDENCE = 0.7


def bigram_surprises(words: Sequence[str]) -> List[float]:
    """Negative log2 of P(next | current) for every adjacent word pair.

    P is the bigram count (floored at 1) over the count of the preceding
    word, itself floored at MIN_PROBABILITY before taking the log.
    """
    word_freq = Counter(words)
    bigram_freq = Counter(zip(words, words[1:]))

    surprises = []
    for current, following in zip(words, words[1:]):
        probability = max(1, bigram_freq[(current, following)]) / word_freq[current]
        surprises.append(-math.log2(max(probability, MIN_PROBABILITY)))
    return surprises


def score_perplexity(text: str) -> float:
    words = tm.word_tokens(text)
    if len(words) < 2:
        return NEUTRAL_SIGNAL

    surprises = bigram_surprises(words)
    score = min(100, tm.mean(surprises) * 10)

    # machine text is unnaturally even in how surprising it is
    if tm.variance(surprises) < 0.5:
        score -= 20

    return tm.clamp_score(score)


def detect_length_patterns(lengths: Sequence[int]) -> Tuple[bool, bool]:
    """(is_repeating, is_too_uniform) for a run of sentence lengths."""
    if len(lengths) < 4:
        return False, False

    is_repeating = False
    for pattern_length in range(2, len(lengths) // 2 + 1):
        pattern = list(lengths[:pattern_length])
        matches = sum(
            1 for i in range(pattern_length, len(lengths), pattern_length)
            if list(lengths[i:i + pattern_length]) == pattern
        )
        if matches >= 2:
            is_repeating = True
            break

    return is_repeating, tm.variance(lengths) < 4


def score_burstiness(text: str) -> float:
    sentences = tm.split_sentences(text)
    if len(sentences) < 3:
        return NEUTRAL_SIGNAL

    lengths = tm.sentence_lengths(sentences)
    mean = tm.mean(lengths)
    std_dev = tm.std_dev(lengths)
    burstiness = (std_dev - mean) / (std_dev + mean)

    score = max(0.0, burstiness) * 100
    is_repeating, is_too_uniform = detect_length_patterns(lengths)
    if is_repeating:
        score -= 30
    if is_too_uniform:
        score -= 20

    return tm.clamp_score(score + 50)


def score_vocabulary_diversity(text: str) -> float:
    words = tm.word_tokens(text, min_length=3)
    if len(words) < 10:
        return NEUTRAL_SIGNAL

    score = tm.type_token_ratio(words) * 100

    fillers = tm.count_present(catalogs.AI_FILLER_WORDS, text.lower())
    if fillers > 3:
        score -= 20

    if tm.variance(list(Counter(words).values())) < 1:
        score -= 15

    return tm.clamp_score(score)


def sentence_structure(sentence: str) -> str:
    trimmed = sentence.strip().lower()

    if '?' in trimmed:
        return 'question'
    if '!' in trimmed:
        return 'exclamation'
    if ',' in trimmed and ' and ' in trimmed:
        return 'compound_complex'
    if ',' in trimmed:
        return 'complex'
    if ' and ' in trimmed or ' but ' in trimmed or ' or ' in trimmed:
        return 'compound'

    word_count = len(trimmed.split())
    if word_count > 20:
        return 'long_simple'
    if word_count < 5:
        return 'short_simple'
    return 'simple'


def score_sentence_variation(text: str) -> float:
    sentences = tm.split_sentences(text)
    if len(sentences) < 3:
        return NEUTRAL_SIGNAL

    score = 70

    starters = {s for s in (tm.first_word(sentence) for sentence in sentences) if s}
    starter_variety = len(starters) / len(sentences)
    if starter_variety > 0.7:
        score += 15
    elif starter_variety < 0.3:
        score -= 20

    structures = [sentence_structure(s) for s in sentences]
    structure_variety = len(set(structures)) / len(structures)
    if structure_variety > 0.6:
        score += 15
    elif structure_variety < 0.4:
        score -= 15

    lead_ins = sum(
        1 for sentence in sentences
        if any(rule.pattern.search(sentence.strip()) for rule in catalogs.AI_LEAD_IN_RULES)
    )
    if lead_ins > len(sentences) * 0.3:
        score -= 25

    return tm.clamp_score(score)


def score_stylometry(text: str) -> float:
    words = re.findall(r"\b\w+\b", text)
    sentences = tm.split_sentences(text)
    if not words or not sentences:
        return NEUTRAL_SIGNAL

    score = 60

    function_words = sum(1 for w in words if w.lower() in catalogs.FUNCTION_WORDS)
    function_ratio = function_words / len(words)
    if 0.35 <= function_ratio <= 0.65:
        score += 15
    else:
        score -= 10

    punctuation_ratio = tm.count_matches(catalogs.STYLOMETRY_PUNCTUATION_RE, text) / len(words)
    if 0.08 <= punctuation_ratio <= 0.25:
        score += 10
    elif punctuation_ratio > 0.3:
        score -= 15

    personal = sum(tm.count_matches(rule.pattern, text) for rule in catalogs.PERSONAL_MARKER_RULES)
    if personal > 0:
        score += min(15, personal * 3)

    return tm.clamp_score(score)


def identify_indicators(text: str, signals: Dict[str, float]) -> List[Indicator]:
    indicators = []

    if signals['perplexity'] > 80:
        indicators.append(Indicator(
            type='human', feature='High perplexity', confidence=0.8,
            description='Unpredictable word choices suggest human creativity',
        ))
    elif signals['perplexity'] < 30:
        indicators.append(Indicator(
            type='ai', feature='Low perplexity', confidence=0.7,
            description='Very predictable word patterns suggest AI generation',
        ))

    if signals['burstiness'] > 75:
        indicators.append(Indicator(
            type='human', feature='High burstiness', confidence=0.7,
            description='Varied sentence lengths indicate natural human writing',
        ))
    elif signals['burstiness'] < 25:
        indicators.append(Indicator(
            type='ai', feature='Low burstiness', confidence=0.6,
            description='Uniform sentence patterns suggest AI generation',
        ))

    lower_text = text.lower()
    for phrase in catalogs.AI_TYPICAL_PHRASES:
        if phrase in lower_text:
            indicators.append(Indicator(
                type='ai', feature='AI-typical phrasing', confidence=0.6,
                description=f'Contains phrase commonly used by AI: "{phrase}"',
            ))

    if any(rule.pattern.search(text) for rule in catalogs.COLLOQUIAL_MARKER_RULES):
        indicators.append(Indicator(
            type='human', feature='Colloquial expressions', confidence=0.5,
            description='Contains informal expressions typical of human writing',
        ))

    return indicators


def determine_confidence(indicators: List[Indicator]) -> str:
    strong = sum(1 for i in indicators if i.confidence > STRONG_INDICATOR_CONFIDENCE)
    if strong >= 2:
        return 'high'
    if strong >= 1 or len(indicators) >= 3:
        return 'medium'
    return 'low'


def generate_feedback(score: int, indicators: List[Indicator]) -> List[str]:
    feedback = []

    if score >= 80:
        feedback.append('Strong indicators of human authorship')
    elif score >= 60:
        feedback.append('Likely human-written with some AI characteristics')
    elif score >= 40:
        feedback.append('Mixed indicators - could be human or AI')
    else:
        feedback.append('Strong indicators suggest possible AI generation')

    ai_count = sum(1 for i in indicators if i.type == 'ai')
    human_count = sum(1 for i in indicators if i.type == 'human')
    if human_count > ai_count:
        feedback.append('More human-like characteristics detected')
    elif ai_count > human_count:
        feedback.append('More AI-like patterns detected')

    return feedback


class AIDetectionAnalyzer:
    """Stateless human-likelihood estimator."""

    name = 'ai_detection'

    def analyze(self, text: str) -> AIDetectionResult:
        signals = {
            'perplexity': score_perplexity(text),
            'burstiness': score_burstiness(text),
            'vocabulary': score_vocabulary_diversity(text),
            'sentences': score_sentence_variation(text),
            'stylometry': score_stylometry(text),
        }
        indicators = identify_indicators(text, signals)

        human_score = tm.round_half_up(
            sum(signals[name] * weight for name, weight in SIGNAL_WEIGHTS.items())
        )
        human_likelihood = human_score / 100

        logger.debug(f"AI detection signals: {signals} -> {human_score}")

        return AIDetectionResult(
            score=human_score,
            human_likelihood=human_likelihood,
            ai_likelihood=tm.round_half_up(1 - human_likelihood, 2),
            confidence=determine_confidence(indicators),
            analysis=AIDetectionAnalysis(
                perplexity_score=signals['perplexity'],
                burstiness_score=signals['burstiness'],
                vocabulary_diversity=signals['vocabulary'],
                sentence_variation=signals['sentences'],
                stylometry_score=signals['stylometry'],
            ),
            indicators=indicators,
            feedback=generate_feedback(human_score, indicators),
        )
