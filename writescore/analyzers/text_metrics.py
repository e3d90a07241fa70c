"""
Text Metrics - Sentence, word and syllable counting shared by the analyzers.

Counts that feed a division are floored at 1 so formulas never divide by
zero; the raw splitting helpers return the actual (possibly empty) lists.
"""

from collections import Counter
from typing import Iterable, List, Pattern, Sequence, Union
import math
import re

import numpy as np

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
VOWEL_CLUSTER_RE = re.compile(r"[aeiouy]+")
NON_ALPHA_RE = re.compile(r"[^a-z]")
INFLECTION_SUFFIX_RE = re.compile(r"(ed|ing|es|s)$")
TAG_RE = re.compile(r"<[^>]*>")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from the floor, e.g. 2.5 -> 3 and 0.25 -> 0.3 (digits=1).

    Python's round() uses banker's rounding, which would move scores sitting
    exactly on a .5 boundary down instead of up.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp_score(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def split_sentences(text: str) -> List[str]:
    """Non-empty segments between runs of sentence punctuation (untrimmed)."""
    return [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_words(text: str) -> List[str]:
    return text.split()


def split_paragraphs(text: str) -> List[str]:
    return [p for p in PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def count_sentences(text: str) -> int:
    return max(1, len(split_sentences(text)))


def count_words(text: str) -> int:
    return max(1, len(split_words(text)))


def word_tokens(text: str, min_length: int = 1) -> List[str]:
    """Lower-cased regex word tokens of at least ``min_length`` characters."""
    if min_length <= 1:
        return re.findall(r"\b\w+\b", text.lower())
    return re.findall(rf"\b\w{{{min_length},}}\b", text.lower())


def clean_word(word: str) -> str:
    return NON_ALPHA_RE.sub("", word.lower())


def syllables_in_word(word: str) -> int:
    """Vowel-cluster count, minus a trailing silent 'e', at least 1."""
    syllables = len(VOWEL_CLUSTER_RE.findall(word)) or 1
    if word.endswith("e"):
        syllables -= 1
    return max(1, syllables)


def count_syllables(text: str) -> int:
    total = 0
    for word in text.lower().split():
        cleaned = clean_word(word)
        if not cleaned:
            continue
        total += syllables_in_word(cleaned)
    return total


def count_complex_words(text: str) -> int:
    """Words with three or more syllables once -ed/-ing/-es/-s is stripped."""
    complex_words = 0
    for word in text.lower().split():
        cleaned = clean_word(word)
        if not cleaned:
            continue
        stem = INFLECTION_SUFFIX_RE.sub("", cleaned) or cleaned
        if syllables_in_word(stem) >= 3:
            complex_words += 1
    return complex_words


def strip_tags(text: str) -> str:
    return TAG_RE.sub("", text)


def sentence_lengths(sentences: Sequence[str]) -> List[int]:
    return [len(s.split()) for s in sentences]


def first_word(sentence: str) -> str:
    words = sentence.strip().lower().split()
    return words[0] if words else ""


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def variance(values: Sequence[float]) -> float:
    """Population variance; 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.var(values))


def std_dev(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.std(values))


def type_token_ratio(tokens: Sequence[str]) -> float:
    if not tokens:
        return 0.0
    return len(set(tokens)) / len(tokens)


def count_present(phrases: Iterable[str], lower_text: str) -> int:
    """Number of catalog phrases that occur at least once (substring match)."""
    return sum(1 for phrase in phrases if phrase in lower_text)


def count_matches(pattern: Union[str, Pattern], text: str) -> int:
    if isinstance(pattern, str):
        return len(re.findall(pattern, text))
    return sum(1 for _ in pattern.finditer(text))


def count_whole_words(words: Iterable[str], lower_text: str) -> int:
    """Total whole-word occurrences of every entry in ``words``."""
    return sum(len(re.findall(rf"\b{re.escape(w)}\b", lower_text)) for w in words)


def top_terms(frequencies: Counter, limit: int) -> List[str]:
    """Most frequent terms, ties broken by first appearance."""
    ordered = sorted(frequencies.items(), key=lambda item: -item[1])
    return [term for term, _ in ordered[:limit]]
