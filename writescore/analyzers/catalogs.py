"""
Pattern Catalogs - Word lists and regex rules consumed by the analyzers.

The analyzers only know how to apply a rule; what counts as a misspelling,
an ESL collocation or an AI lead-in lives here so the tables can be
extended and tested on their own.
"""

from dataclasses import dataclass
from typing import Optional, Pattern, Tuple
import re


@dataclass(frozen=True)
class PatternRule:
    """A compiled pattern plus the bookkeeping attached to each match."""
    pattern: Pattern
    label: str = ""
    weight: float = 1.0
    message: Optional[str] = None
    severity: str = "medium"


def _rule(regex: str, label: str = "", weight: float = 1.0,
          message: Optional[str] = None, severity: str = "medium",
          flags: int = re.IGNORECASE) -> PatternRule:
    return PatternRule(re.compile(regex, flags), label, weight, message, severity)


# ---------------------------------------------------------------------------
# Writing quality
# ---------------------------------------------------------------------------

# Confusables match misuse in context; correct use of the words is never penalized
GRAMMAR_CONFUSION_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(their|they're) (is|are|was|were)\b|\bthere (car|house|own|team|work)\b",
          "there/their/they're confusion"),
    _rule(r"\byour (welcome|wrong|going|not)\b|\byou're (own|car|house|team|work)\b",
          "your/you're confusion"),
    _rule(r"\bit's (own|self)\b|\bits (a|an|the|been|not|going)\b", "its/it's confusion"),
    _rule(r"\b(an|the|no|any) affect\b|\b(will|can|could|would|may|might) effect (the|a|an|our|your|their)\b",
          "affect/effect confusion"),
    _rule(r"\bloose (the|my|your|our|their|weight|track|sight)\b", "loose/lose confusion"),
    _rule(r"[.]{2,}", "multiple periods", flags=0),
    _rule(r"[!]{2,}", "multiple exclamation marks", flags=0),
    _rule(r"[?]{2,}", "multiple question marks", flags=0),
    _rule(r"\b(alot|alright|aswell)\b", "common misspellings"),
)

TRANSITION_PHRASES = (
    'however', 'therefore', 'furthermore', 'moreover', 'consequently',
    'meanwhile', 'similarly', 'in contrast', 'on the other hand',
    'for example', 'in addition', 'as a result', 'in conclusion',
)

INTRO_MARKERS = ('introduction', 'first', 'begin', 'start', 'today', 'this article')
CONCLUSION_MARKERS = ('conclusion', 'finally', 'in summary', 'to conclude', 'overall')

SOPHISTICATED_WORDS = (
    'analyze', 'synthesize', 'comprehensive', 'innovative', 'strategic',
    'collaborate', 'facilitate', 'optimize', 'leverage', 'implement',
    'substantial', 'significant', 'efficient', 'effective', 'dynamic',
)

WEAK_WORDS = ('very', 'really', 'quite', 'pretty', 'just', 'maybe', 'perhaps')

COMMON_WORDS = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of',
    'with', 'by', 'is', 'are', 'was', 'were', 'be', 'been', 'have', 'has', 'had',
    'do', 'does', 'did', 'will', 'would', 'could', 'should', 'may', 'might',
    'must', 'can',
})

FLOW_INDICATORS = (
    'first', 'second', 'third', 'next', 'then', 'finally',
    'before', 'after', 'during', 'while', 'meanwhile',
    'because', 'since', 'therefore', 'thus', 'consequently',
    'although', 'however', 'nevertheless', 'despite',
)

PASSIVE_VOICE_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(was|were|is|are|am|be|been|being)\s+\w+ed\b", "passive -ed"),
    _rule(r"\b(was|were|is|are|am|be|been|being)\s+\w+en\b", "passive -en"),
)

OVERUSE_EXEMPT_WORDS = frozenset({
    'that', 'with', 'this', 'they', 'have', 'will', 'from', 'been', 'more',
    'some', 'like', 'what', 'time', 'very', 'when', 'much', 'would', 'there',
    'could', 'other',
})

# ---------------------------------------------------------------------------
# SEO
# ---------------------------------------------------------------------------

SEO_STOP_WORDS = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of',
    'with', 'by', 'is', 'are', 'was', 'were', 'be', 'been', 'have', 'has', 'had',
    'do', 'does', 'did', 'will', 'would', 'could', 'should', 'may', 'might',
    'must', 'can', 'that', 'this', 'these', 'those', 'they', 'them', 'their',
    'there', 'where', 'when', 'why', 'how', 'what', 'which', 'who', 'whom',
    'whose', 'if', 'then', 'else', 'while', 'until', 'since', 'before', 'after',
    'during', 'through', 'above', 'below', 'up', 'down', 'out', 'off', 'over',
    'under', 'again', 'further', 'once',
})

GENERIC_ANCHORS = frozenset({'click here', 'read more', 'here', 'this', 'link'})

STRUCTURED_CONTENT_MARKERS = ('article', 'author', 'published', 'updated', 'category', 'tag')

# ---------------------------------------------------------------------------
# English proficiency
# ---------------------------------------------------------------------------

FLUENCY_CONNECTIVES = (
    'however', 'therefore', 'moreover', 'furthermore', 'nevertheless',
    'consequently', 'meanwhile', 'similarly', 'in addition', 'for example',
    'in contrast', 'on the other hand', 'as a result', 'in fact',
)

UNNATURAL_COLLOCATIONS: Tuple[PatternRule, ...] = (
    _rule(r"\bmake a research\b", "make a research", weight=5),
    _rule(r"\binformations\b", "informations", weight=5),
    _rule(r"\bequipments\b", "equipments", weight=5),
    _rule(r"\badvices\b", "advices", weight=5),
    _rule(r"\bfunny\s+(thing|story)\b", "funny thing/story", weight=5),
    _rule(r"\bvery much\s+(like|want)\b", "very much like/want", weight=5),
    _rule(r"\bmore better\b", "more better", weight=5),
    _rule(r"\bmost best\b", "most best", weight=5),
)

ESL_GRAMMAR_RULES: Tuple[PatternRule, ...] = (
    # articles
    _rule(r"\b(go to|at|in)\s+(hospital|school|university|work)\b", "article omission", weight=2),
    _rule(r"\ba\s+(hour|honest|honor)\b", "a/an before vowel sound", weight=3),
    _rule(r"\ban\s+(university|user|uniform)\b", "an/a before consonant sound", weight=3),
    # prepositions
    _rule(r"\bdepend of\b", "depend of", weight=4),
    _rule(r"\binterested for\b", "interested for", weight=4),
    _rule(r"\bdifferent than\b", "different than", weight=2),
    _rule(r"\bmarried with\b", "married with", weight=3),
    # stative verbs
    _rule(r"\bI am agree\b", "I am agree", weight=5),
    _rule(r"\bI am understand\b", "I am understand", weight=5),
    _rule(r"\bI am knowing\b", "I am knowing", weight=4),
    # word order
    _rule(r"\ball of them are\b", "all of them are", weight=2),
    _rule(r"\bevery day life\b", "every day life", weight=3),
)

SUBJECT_VERB_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(he|she|it)\s+(are|were|have|do)\b", "third person singular", weight=3),
    _rule(r"\b(they|we|you)\s+(is|was|has|does)\b", "plural subject", weight=3),
    _rule(r"\b(I)\s+(are|is|am not|have not|has)\b", "first person", weight=3),
)

ADVANCED_WORDS = (
    'analyze', 'synthesize', 'comprehensive', 'substantial', 'significant',
    'innovative', 'strategic', 'facilitate', 'implement', 'optimize',
    'collaborate', 'demonstrate', 'establish', 'maintain', 'enhance',
    'contribute', 'participate', 'investigate', 'determine', 'evaluate',
)

SIMPLE_WORDS = ('good', 'bad', 'big', 'small', 'nice', 'very', 'really', 'things')

WORD_FORM_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\bmore easy\b", "more easy", weight=4),
    _rule(r"\bmore good\b", "more good", weight=4),
    _rule(r"\bmore bad\b", "more bad", weight=4),
    _rule(r"\bchilds\b", "childs", weight=4),
    _rule(r"\bmans\b", "mans", weight=4),
    _rule(r"\bwomans\b", "womans", weight=4),
    _rule(r"\bpeoples\b", "peoples", weight=4),
)

CLAUSE_SPLIT_RE = re.compile(
    r",|;|:|\s+(and|but|or|because|although|if|when|while|since|as|that|which|who)\s+",
    re.IGNORECASE,
)

COMPLEX_STRUCTURE_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(having|having been|being|been)\s+\w+ed\b", "participle construction"),
    _rule(r"\b(not only|neither|either)\b.*\b(but also|nor|or)\b", "correlative conjunction"),
    _rule(r"\b(despite|although|whereas|nevertheless)\b", "sophisticated conjunction"),
    _rule(r"\b(which|who|whom|whose|that)\b", "relative clause"),
)

LANGUAGE_ISSUE_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\ba\s+hour\b", "grammar",
          message='Article usage: should be "an hour"', severity="medium"),
    _rule(r"\bmake a research\b", "grammar",
          message='Collocation error: should be "do research" or "conduct research"', severity="high"),
    _rule(r"\binformations\b", "grammar",
          message='Countability error: "information" is uncountable', severity="high"),
    _rule(r"\ball of them are\b", "word-order",
          message="Unnatural word order detected", severity="medium"),
)

# ---------------------------------------------------------------------------
# AI authorship
# ---------------------------------------------------------------------------

AI_FILLER_WORDS = (
    'furthermore', 'moreover', 'additionally', 'consequently',
    'therefore', 'indeed', 'certainly', 'undoubtedly',
    'comprehensive', 'innovative', 'cutting-edge', 'state-of-the-art',
)

AI_LEAD_IN_RULES: Tuple[PatternRule, ...] = (
    _rule(r"^(in conclusion|to summarize|in summary|overall|ultimately),?\s+", "summary lead-in"),
    _rule(r"^(it is important to note|it should be noted|it is worth mentioning),?\s+", "hedging lead-in"),
    _rule(r"^(furthermore|moreover|additionally|in addition),?\s+", "additive lead-in"),
)

AI_TYPICAL_PHRASES = (
    'it is important to note that',
    "in today's digital landscape",
    'cutting-edge technology',
    'comprehensive solution',
    'in conclusion, it can be said',
)

FUNCTION_WORDS = frozenset({
    'the', 'of', 'to', 'and', 'a', 'in', 'is', 'it', 'you', 'that',
    'he', 'was', 'for', 'on', 'are', 'as', 'with', 'his', 'they',
    'i', 'at', 'be', 'this', 'have', 'from', 'or', 'one', 'had',
    'by', 'word', 'but', 'not', 'what', 'all', 'were', 'we', 'when',
})

STYLOMETRY_PUNCTUATION_RE = re.compile(r"[,.;:!?-]")

PERSONAL_MARKER_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(I think|I believe|in my opinion|personally|honestly)\b", "first person"),
    _rule(r"\b(amazing|fantastic|terrible|awful|love|hate)\b", "emotional"),
    _rule(r"[!]{1,2}(?![!])", "exclamation", flags=0),
    _rule(r"\?(?!\?)", "question", flags=0),
)

COLLOQUIAL_MARKER_RULES: Tuple[PatternRule, ...] = (
    _rule(r"\b(ugh|hmm|wow|oh|ah)\b", "interjection"),
    _rule(r"\b(totally|literally|basically|honestly)\b", "intensifier"),
    _rule(r"[.]{2,5}(?!\.)", "ellipsis", flags=0),
    _rule(r"[!?]{2,3}", "multiple punctuation", flags=0),
)
