"""Rule-based quality evaluator for assistant responses.

Scores a reply on three independent axes (length, repetition, structure) and
flags lexical antonym pairs that may indicate a self-contradiction. Everything
here is a pure function of the input text: no state, no I/O, and every string,
including an empty one, produces a complete result.

Feedback strings are Arabic, matching the language the assistant answers in.
"""

import math
import re
from collections import Counter

from raqim.schemas.evaluation import EvaluationResult, ScoredAspect

# Sentence units for repetition checks: Latin/Arabic terminators, Arabic comma, newline
REPETITION_SPLIT_RE = re.compile(r"[.!?؟،\n]+")
# Sentence units for contradiction checks: terminators only
CONTRADICTION_SPLIT_RE = re.compile(r"[.!?؟]\s*")
MIN_SENTENCE_CHARS = 10

_WHITESPACE_RE = re.compile(r"\s+")
_PARAGRAPH_RE = re.compile(r"\n\n+")
_LIST_RE = re.compile(r"^[ \t]*[-•*]\s|^[ \t]*[0-9]+\.\s", re.MULTILINE)
_HEADER_RE = re.compile(r"^#{1,3}\s|^\*\*[^*]+\*\*$", re.MULTILINE)
_CODE_RE = re.compile(r"```[\s\S]*?```|`[^`]+`")

# (max words inclusive, score, feedback)
_LENGTH_BANDS: list[tuple[int, int, str]] = [
    (19, 30, "الرد قصير جداً. يُفضّل إضافة المزيد من التفاصيل."),
    (49, 60, "الرد قصير. قد يحتاج لمزيد من الشرح."),
    (200, 100, "طول الرد مثالي ومناسب."),
    (400, 90, "طول الرد جيد ومفصّل."),
    (600, 75, "الرد طويل نسبياً. قد يكون مفصّلاً أكثر من اللازم."),
]
_TOO_LONG = ScoredAspect(score=50, feedback="الرد طويل جداً. يُفضّل اختصاره.")

_NO_SIGNAL_FEEDBACK = "لا يوجد تكرار ملحوظ."
_HEAVY_REPETITION_FEEDBACK = "يوجد تكرار ملحوظ في المحتوى. يُنصح بإعادة الصياغة."
_SOME_REPETITION_FEEDBACK = "يوجد بعض التكرار. يمكن تحسين التنوع في الصياغة."
_NO_REPETITION_FEEDBACK = "لا يوجد تكرار. المحتوى متنوع وجيد."

STRUCTURE_BASE_SCORE = 70
_PARAGRAPH_NOTE = "تقسيم جيد للفقرات"
_LIST_NOTE = "استخدام جيد للقوائم"
_HEADER_NOTE = "وجود عناوين تنظيمية"
_CODE_NOTE = "تنسيق جيد للأكواد"

# (positive, negative); append to extend language coverage
ANTONYM_PAIRS: list[tuple[str, str]] = [
    ("دائماً", "أبداً"),
    ("نعم", "لا"),
    ("يجب", "لا يجب"),
    ("ممكن", "مستحيل"),
    ("صحيح", "خاطئ"),
    ("always", "never"),
    ("yes", "no"),
    ("must", "must not"),
    ("possible", "impossible"),
    ("true", "false"),
]


def split_sentences(text: str, pattern: re.Pattern[str] = REPETITION_SPLIT_RE) -> list[str]:
    """Split text on ``pattern`` and keep fragments longer than MIN_SENTENCE_CHARS.

    Fragments are returned untrimmed; only the length test uses the trimmed form.
    """
    return [s for s in pattern.split(text) if len(s.strip()) > MIN_SENTENCE_CHARS]


def count_words(text: str) -> int:
    # An empty or blank string still yields one (empty) token
    return len(_WHITESPACE_RE.split(text.strip()))


def evaluate_length(text: str) -> ScoredAspect:
    words = count_words(text)
    for upper, score, feedback in _LENGTH_BANDS:
        if words <= upper:
            return ScoredAspect(score=score, feedback=feedback)
    return _TOO_LONG.model_copy()


def evaluate_repetition(text: str) -> ScoredAspect:
    sentences = split_sentences(text, REPETITION_SPLIT_RE)
    if len(sentences) < 2:
        return ScoredAspect(score=100, feedback=_NO_SIGNAL_FEEDBACK)

    words = _WHITESPACE_RE.split(text.lower())
    trigrams = Counter(
        f"{words[i]} {words[i + 1]} {words[i + 2]}" for i in range(len(words) - 2)
    )
    repeated_phrases = sum(1 for count in trigrams.values() if count > 2)

    seen: set[str] = set()
    repeated_sentences = 0
    for sentence in sentences:
        normalized = sentence.strip().lower()
        if normalized in seen:
            repeated_sentences += 1
        seen.add(normalized)

    if repeated_sentences > 2 or repeated_phrases > 5:
        return ScoredAspect(score=40, feedback=_HEAVY_REPETITION_FEEDBACK)
    if repeated_sentences > 0 or repeated_phrases > 2:
        return ScoredAspect(score=70, feedback=_SOME_REPETITION_FEEDBACK)
    return ScoredAspect(score=100, feedback=_NO_REPETITION_FEEDBACK)


def evaluate_structure(text: str) -> ScoredAspect:
    """Score layout: paragraphs, lists, headers and code formatting.

    Starts from STRUCTURE_BASE_SCORE; each detected feature adds a bonus and a
    note. The total is capped at 100.
    """
    score = STRUCTURE_BASE_SCORE
    notes: list[str] = []

    paragraphs = [p for p in _PARAGRAPH_RE.split(text) if p.strip()]
    if len(paragraphs) >= 2:
        score += 10
        notes.append(_PARAGRAPH_NOTE)

    if _LIST_RE.search(text):
        score += 10
        notes.append(_LIST_NOTE)

    if _HEADER_RE.search(text):
        score += 10
        notes.append(_HEADER_NOTE)

    if _CODE_RE.search(text):
        score += 5
        notes.append(_CODE_NOTE)

    score = min(score, 100)

    if score >= 90:
        feedback = "بنية ممتازة: " + "، ".join(notes)
    elif score >= 70:
        feedback = "بنية جيدة. " + ("، ".join(notes) if notes else "يمكن إضافة تنظيم أفضل.")
    else:
        feedback = "البنية تحتاج تحسين. يُنصح بتقسيم المحتوى وإضافة عناوين."
    return ScoredAspect(score=score, feedback=feedback)


def evaluate_response(text: str) -> EvaluationResult:
    """Run the length, repetition and structure scorers on ``text``."""
    length = evaluate_length(text)
    repetition = evaluate_repetition(text)
    structure = evaluate_structure(text)
    # Half-up rounding of the mean
    overall = math.floor((length.score + repetition.score + structure.score) / 3 + 0.5)
    return EvaluationResult(
        length=length,
        repetition=repetition,
        structure=structure,
        overall_score=overall,
    )


def detect_contradictions(text: str) -> list[str]:
    """Flag antonym pairs whose both sides appear in the text.

    This is a coarse lexical check: it does not look at sentence subject,
    negation scope or proximity, so cross-sentence false positives are expected.
    Results follow ANTONYM_PAIRS order.
    """
    sentences = split_sentences(text, CONTRADICTION_SPLIT_RE)
    contradictions: list[str] = []
    for positive, negative in ANTONYM_PAIRS:
        has_positive = any(positive in s for s in sentences)
        has_negative = any(negative in s for s in sentences)
        if has_positive and has_negative:
            contradictions.append(f'تناقض محتمل بين "{positive}" و "{negative}"')
    return contradictions
