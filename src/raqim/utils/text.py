"""Rule-based rewrites used by the "improve this reply" action.

Each function takes an assistant reply and returns a new string; none of them
call the LLM.
"""

import re

_SENTENCE_END_RE = re.compile(r"[.!?؟]\s*")
_PARAGRAPH_BREAK = "\n\n"

EXTRA_DETAILS_BLOCK = (
    "\n\n**تفاصيل إضافية:**\n"
    "يمكنني توضيح أي نقطة بشكل أكبر. لا تتردد في السؤال عن التفاصيل."
)
SUMMARY_HEADER = "## الملخص"


def make_shorter(text: str, max_sentences: int = 3) -> str:
    """Keep the first ``max_sentences`` sentences.

    Terminators are dropped by the split, so the kept sentences are rejoined
    with ". " and closed with a single ".".
    """
    sentences = [s for s in _SENTENCE_END_RE.split(text) if s.strip()]
    return ". ".join(sentences[:max_sentences]) + "."


def make_longer(text: str) -> str:
    return text + EXTRA_DETAILS_BLOCK


def restructure(text: str) -> str:
    """Turn every non-empty line into its own paragraph under a summary header."""
    lines = [line for line in text.split("\n") if line.strip()]
    return SUMMARY_HEADER + _PARAGRAPH_BREAK + _PARAGRAPH_BREAK.join(lines)


def general_improve(text: str) -> str:
    # Horizontal rule between paragraphs
    return text.replace(_PARAGRAPH_BREAK, "\n\n---\n\n")
