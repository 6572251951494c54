# Parsing of the follow-up questions response into a short list.

from __future__ import annotations

import re
from typing import List

MAX_QUESTIONS = 3

FALLBACK_QUESTIONS = [
    "How can we improve the documentation clarity?",
    "What additional examples would be helpful?",
    "Are there any sections that need more detail?",
]

# "1." / "2)" at line start or after whitespace (not "v1.2"), or a bullet at line start
_MARKER_RE = re.compile(r"(?:^|(?<=\s))\d+[.)](?=\s)|^[ \t]*[-*•](?=\s)", re.M)


def parse_follow_up_questions(text: str, limit: int = MAX_QUESTIONS) -> List[str]:
    """Split a list-shaped response into at most `limit` questions.

    Text before the first list marker is treated as a preamble ("Here are
    three questions:") and dropped. Without any markers, each non-empty line
    is a candidate. Returns [] when nothing usable remains.
    """
    text = (text or "").strip()
    if not text:
        return []
    parts = _MARKER_RE.split(text)
    if len(parts) > 1:
        parts = parts[1:]
    else:
        parts = text.splitlines()
    questions = [" ".join(p.split()) for p in parts]
    return [q for q in questions if q][:limit]


def follow_up_questions_or_fallback(text: str) -> List[str]:
    return parse_follow_up_questions(text) or list(FALLBACK_QUESTIONS)
