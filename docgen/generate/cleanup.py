"""
Cleanup of raw model output before it goes into the documentation.

Instruction-tuned models often echo parts of the prompt back ("Instructions:",
"Context:", "Format as markdown ..."). The rules below remove those fragments.
They are applied in list order, so the heading rule runs before the line rules
and the blank-line collapse runs last.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern, Sequence


@dataclass(frozen=True)
class CleanupRule:
    name: str
    pattern: Pattern[str]
    replacement: str = ""
    # 0 replaces every match
    count: int = 0

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text, count=self.count)


def _line_rule(name: str, marker: str) -> CleanupRule:
    # whole line, trailing newline included
    return CleanupRule(name, re.compile(rf"^[ \t]*{marker}.*(?:\n|\Z)", re.M))


CLEANUP_RULES: List[CleanupRule] = [
    # everything before the first markdown heading
    CleanupRule("preamble", re.compile(r"\A.*?(?=^#)", re.M | re.S), count=1),
    _line_rule("instructions", r"Instructions:"),
    _line_rule("format", r"Format\b.*?markdown"),
    _line_rule("include", r"Include:"),
    _line_rule("important", r"Important:"),
    _line_rule("context", r"Context:"),
    CleanupRule("blank_lines", re.compile(r"\n{3,}"), "\n\n"),
]


def clean_section_text(text: str, rules: Sequence[CleanupRule] = CLEANUP_RULES) -> str:
    """Trim, apply each cleanup rule in order, trim again."""
    cleaned = (text or "").strip()
    for rule in rules:
        cleaned = rule.apply(cleaned)
    return cleaned.strip()
