"""
Per-section generation.

SectionGenerator drafts one of the top-level sections from the extracted spec
context. GettingStartedComposer drafts the four Getting Started subsections in
parallel from the raw spec text and stitches them under one heading.

Model clients are blocking (requests / openai SDK), so each call runs in a
worker thread of the executor handed in by the caller (the loop's default
executor when none is given) and independent calls are gathered.
"""

from __future__ import annotations

import asyncio
import re
from concurrent.futures import Executor
from typing import Any, Dict, List, Optional, Sequence, Tuple

from docgen.logging_utils import get_logger
from docgen.spec import extract_context
from .cleanup import clean_section_text
from .prompts import GETTING_STARTED_SUBSECTIONS, Subsection, build_section_prompt, build_subsection_prompt
from .types import ChatMessage, GenerationParams

logger = get_logger("docgen.sections")

_HEADING_LINE_RE = re.compile(r"^#+\s*(.*?)\s*#*\s*$")
# headings that would compete with the "#"/"##" levels of the composed block
_TOP_HEADING_RE = re.compile(r"^#{1,2}(?=\s)")
_FENCE_RE = re.compile(r"^[ \t]*(```|~~~)")


def section_placeholder(section: str) -> str:
    return f"# {section}\nNo content generated for this section."


def subsection_placeholder(title: str) -> str:
    return f"## {title}\nNo content generated for this subsection."


async def call_model(
    model_client,
    prompt: str,
    params: GenerationParams,
    executor: Optional[Executor] = None,
) -> Tuple[str, Dict[str, Any]]:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, model_client.generate, prompt, params)


class SectionGenerator:
    def __init__(self, model_client, params: GenerationParams, executor: Optional[Executor] = None):
        self.model_client = model_client
        self.params = params
        self.executor = executor

    async def generate(
        self,
        section: str,
        spec_text: str,
        meeting_notes: str = "",
        chat_context: Optional[Sequence[ChatMessage]] = None,
    ) -> str:
        """One inference call for one section; never returns an empty string."""
        ctx = extract_context(spec_text)
        prompt = build_section_prompt(section, ctx, meeting_notes, chat_context)
        raw, meta = await call_model(self.model_client, prompt, self.params, self.executor)
        logger.debug("section %s: %d chars from %s", section, len(raw or ""), meta.get("engine"))
        return clean_section_text(raw) or section_placeholder(section)


class GettingStartedComposer:
    def __init__(
        self,
        model_client,
        params: GenerationParams,
        subsections: Sequence[Subsection] = GETTING_STARTED_SUBSECTIONS,
        executor: Optional[Executor] = None,
    ):
        self.model_client = model_client
        self.params = params
        self.subsections = list(subsections)
        self.executor = executor

    async def compose(
        self,
        spec_text: str,
        meeting_notes: str = "",
        chat_context: Optional[Sequence[ChatMessage]] = None,
    ) -> str:
        texts = await asyncio.gather(
            *(self._subsection(s, spec_text, meeting_notes, chat_context) for s in self.subsections)
        )
        return "# Getting Started\n\n" + "\n\n".join(texts)

    async def _subsection(
        self,
        subsection: Subsection,
        spec_text: str,
        meeting_notes: str,
        chat_context: Optional[Sequence[ChatMessage]],
    ) -> str:
        prompt = build_subsection_prompt(subsection, spec_text, meeting_notes, chat_context)
        raw, _meta = await call_model(self.model_client, prompt, self.params, self.executor)
        return normalize_subsection(subsection.title, clean_section_text(raw))


def _demote_headings(lines: Sequence[str]) -> List[str]:
    out: List[str] = []
    fence: Optional[str] = None
    for line in lines:
        m = _FENCE_RE.match(line)
        if m:
            # a fence only closes on the same marker it opened with
            if fence is None:
                fence = m.group(1)
            elif m.group(1) == fence:
                fence = None
            out.append(line)
        elif fence is None:
            out.append(_TOP_HEADING_RE.sub("###", line))
        else:
            out.append(line)
    return out


def normalize_subsection(title: str, text: str) -> str:
    """Force `text` under exactly one "## <title>" heading.

    A leading heading naming the subsection is replaced; any other "#"/"##"
    heading inside the body is demoted to "###". Lines inside fenced code
    blocks are left as they are.
    """
    if not text:
        return subsection_placeholder(title)
    lines = text.split("\n")
    m = _HEADING_LINE_RE.match(lines[0])
    if m and m.group(1).strip().lower() == title.lower():
        lines = lines[1:]
    body = "\n".join(_demote_headings(lines)).strip()
    if not body:
        return subsection_placeholder(title)
    return f"## {title}\n{body}"
