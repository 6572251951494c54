# Prompt fragments and templates for each documentation section.
# The generators only pick a template and fill it; all wording lives here.

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from docgen.spec.types import SpecContext
from .types import ChatMessage

SECTION_ORDER = ["Overview", "Authentication", "Getting Started", "Error Handling", "Glossary"]

NO_NOTES = "[No meeting notes provided]"
NO_DISCUSSION = "[No discussion points available]"

WRITER_PREAMBLE = "You are a technical writer. Generate documentation based on this context:"

CLOSING_RULES = """\
Important:
- When information is missing, use placeholders: [Insert <detail> here]
- Start directly with the section header
- Do not include any instructions or prompts in the output
- Keep content clear and concise
- Use proper markdown formatting"""


def _join(items: Sequence[str], missing: str) -> str:
    return ", ".join(items) or missing


def _overview(ctx: SpecContext) -> str:
    return f"""Generate a clear and concise "Overview" section for the API.

Context:
Title: {ctx.title or '[Title not specified]'}
Version: {ctx.version or '[Version not specified]'}
Available Endpoints: {_join(ctx.path_names, '[Endpoints not specified]')}
Security: {_join(ctx.security_names, '[Security schemes not specified]')}

Instructions:
- If any information is missing, use placeholders like: [Insert <missing detail> here]
- Start with "# Overview"
- Keep content clear and concise"""


def _authentication(ctx: SpecContext) -> str:
    return f"""Generate an "Authentication" section for the API documentation.

Context:
Security Schemes: {_join(ctx.security_names, '[Security schemes not specified]')}
Available Scopes: {_join(ctx.scopes, '[Scopes not specified]')}

Instructions:
- If security details are missing, use placeholders: [Insert <security detail> here]
- Start with "# Authentication"
- Include authentication flow if available"""


def _error_handling(ctx: SpecContext) -> str:
    return f"""Generate an "Error Handling" section for the API documentation.

Context:
Endpoints: {_join(ctx.path_names, '[Endpoints not specified]')}
Data Models: {_join(ctx.schema_names, '[Data models not specified]')}

Instructions:
- For missing error codes or descriptions, use: [Insert <error detail> here]
- Start with "# Error Handling"
- Use tables for error codes and descriptions"""


def _glossary(ctx: SpecContext) -> str:
    return f"""Generate a "Glossary" section for the API documentation.

Context:
Security Terms: {_join(ctx.security_names, '[Security terms not specified]')}
Data Models: {_join(ctx.schema_names, '[Data models not specified]')}
Scopes: {_join(ctx.scopes, '[Scopes not specified]')}

Instructions:
- For undefined terms, use: [Insert <term definition> here]
- Start with "# Glossary"
- List terms alphabetically"""


SECTION_TEMPLATES: Dict[str, Callable[[SpecContext], str]] = {
    "Overview": _overview,
    "Authentication": _authentication,
    "Error Handling": _error_handling,
    "Glossary": _glossary,
}


def discussion_text(chat_context: Optional[Sequence[ChatMessage]]) -> str:
    """Flatten a chat transcript to its message contents, one per line."""
    return "\n".join(m.content for m in (chat_context or []))


def build_section_prompt(
    section: str,
    ctx: SpecContext,
    meeting_notes: str = "",
    chat_context: Optional[Sequence[ChatMessage]] = None,
) -> str:
    if section not in SECTION_TEMPLATES:
        raise ValueError(f"Unknown section: {section!r}")
    notes = f"Meeting Notes:\n{meeting_notes}\n" if meeting_notes else NO_NOTES
    discussion = f"Discussion Points:\n{discussion_text(chat_context)}" if chat_context else NO_DISCUSSION
    return f"""{WRITER_PREAMBLE}

{SECTION_TEMPLATES[section](ctx)}

Additional Context:
{notes}
{discussion}

{CLOSING_RULES}"""


# ---------- Getting Started

@dataclass(frozen=True)
class Subsection:
    title: str
    instruction: str


GETTING_STARTED_SUBSECTIONS: List[Subsection] = [
    Subsection(
        "Prerequisites",
        "List required credentials, tools, dependencies, and knowledge. "
        "Use [Insert <requirement> here] for missing details.",
    ),
    Subsection(
        "Quick Start Guide",
        "Create a step-by-step guide. Use [Insert <step detail> here] for missing information.",
    ),
    Subsection(
        "Basic Operations",
        "Include 2-3 examples of common operations. Use [Insert <example detail> here] for missing specifics.",
    ),
    Subsection(
        "Next Steps",
        "Suggest advanced usage and improvements. Use [Insert <suggestion> here] for missing recommendations.",
    ),
]


def build_subsection_prompt(
    subsection: Subsection,
    spec_text: str,
    meeting_notes: str = "",
    chat_context: Optional[Sequence[ChatMessage]] = None,
) -> str:
    notes = f"\nAdditional Notes:\n{meeting_notes}" if meeting_notes else ""
    discussion = f"\nDiscussion Points:\n{discussion_text(chat_context)}" if chat_context else ""
    return f"""Generate the "{subsection.title}" subsection for the Getting Started guide.

Context:
{spec_text}
{notes}
{discussion}

Instructions:
{subsection.instruction}

Format as markdown, starting with "## {subsection.title}".
Keep the content practical and implementation-agnostic.
Focus on clear, actionable guidance."""


# ---------- Follow-up questions

def build_questions_prompt(documentation: str) -> str:
    return f"""Based on this documentation, suggest three specific follow-up questions for improvement:

{documentation}

Generate three concise follow-up questions."""
