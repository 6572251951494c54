"""
DocumentationGenerator: the whole pipeline behind one call.

    overview, authentication, getting started, error handling, glossary
        -> drafted concurrently
        -> joined in that fixed order
        -> one more call for follow-up questions on the joined text

Any failure along the way yields a degraded GenerationResult with an error
document instead of an exception.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from docgen.logging_utils import get_logger
from .followups import follow_up_questions_or_fallback
from .prompts import GETTING_STARTED_SUBSECTIONS, SECTION_ORDER, build_questions_prompt
from .sections import GettingStartedComposer, SectionGenerator, call_model
from .types import ChatMessage, GenerationParams, GenerationResult

logger = get_logger("docgen.generator")

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")

DEFAULT_MAX_NEW_TOKENS = {"section": 1000, "subsection": 500, "questions": 200}

# drafted by SectionGenerator; Getting Started comes from the composer
DIRECT_SECTIONS = ["Overview", "Authentication", "Error Handling", "Glossary"]

# one worker per concurrent inference call
FAN_OUT = len(DIRECT_SECTIONS) + len(GETTING_STARTED_SUBSECTIONS)

RETRY_QUESTION = "Would you like to try again?"


def error_result(exc: BaseException) -> GenerationResult:
    message = str(exc) or "Unknown error"
    return GenerationResult(
        documentation=f"# Error\nFailed to generate documentation: {message}. Please try again.",
        follow_up_questions=[RETRY_QUESTION],
        error={"message": message, "type": type(exc).__name__},
    )


class DocumentationGenerator:
    def __init__(self, model_client, config_path: Optional[Path] = DEFAULT_CONFIG_PATH):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()
        self.executor = ThreadPoolExecutor(max_workers=FAN_OUT, thread_name_prefix="docgen-inference")
        self.sections = SectionGenerator(model_client, self._params("section"), executor=self.executor)
        self.getting_started = GettingStartedComposer(
            model_client, self._params("subsection"), executor=self.executor
        )
        self.questions_params = self._params("questions")

    def close(self) -> None:
        self.executor.shutdown(wait=False)

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path or not Path(self.config_path).exists():
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _params(self, kind: str) -> GenerationParams:
        defaults = self.cfg.get("defaults", {})
        budgets = self.cfg.get("max_new_tokens", {})
        return GenerationParams(
            max_new_tokens=int(budgets.get(kind, DEFAULT_MAX_NEW_TOKENS[kind])),
            temperature=float(defaults.get("temperature", 0.3)),
            top_p=float(defaults.get("top_p", 0.8)),
            repetition_penalty=defaults.get("repetition_penalty", 1.1),
            return_full_text=bool(defaults.get("return_full_text", False)),
            do_sample=bool(defaults.get("do_sample", False)),
        )

    async def generate_documentation(
        self,
        spec: str,
        meeting_notes: str = "",
        chat_context: Optional[Sequence[ChatMessage]] = None,
    ) -> GenerationResult:
        """Main entry point. Always returns a GenerationResult, never raises."""
        try:
            logger.info("Starting documentation generation")
            getting_started, *direct = await asyncio.gather(
                self.getting_started.compose(spec, meeting_notes, chat_context),
                *(self.sections.generate(name, spec, meeting_notes, chat_context) for name in DIRECT_SECTIONS),
            )
            drafted = dict(zip(DIRECT_SECTIONS, direct))
            drafted["Getting Started"] = getting_started
            documentation = "\n\n".join(drafted[name] for name in SECTION_ORDER)

            raw, _meta = await call_model(
                self.model_client, build_questions_prompt(documentation), self.questions_params, self.executor
            )
            questions = follow_up_questions_or_fallback(raw)
            logger.info("Generated %d chars of documentation, %d follow-up questions", len(documentation), len(questions))
            return GenerationResult(documentation=documentation, follow_up_questions=questions)
        except Exception as e:
            logger.exception("Error in generate_documentation")
            return error_result(e)
