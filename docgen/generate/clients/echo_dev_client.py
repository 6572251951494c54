# Dummy model client for local dev without API calls.
# Answers with the heading the prompt asks for, so the assembled document keeps its shape.

import re
from typing import Any, Dict, Tuple

from ..types import GenerationParams

_HEADING_RE = re.compile(r'starting with "(#+ [^"]+)"|Start with "(#+ [^"]+)"')


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, prompt: str, params: GenerationParams) -> Tuple[str, Dict[str, Any]]:
        m = _HEADING_RE.search(prompt)
        if m:
            heading = m.group(1) or m.group(2)
            text = f"{heading}\n[ECHO RESPONSE]\n{prompt.strip().splitlines()[0]}"
        else:
            text = "1. [ECHO RESPONSE] What is missing from the overview?"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature, "max_tokens": params.max_new_tokens}
        return text, meta
