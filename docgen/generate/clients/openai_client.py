# Client for the OpenAI Chat Completions API.
# Follows the same interface as HuggingFaceClient; the prompt is sent as one user turn.

from typing import Any, Dict, Optional, Tuple

from openai import OpenAI

from ..types import GenerationParams


class OpenAIClient:
    def __init__(self, model: str = "gpt-4o-mini", api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.model = model
        self.client = OpenAI(api_key=api_key, timeout=timeout)

    def generate(self, prompt: str, params: GenerationParams) -> Tuple[str, Dict[str, Any]]:
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=params.temperature,
            top_p=params.top_p,
            max_tokens=params.max_new_tokens,
        )
        text = (resp.choices[0].message.content or "").strip()
        meta = {"engine": "openai", "model": self.model}
        return text, meta
