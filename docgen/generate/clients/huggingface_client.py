# Client for the Hugging Face Inference API text-generation task.
# Same generate(prompt, params) interface as the other clients.

from typing import Any, Dict, Tuple

import requests

from docgen.exceptions import ConfigurationError

from ..types import GenerationParams, InferenceConfig


class HuggingFaceClient:
    def __init__(self, config: InferenceConfig):
        if not config.api_key:
            raise ConfigurationError("Missing HUGGING_FACE_API_KEY environment variable")
        self.config = config
        self.model = config.model

    def generate(self, prompt: str, params: GenerationParams) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "inputs": prompt,
            "parameters": params.to_payload(),
            "options": {"wait_for_model": True},
        }
        url = self.config.endpoint
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        resp = requests.post(url, json=payload, headers=headers, timeout=self.config.timeout)
        resp.raise_for_status()
        return self._generated_text(resp.json()), {"engine": "huggingface", "model": self.model}

    @staticmethod
    def _generated_text(data: Any) -> str:
        # the API answers with either [{"generated_text": ...}] or {"generated_text": ...}
        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            return ""
        if data.get("error"):
            raise RuntimeError(f"Inference API error: {data['error']}")
        return (data.get("generated_text") or "").strip()
