# Client for Ollama local inference.
# Accepts a model name and exposes generate(prompt, params).

from typing import Any, Dict, Optional, Tuple

import requests

from ..types import GenerationParams

OLLAMA_HOST = "http://localhost:11434"


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = OLLAMA_HOST, timeout: Optional[float] = None):
        self.model = model
        self.host = host
        self.timeout = timeout

    def generate(self, prompt: str, params: GenerationParams) -> Tuple[str, Dict[str, Any]]:
        options: Dict[str, Any] = {
            "temperature": float(params.temperature),
            "top_p": float(params.top_p),
            "num_predict": int(params.max_new_tokens),
        }
        if params.repetition_penalty is not None:
            options["repeat_penalty"] = float(params.repetition_penalty)
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": options,
        }
        url = f"{self.host.rstrip('/')}/api/generate"
        resp = requests.post(url, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}
