# docgen/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="API Docs Generator")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # inference backend: huggingface | ollama | openai | echo
    INFERENCE_BACKEND: str = Field(default="huggingface")

    # hugging face inference api
    HUGGING_FACE_API_KEY: Optional[str] = None
    HF_MODEL: str = Field(default="mistralai/Mixtral-8x7B-Instruct-v0.1")
    HF_API_URL: str = Field(default="https://api-inference.huggingface.co/models")
    # None means the client waits as long as the endpoint takes
    REQUEST_TIMEOUT: Optional[float] = None

    # alternative backends
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
