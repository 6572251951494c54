# docgen: OpenAPI spec + meeting notes -> Markdown documentation via an LLM endpoint.

__version__ = "0.3.0"
