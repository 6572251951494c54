"""Errors raised by docgen outside the generation path.

Generation failures never leave DocumentationGenerator; they are folded into a
degraded GenerationResult instead. Only configuration problems surface as
exceptions, and they do so at startup.
"""


class ConfigurationError(RuntimeError):
    """A required setting (e.g. the inference API key) is missing or invalid."""
