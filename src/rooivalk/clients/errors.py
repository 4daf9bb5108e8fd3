class LLMError(RuntimeError):
    """Raised when a language-model backend fails to produce a response."""
