from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Invalid or incomplete run configuration. Never retried."""


class PromptTemplateNotFound(ConfigurationError):
    def __init__(self, name: str, searched: list[str]):
        self.name = name
        self.searched = searched
        paths = ", ".join(searched) or "<none>"
        super().__init__(f"Prompt template '{name}' not found. Searched: {paths}")
