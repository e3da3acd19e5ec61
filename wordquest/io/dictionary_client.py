"""Lightweight HTTP client for the public dictionary API.

Used by hosts to show the meaning of a clue answer once the player has
revealed or solved it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..core.exceptions import DictionaryAPIError, WordNotFoundError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

NO_EXAMPLE = "No example available."


def _env_default(name: str, fallback: str) -> str:
    return os.environ.get(name, fallback)


@dataclass
class DictionaryConfig:
    """Connection settings; environment variables override the defaults."""

    base_url: str = field(
        default_factory=lambda: _env_default("DICTIONARY_API_BASE", "https://api.dictionaryapi.dev/api/v2")
    )
    language: str = field(default_factory=lambda: _env_default("DICTIONARY_LANGUAGE", "en"))
    timeout_seconds: float = 10.0


@dataclass
class WordDefinition:
    word: str
    definition: str
    example: str = NO_EXAMPLE
    part_of_speech: Optional[str] = None


class DictionaryClient:
    """Minimal client returning the first definition for a word."""

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or DictionaryConfig()
        self.session = session or requests.Session()

    def entry_url(self, word: str) -> str:
        base = self.config.base_url.rstrip("/")
        return f"{base}/entries/{self.config.language}/{quote(word)}"

    def define(self, word: str) -> WordDefinition:
        """Fetch ``word`` and return its first definition and example."""
        term = (word or "").strip()
        if not term:
            raise WordNotFoundError("Please enter a word to search.")

        url = self.entry_url(term.lower())
        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.error("Dictionary request for %r failed: %s", term, exc)
            raise DictionaryAPIError(f"Dictionary request failed: {exc}") from exc

        if response.status_code == 404:
            LOGGER.warning("No dictionary entry for %r", term)
            raise WordNotFoundError(f"Word not found: {term}")
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            LOGGER.error("Dictionary request for %r failed: %s", term, exc)
            raise DictionaryAPIError(f"Dictionary request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DictionaryAPIError("Dictionary API returned invalid JSON") from exc

        definition = self._extract_definition(payload)
        if definition is None:
            LOGGER.warning("Dictionary response for %r has no definitions", term)
            raise WordNotFoundError(f"Word not found: {term}")
        return definition

    @staticmethod
    def _extract_definition(payload: Any) -> Optional[WordDefinition]:
        """Pick the first definition of the first meaning of the first entry."""
        if not isinstance(payload, list) or not payload:
            return None
        entry: Dict[str, Any] = payload[0]
        if not isinstance(entry, dict):
            return None
        meanings: List[Dict[str, Any]] = entry.get("meanings") or []
        if not isinstance(meanings, list):
            return None
        for meaning in meanings:
            if not isinstance(meaning, dict):
                continue
            definitions: List[Dict[str, Any]] = meaning.get("definitions") or []
            if not isinstance(definitions, list):
                continue
            for item in definitions:
                if not isinstance(item, dict):
                    continue
                text = item.get("definition")
                if isinstance(text, str) and text:
                    return WordDefinition(
                        word=entry.get("word", ""),
                        definition=text,
                        example=item.get("example") or NO_EXAMPLE,
                        part_of_speech=meaning.get("partOfSpeech"),
                    )
        return None
