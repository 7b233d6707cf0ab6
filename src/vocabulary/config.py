"""
Configuration for the vocabulary module.

Settings are read from the environment by ``VocabularySettings.from_env``; a
``.env`` file in the working directory is loaded first if present.
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

DEFAULT_DOCUMENT_PATH = os.path.join("data", "schemaorg-current-https.jsonld")
DEFAULT_PREFIX = "schema:"
DEFAULT_BASE_URL = "https://schema.org/"


class VocabularySettings(BaseModel):
    """Runtime settings for loading and querying a vocabulary."""

    document_path: str = Field(default=DEFAULT_DOCUMENT_PATH, description="Path to the JSON-LD vocabulary document")
    prefix: str = Field(default=DEFAULT_PREFIX, description="Compact namespace prefix used by identifiers")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Namespace IRI, also used to build documentation URLs")
    log_level: str = Field(default="INFO", description="Logging level used by the command-line tool")

    @classmethod
    def from_env(cls) -> "VocabularySettings":
        """Build settings from VOCABULARY_* environment variables, after loading .env."""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            document_path=os.getenv("VOCABULARY_DOCUMENT_PATH", DEFAULT_DOCUMENT_PATH),
            prefix=os.getenv("VOCABULARY_PREFIX", DEFAULT_PREFIX),
            base_url=os.getenv("VOCABULARY_BASE_URL", DEFAULT_BASE_URL),
            log_level=os.getenv("VOCABULARY_LOG_LEVEL", "INFO").upper(),
        )
