import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict

from .errors import IngestError

logger = logging.getLogger(__name__)


class VocabularyDataSource(ABC):
    """
    Interface for obtaining the raw vocabulary document.
    """

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """
        Return the parsed JSON-LD document with its entities under "@graph".

        :return: Parsed document as a dictionary
        """
        pass


class FileDataSource(VocabularyDataSource):
    """
    Reads the vocabulary from a JSON-LD file on the local disk, e.g. a saved copy of
    https://schema.org/version/latest/schemaorg-current-https.jsonld
    """

    def __init__(self, path: str):
        """
        :param path: Path to the JSON-LD file
        """
        self.path = path

    def load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            raise IngestError(f"Vocabulary document not found: {self.path}")

        logger.info(f"Loading vocabulary document from {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as file:
                return json.load(file)
        except (OSError, ValueError) as e:
            raise IngestError(f"Failed to read vocabulary document {self.path}: {e}") from e


class StaticDataSource(VocabularyDataSource):
    """
    Serves an already parsed document, e.g. one fetched by the caller.
    """

    def __init__(self, document: Dict[str, Any]):
        self.document = document

    def load(self) -> Dict[str, Any]:
        return self.document
