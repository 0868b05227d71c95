"""backend.common.translator

Amazon Translate wrapper used to enrich driver descriptions on read.

Handlers depend on the `Translator` interface (a single `translate` method)
so tests can pass any object with that method instead of a live client.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import boto3

logger = logging.getLogger(__name__)


class Translator(ABC):
    @abstractmethod
    def translate(self, text: str, target_language_code: str) -> str:
        """Return `text` translated into `target_language_code`."""


class AwsTranslator(Translator):
    def __init__(self, client):
        self.client = client

    @classmethod
    def from_settings(cls, settings) -> "AwsTranslator":
        return cls(boto3.client("translate", region_name=settings.region))

    def translate(self, text: str, target_language_code: str) -> str:
        """Translate `text` into `target_language_code`.

        The source language is auto-detected by the service. The target code
        is upper-cased before the call. Errors from the service propagate.
        """
        target = target_language_code.upper()
        logger.info("Translating %d characters to %s", len(text), target)
        response = self.client.translate_text(
            Text=text,
            SourceLanguageCode="auto",
            TargetLanguageCode=target,
        )
        return response["TranslatedText"]
