"""Data models for profingest."""

from profingest.models.text import DecodedText, EncodingTag

__all__ = ["DecodedText", "EncodingTag"]
