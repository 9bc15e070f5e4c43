"""
Models package for spdx2lre

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .template import TagKind, Tag, TranslationResult
from .spdx import SpdxLicense, ConversionStatus, ConversionResult

__all__ = [
    "ProgramState",
    "pipeline",
    "TagKind",
    "Tag",
    "TranslationResult",
    "SpdxLicense",
    "ConversionStatus",
    "ConversionResult",
]
