"""
spdx2lre - SPDX license template to LRE converter

Translates SPDX standardLicenseTemplate markup into license regular
expressions for a license-detection engine.
"""

__version__ = "1.0.0"

from .translator import Translator, TemplateError, translate
from .spdx import SpdxError, license_convert
from .log import LOG, state_connectToLogger

__all__ = [
    "Translator",
    "TemplateError",
    "translate",
    "SpdxError",
    "license_convert",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
