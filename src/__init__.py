"""
spdx2lre - SPDX license template to LRE converter

Translates SPDX standardLicenseTemplate markup into license regular
expressions for a license-detection engine.
"""

__version__ = "1.0.0"

from .lib import Translator, TemplateError, translate, SpdxError, LOG, state_connectToLogger

__all__ = ["Translator", "TemplateError", "translate", "SpdxError", "LOG", "state_connectToLogger", "__version__"]
