"""
SPDX license record and conversion result models

SpdxLicense mirrors the fields of a license-list-data json/details entry
that the converter reads; everything else in the file is ignored.
"""

from enum import Enum
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SpdxLicense(BaseModel):
    """
    One license from the SPDX license list

    Field names follow Python conventions; the JSON keys are accepted
    through aliases (e.g. licenseId, standardLicenseTemplate).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    license_id: str = Field(alias="licenseId")
    name: str = Field(default="")
    standard_license_template: str = Field(default="", alias="standardLicenseTemplate")
    license_text: str = Field(default="", alias="licenseText")
    license_comments: str = Field(default="", alias="licenseComments")
    see_also: List[str] = Field(default_factory=list, alias="seeAlso")
    is_deprecated: bool = Field(default=False, alias="isDeprecatedLicenseId")
    is_osi_approved: bool = Field(default=False, alias="isOsiApproved")

    def header_build(self) -> str:
        """
        Build the LRE header comment block for this license

        Example:
            //**
            MIT License
            https://spdx.org/licenses/MIT.json
            https://opensource.org/licenses/MIT
            **//
        """
        lines = ["//**", self.name, f"https://spdx.org/licenses/{self.license_id}.json"]
        lines.extend(self.see_also)
        lines.append("**//")
        return "\n".join(lines) + "\n\n"


class ConversionStatus(Enum):
    """Outcome of converting a single license"""
    WRITTEN = "written"
    EXISTS = "exists"            # target present and overwrite not requested
    EXCLUDED = "excluded"        # handled by hand-written LREs elsewhere
    DEPRECATED = "deprecated"
    FAILED = "failed"


@dataclass
class ConversionResult:
    """
    Result of converting one SPDX JSON file

    Attributes:
        source: JSON file that was read
        license_id: SPDX identifier ("" if the file could not be read)
        status: What happened to the license
        target: Path of the .lre file (written or skipped)
        document: Full LRE document, when translation succeeded
        warning: Advisory message from the normalizer
        message: Error description for FAILED results
    """
    source: Path
    license_id: str
    status: ConversionStatus
    target: Optional[Path] = None
    document: Optional[str] = None
    warning: Optional[str] = None
    message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is ConversionStatus.FAILED
