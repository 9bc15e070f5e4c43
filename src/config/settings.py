"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SPDX2LRE_ prefix (e.g., SPDX2LRE_WRAP_WIDTH=100).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SPDX2LRE_ prefix.

    Examples:
        SPDX2LRE_WRAP_WIDTH=72
        SPDX2LRE_GENERATE_COMMAND="go generate"
        SPDX2LRE_EXCLUDE_FILE=local-excludes.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="SPDX2LRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Translator configuration
    wrap_width: int = Field(
        default=80,
        gt=0,
        description="Target column width for reflowed literal text",
    )

    min_wildcard_words: int = Field(
        default=5,
        gt=0,
        description="Smallest word count a non-bullet variable wildcard may match",
    )

    copyright_window: int = Field(
        default=100,
        ge=0,
        description="Only cut a preamble if the copyright marker starts before this offset",
    )

    # SPDX checkout layout
    details_subdir: str = Field(
        default="json/details",
        description="Directory of per-license JSON files inside the SPDX checkout",
    )

    text_subdir: str = Field(
        default="text",
        description="Directory of plain license texts inside the SPDX checkout",
    )

    # Output configuration
    testdata_dir: str = Field(
        default="testdata",
        description="Fixture directory, relative to the output directory",
    )

    generate_command: str = Field(
        default="",
        description="Command run in the output directory after conversion (empty disables)",
    )

    exclude_file: str = Field(
        default="",
        description="Optional YAML list of additional license IDs to never write",
    )

    def detailsDir_resolve(self, inputdir: Path) -> Path:
        """
        Locate the SPDX JSON details directory inside a checkout.

        Example:
            >>> AppSettings().detailsDir_resolve(Path("_spdx"))
            PosixPath('_spdx/json/details')
        """
        return inputdir / self.details_subdir

    def textFile_resolve(self, inputdir: Path, license_id: str) -> Path:
        """Path of the plain text of a license inside a checkout"""
        return inputdir / self.text_subdir / f"{license_id}.txt"


# Singleton instance - import this in your code
appsettings = AppSettings()
