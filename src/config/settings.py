"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use RICHTAG_ prefix (e.g., RICHTAG_MAX_DEPTH=8).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use RICHTAG_ prefix.

    Examples:
        RICHTAG_MAX_DEPTH=8
        RICHTAG_OUTPUT_FORMAT=yaml
        RICHTAG_HIGHLIGHT_STYLE=monokai
    """

    model_config = SettingsConfigDict(
        env_prefix="RICHTAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parser configuration
    max_depth: int = Field(
        default=32,
        ge=0,
        description="Maximum nesting of hover bodies parsed inside hover bodies",
    )

    debug_mode: bool = Field(
        default=False,
        description="Log every tag disposition while parsing",
    )

    # CLI configuration
    input_pattern: str = Field(
        default="**/*.txt",
        description="Glob for markup files when no single input file is given",
    )

    output_format: Literal["json", "yaml"] = Field(
        default="json",
        description="Serialization of parsed trees written by the CLI",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation of JSON tree output",
    )

    highlight_style: str = Field(
        default="default",
        description="Pygments style used by highlight mode",
    )

    def depth_check(self, depth: int) -> bool:
        """
        Check whether a parse at the given nesting depth is allowed.

        Args:
            depth: Zero for a top-level parse, +1 per enclosing hover body

        Returns:
            True if depth does not exceed max_depth

        Example:
            >>> settings = AppSettings(max_depth=1)
            >>> settings.depth_check(1), settings.depth_check(2)
            (True, False)
        """
        return depth <= self.max_depth


# Singleton instance - import this in your code
appsettings = AppSettings()
