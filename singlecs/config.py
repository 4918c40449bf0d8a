from typing import Set

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    """
    Single-file generator configuration.
    Priority: Environment Variables (SINGLECS_*) > .env file > Defaults.
    """

    # --- Merge conventions ---
    DEFAULT_SDK: str = Field(
        default="Microsoft.NET.Sdk",
        description="SDK that needs no #:sdk directive in the merged file"
    )
    ENTRY_POINT_FILE_NAME: str = Field(
        default="Program.cs",
        description="File holding top-level statements, emitted last (case-insensitive)"
    )
    TOOL_PACKAGE_NAME: str = Field(
        default="Kros.SingleCsFileGenerator",
        description="Package reference of this generator, never emitted as #:package"
    )

    # --- Project discovery ---
    PROJECT_FILE_EXTENSION: str = Field(default=".csproj", description="Project descriptor extension")
    SOURCE_FILE_PATTERN: str = Field(default="*.cs", description="Glob for project source files")
    EXCLUDED_DIRECTORIES: Set[str] = Field(
        default={"bin", "obj"},
        description="Build output directories skipped while enumerating sources"
    )

    # --- Diagnostics ---
    LOG_LEVEL: str = Field(default="INFO", description="Logging level for the CLI")
    DEBUG: bool = Field(default=False, description="Enable debug logging")

    model_config = SettingsConfigDict(
        env_prefix="SINGLECS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Singleton instance
settings = GeneratorSettings()
