import os
from unittest.mock import patch

from singlecs.config import GeneratorSettings, settings


def test_defaults():
    """Verify the merge conventions of a .NET project."""
    assert settings.DEFAULT_SDK == "Microsoft.NET.Sdk"
    assert settings.ENTRY_POINT_FILE_NAME == "Program.cs"
    assert settings.TOOL_PACKAGE_NAME == "Kros.SingleCsFileGenerator"
    assert settings.EXCLUDED_DIRECTORIES == {"bin", "obj"}
    assert settings.PROJECT_FILE_EXTENSION == ".csproj"


def test_environment_override():
    env = {
        "SINGLECS_ENTRY_POINT_FILE_NAME": "Main.cs",
        "SINGLECS_EXCLUDED_DIRECTORIES": '["out"]',
        "SINGLECS_DEBUG": "true",
    }
    with patch.dict(os.environ, env):
        overridden = GeneratorSettings()
    assert overridden.ENTRY_POINT_FILE_NAME == "Main.cs"
    assert overridden.EXCLUDED_DIRECTORIES == {"out"}
    assert overridden.DEBUG is True
