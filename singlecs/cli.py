"""
Single-file C# application generator CLI.

Usage:
    singlecs <project.csproj> <output.cs> [--enable-trimming]

Exit codes:
    0  success
    1  project file does not have the .csproj extension
    2  project file not found
    3  project file is not valid XML
    4  generating the single-file application failed
"""

import argparse
import logging
import os
import sys
from enum import IntEnum

from .config import settings
from .errors import InvalidProjectExtensionError, InvalidProjectFormatError, ProjectNotFoundError
from .project import load_project
from .task import GenerateSingleFileTask

logger = logging.getLogger("singlecs.cli")


class ExitCode(IntEnum):
    SUCCESS = 0
    INVALID_FILE_EXTENSION = 1
    FILE_NOT_FOUND = 2
    INVALID_FILE_FORMAT = 3
    GENERATION_ERROR = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="singlecs",
        description="Generates single-file application from given C# .NET project.",
    )
    parser.add_argument("project", help="Path to C# project (.csproj) file.")
    parser.add_argument("output", help="Path where single-file application will be generated.")
    parser.add_argument(
        "--enable-trimming", "--enableTrimming",
        dest="enable_trimming",
        action="store_true",
        help="Request trimming. The generated file always disables it, so this only emits a warning.",
    )
    return parser


def configure_logging():
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def run(args) -> ExitCode:
    try:
        metadata = load_project(args.project, settings)
    except InvalidProjectExtensionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.INVALID_FILE_EXTENSION
    except ProjectNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.FILE_NOT_FOUND
    except InvalidProjectFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.INVALID_FILE_FORMAT

    if args.enable_trimming:
        logger.warning("Trimming is always disabled in the generated file; --enable-trimming is ignored.")

    task = GenerateSingleFileTask.from_project(metadata, os.path.abspath(args.output), settings)
    if not task.execute():
        print(f"Error when generating single-file app: {task.error}", file=sys.stderr)
        return ExitCode.GENERATION_ERROR

    return ExitCode.SUCCESS


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    return int(run(args))


if __name__ == "__main__":
    sys.exit(main())
