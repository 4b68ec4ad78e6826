"""Boundary helpers around the generator.

This module finds the destination package name from Go files on disk,
decides where the generated file goes, writes it and runs goimports on it.
"""

import os
import stat
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import IO, Sequence

from .codegen.core.config import GeneratorConfig
from .codegen.languages.go.typeexpr import read_package_name
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_OUTPUT_NAME = "dataclass.go"


class OutputError(Exception):
    """Base exception for loading packages and writing results."""

    pass


class PackageLoadError(OutputError):
    """Raised when the destination package cannot be determined."""

    pass


class FormatterError(OutputError):
    """Raised when goimports fails."""

    pass


def read_package_clause(file_path: str | Path) -> str:
    """Read the package name declared by a Go source file.

    Args:
        file_path: Path to a ``.go`` file.

    Returns:
        The package name.

    Raises:
        PackageLoadError: If the file cannot be read or has no package clause.
    """
    file_path = Path(file_path)
    try:
        source = file_path.read_bytes()
    except OSError as e:
        raise PackageLoadError(f"Error reading file {file_path}: {e}") from e

    name = read_package_name(source)
    if name is None:
        raise PackageLoadError(f"{file_path}: expected 'package' clause")
    return name


def _package_files(pattern: str) -> list[Path]:
    path = Path(pattern)
    if path.is_dir():
        return sorted(
            p for p in path.glob("*.go")
            if p.is_file() and not p.name.endswith("_test.go")
        )
    if path.is_file():
        return [path]
    raise PackageLoadError(f"cannot find package: {pattern}")


def load_package_name(patterns: Sequence[str]) -> str:
    """Determine the name of the single package described by patterns.

    Args:
        patterns: Directories or Go files; defaults to the current directory.

    Returns:
        The package name.

    Raises:
        PackageLoadError: Unless exactly one package is found.
    """
    patterns = list(patterns) or ["."]
    names: list[str] = []

    for pattern in patterns:
        for file_path in _package_files(pattern):
            name = read_package_clause(file_path)
            logger.debug("Found package %s in %s", name, file_path)
            if name not in names:
                names.append(name)

    if len(names) != 1:
        logger.error("%d packages found in %s", len(names), patterns)
        raise PackageLoadError(f"{len(names)} packages found")
    return names[0]


def is_directory(path: str) -> bool:
    """Check whether path is a directory; a missing path is an error."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError as e:
        raise OutputError(str(e)) from e


def dest_dir(args: Sequence[str]) -> str:
    """Directory the generated file goes to when no output is given."""
    args = list(args) or ["."]
    if len(args) == 1 and is_directory(args[0]):
        return args[0]
    return os.path.dirname(args[0])


def dest_filename(output: str | None, args: Sequence[str]) -> str:
    """Resolve the output file name."""
    if output:
        return output
    return os.path.join(dest_dir(args), DEFAULT_OUTPUT_NAME)


class GoImporter:
    """Runs goimports in place on a file."""

    def __init__(self, goimports: str, target_file: str):
        self.goimports = goimports
        self.target_file = target_file

    def do_import(self) -> None:
        """Format the target file.

        Raises:
            FormatterError: If the executable is missing or fails.
        """
        cmd = [self.goimports, "-w", self.target_file]
        logger.debug("Running %s", " ".join(cmd))
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise FormatterError(f"goimports executable not found: {self.goimports}") from e
        except subprocess.CalledProcessError as e:
            raise FormatterError(
                f"{self.goimports} exited with status {e.returncode}"
            ) from e


def write_result_and_format(src: bytes, file_name: str, goimports: str) -> None:
    """Write src to file_name with mode 0600 and run goimports on it."""
    try:
        fd = os.open(file_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(src)
    except OSError as e:
        logger.error("Failed to write to %s: %s", file_name, e)
        raise OutputError(f"failed to write to {file_name}: {e}") from e

    try:
        GoImporter(goimports, file_name).do_import()
    except FormatterError as e:
        raise FormatterError(f"failed to goimport: {e}") from e


def write_result_to_destfile(
    src: bytes, output: str | None, args: Sequence[str], goimports: str
) -> str:
    """Write and format the result in its destination file.

    Returns:
        The file name written.
    """
    file_name = dest_filename(output, args)
    write_result_and_format(src, file_name, goimports)
    logger.info("Wrote %s", file_name)
    return file_name


def write_result_to_stdout(
    src: bytes, goimports: str, stream: IO[str] | None = None
) -> None:
    """Format the result through a temporary file and print it."""
    stream = stream or sys.stdout
    fd, temp_name = tempfile.mkstemp(prefix="dataclass", suffix=".go")
    os.close(fd)
    try:
        write_result_and_format(src, temp_name, goimports)
        stream.write(Path(temp_name).read_text(encoding="utf-8"))
        stream.flush()
    finally:
        os.remove(temp_name)


def write_result(src: bytes, args: Sequence[str], config: GeneratorConfig) -> str | None:
    """Write the result where the configuration says.

    Returns:
        The destination file name, or None when written to stdout.
    """
    if config.stdout:
        write_result_to_stdout(src, config.goimports)
        return None
    return write_result_to_destfile(src, config.output_file, args, config.goimports)
