"""
Entry points of the mock generator.

- extract(): source text + interface name -> TypeData
- synthesize(): interface name + TypeData -> Go mock source
- find_type_data(): scan a directory for the file declaring the interface

Every call is independent; nothing is shared between invocations.

License: MIT
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import structlog

from .config import MockgenSettings, settings
from .exceptions import DeclarationNotFoundError, ProcessingError, ValidationError
from .generator import write_mock_type
from .models import TypeData
from .treesitter.extractors import GoInterfaceExtractor
from .treesitter.parser import GoParser

logger = structlog.get_logger(__name__)


def _require_interface_name(interface_name: str) -> None:
    if not interface_name or not interface_name.strip():
        raise ValidationError("interface_name cannot be empty")


def extract(source_text: str, interface_name: str, file_path: str = "<source>") -> TypeData:
    """
    Extract the methods, embeds and needed imports of a Go interface.

    Args:
        source_text: Go source of one file.
        interface_name: Name of the interface to extract.
        file_path: Name used in logs and parse errors.

    Returns:
        TypeData for the interface.

    Raises:
        ValidationError: If interface_name is empty.
        ParseError: If the source does not parse.
        DeclarationNotFoundError: If the interface is not declared in the source.
        MalformedFragmentError: If a signature fragment has unbalanced brackets.
    """
    _require_interface_name(interface_name)

    source = source_text.encode("utf-8")
    tree = GoParser().parse(source, file_path=file_path)
    type_data = GoInterfaceExtractor().extract_type_data(tree, source, interface_name)

    logger.info(
        "interface_extracted",
        interface=interface_name,
        file_path=file_path,
        methods_count=len(type_data.methods),
        embeds_count=len(type_data.embeds),
    )
    return type_data


def synthesize(
    interface_name: str, type_data: TypeData, app_settings: Optional[MockgenSettings] = None
) -> str:
    """
    Render the Go mock for an extracted interface.

    Args:
        interface_name: Name of the mocked interface.
        type_data: Output of extract().
        app_settings: Settings to read the generator name from (default: global settings).

    Returns:
        Go source text of the mock.
    """
    app_settings = app_settings or settings
    return write_mock_type(interface_name, type_data, generator_name=app_settings.generator_name)


def find_type_data(
    directory: Union[str, Path],
    interface_name: str,
    app_settings: Optional[MockgenSettings] = None,
) -> Tuple[Path, TypeData]:
    """
    Find the source file in a directory that declares an interface.

    Files are tried in name order. A file that does not declare the
    interface is skipped; any other error aborts the scan.

    Args:
        directory: Directory holding the package sources.
        interface_name: Name of the interface to extract.
        app_settings: Settings for extension and test-file filtering.

    Returns:
        Tuple of (path of the declaring file, TypeData).

    Raises:
        ValidationError: If the directory does not exist.
        DeclarationNotFoundError: If no file declares the interface.
        ProcessingError: If a source file cannot be read.
    """
    _require_interface_name(interface_name)
    app_settings = app_settings or settings
    directory = Path(directory)

    if not directory.is_dir():
        raise ValidationError(
            f"Source directory '{directory}' does not exist",
            error_code="VAL_002",
            details={"directory": str(directory)},
        )

    log = logger.bind(interface=interface_name, directory=str(directory))

    for path in sorted(directory.iterdir()):
        if path.is_dir() or path.suffix != app_settings.source_extension:
            continue
        if app_settings.skip_test_files and path.name.endswith(f"_test{path.suffix}"):
            log.debug("file_skipped", file_path=str(path), reason="test_file")
            continue

        try:
            source_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProcessingError(
                f"Couldn't read '{path}': {e}",
                details={"file_path": str(path)},
                original_exception=e,
            ) from e

        try:
            return path, extract(source_text, interface_name, file_path=str(path))
        except DeclarationNotFoundError:
            log.debug("file_skipped", file_path=str(path), reason="not_declared")

    raise DeclarationNotFoundError(
        interface_name,
        message=f"Interface type '{interface_name}' not found in any file of '{directory}'",
        details={"directory": str(directory)},
    )


def default_output_path(
    directory: Union[str, Path],
    interface_name: str,
    app_settings: Optional[MockgenSettings] = None,
) -> Path:
    """Destination of the mock when none is given, e.g. ``<dir>/vehicle_mock.go``."""
    app_settings = app_settings or settings
    return Path(directory) / app_settings.output_file_name(interface_name)


__all__ = [
    "extract",
    "synthesize",
    "find_type_data",
    "default_output_path",
]
