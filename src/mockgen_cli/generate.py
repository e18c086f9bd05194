"""
Mock generation command.

Scans a directory for the file declaring the interface, renders the mock
and writes it next to the sources (or to an explicit path).
"""

import os
import sys
from pathlib import Path
from typing import Optional

from mockgen_core.config import MockgenSettings, settings
from mockgen_core.exceptions import GenerationError, MockgenError
from mockgen_core.logging_service import LoggingService
from mockgen_core.pipeline import default_output_path, find_type_data, synthesize
from mockgen_core.utils import get_logger


def write_mock_file(path: Path, mock_text: str, app_settings: MockgenSettings) -> None:
    """
    Write rendered mock text to disk.

    Args:
        path: Destination file
        mock_text: Rendered Go source
        app_settings: Settings providing the file mode

    Raises:
        GenerationError: If the file cannot be written
    """
    try:
        path.write_text(mock_text, encoding="utf-8")
        os.chmod(path, app_settings.output_file_mode)
    except OSError as e:
        raise GenerationError(
            f"error writing mock to '{path}': {e}",
            details={"path": str(path)},
            original_exception=e,
        ) from e


def generate_command(
    interface_name: str,
    directory: Path,
    output_path: Optional[Path] = None,
    app_settings: Optional[MockgenSettings] = None,
) -> bool:
    """
    Generate the mock for an interface declared in a directory.

    Args:
        interface_name: Name of the interface to mock
        directory: Directory holding the package sources
        output_path: Destination file (default: <dir>/<name>_mock.go)
        app_settings: Settings override (default: global settings)

    Returns:
        True if successful, False otherwise
    """
    app_settings = app_settings or settings
    logger = get_logger(__name__)

    try:
        source_path, type_data = find_type_data(directory, interface_name, app_settings)
        mock_text = synthesize(interface_name, type_data, app_settings)

        if output_path is None:
            output_path = default_output_path(directory, interface_name, app_settings)

        write_mock_file(output_path, mock_text, app_settings)

        logger.info(
            "mock_written",
            interface=interface_name,
            source=str(source_path),
            output=str(output_path),
            methods_count=len(type_data.methods),
        )
        print(f"Wrote {output_path} ({len(type_data.methods)} methods from {source_path.name})")
        return True

    except MockgenError as e:
        LoggingService.log_error(e, context={"interface": interface_name})
        print(f"Error: {e}", file=sys.stderr)
        return False
