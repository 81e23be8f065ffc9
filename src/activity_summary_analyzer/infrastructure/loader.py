"""
Export file loader.

Reads an export from disk, falling back to a trailing window of the file
when it is too large to read in full.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from activity_summary_analyzer.utils.exceptions import InputMissingError, ParsingError
from activity_summary_analyzer.utils.parameters import LoaderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedExport:
    """Text of an export file and how much of it was read."""

    text: str
    size_bytes: int
    partial: bool = False


class ExportLoader:
    """
    Loader for export files.

    Files larger than ``max_full_read_bytes`` are only read from the last
    ``tail_window_bytes`` on, which keeps memory bounded at the cost of
    dropping older days.
    """

    def __init__(self, config: LoaderConfig | None = None) -> None:
        """
        Initialize export loader.

        Args:
            config: Loader configuration. Defaults are used if None.
        """
        self.config = config or LoaderConfig()

    def load(self, file_path: Path | str | None) -> LoadedExport:
        """
        Load an export file.

        Args:
            file_path: Path to the export file.

        Returns:
            The loaded text with its size and truncation flag.

        Raises:
            InputMissingError: If no path is given or the file does not exist.
            ParsingError: If the file cannot be read.
        """
        if not file_path:
            raise InputMissingError("No export file selected")

        path = Path(file_path)
        if not path.is_file():
            raise InputMissingError(f"Export file not found: {path}")

        try:
            size = path.stat().st_size
            partial = size > self.config.max_full_read_bytes

            with open(path, "rb") as f:
                if partial:
                    f.seek(max(size - self.config.tail_window_bytes, 0))
                raw = f.read()

        except OSError as e:
            raise ParsingError(f"Failed to read export file {path}: {e}") from e

        if partial:
            logger.warning(
                f"{path.name} is {size} bytes; reading only the last "
                f"{self.config.tail_window_bytes} bytes (partial data)"
            )

        text = raw.decode(self.config.encoding, errors="ignore")
        logger.info(f"Loaded {len(raw)} of {size} bytes from {path.name}")

        return LoadedExport(text=text, size_bytes=size, partial=partial)
