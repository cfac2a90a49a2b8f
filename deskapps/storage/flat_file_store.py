"""Flat file store for loading and saving whole record collections."""

from pathlib import Path
from typing import Callable, Iterable, TypeVar

from structlog import get_logger

from deskapps.transformers.errors import RecordFormatError

logger = get_logger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """Raised when a collection cannot be written to disk."""

    pass


class FlatFileStore:
    """Reads and rewrites one-record-per-line text files.

    Every save overwrites the whole file. There is no journal, so a
    process killed mid-write can leave a truncated file behind.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_lines(self, path: Path) -> list[str]:
        """Read the non-blank lines of a file.

        A missing file reads as empty. Any other I/O error is logged and
        the lines read before it are returned. Each line is decoded on its
        own, so bytes invalid in the store encoding are replaced with
        U+FFFD in that line only.

        Args:
            path: File to read

        Returns:
            Lines without their trailing newline
        """
        path = Path(path)
        lines: list[str] = []
        try:
            with open(path, "rb") as f:
                for number, raw in enumerate(f, start=1):
                    line = self._decode(raw, path, number).rstrip("\r\n")
                    if line.strip():
                        lines.append(line)
        except FileNotFoundError:
            logger.info("No data file yet", path=str(path))
        except OSError as e:
            logger.error(
                "Error loading data file",
                path=str(path),
                error=str(e),
                lines_read=len(lines),
            )
        return lines

    def _decode(self, raw: bytes, path: Path, number: int) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.warning(
                "Undecodable bytes in data file",
                path=str(path),
                line=number,
                encoding=self.encoding,
                error=str(e),
            )
            return raw.decode(self.encoding, errors="replace")

    def write_lines(self, path: Path, lines: Iterable[str]) -> None:
        """Overwrite a file with the given lines.

        Args:
            path: File to write, parent directories are created
            lines: Lines without trailing newline

        Raises:
            StorageError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=self.encoding) as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
        except OSError as e:
            logger.error("Error saving data file", path=str(path), error=str(e))
            raise StorageError(f"Error saving {path}: {e}") from e

    def load(self, path: Path, decode: Callable[[str], T]) -> list[T]:
        """Load a collection, skipping lines that fail to decode.

        Args:
            path: File to read
            decode: Turns one line into a record, raising RecordFormatError

        Returns:
            Decoded records in file order
        """
        records: list[T] = []
        for line_number, line in enumerate(self.read_lines(path), start=1):
            try:
                records.append(decode(line))
            except RecordFormatError as e:
                logger.warning(
                    "Skipping malformed record",
                    path=str(path),
                    line_number=line_number,
                    reason=e.reason,
                )
        logger.debug("Loaded records", path=str(path), count=len(records))
        return records

    def save(self, path: Path, records: Iterable[T], encode: Callable[[T], str]) -> None:
        """Overwrite a file with a whole collection.

        Raises:
            StorageError: If the file cannot be written
        """
        self.write_lines(path, (encode(record) for record in records))
        logger.debug("Saved records", path=str(path))
