"""Reads, transforms and stores text content from files or the network."""

from __future__ import annotations

from collections.abc import Iterable

from learnkit.interfaces import FileSystem, Logger, NetworkClient

MAX_CONTENT_SIZE = 1_000_000
DOWNLOAD_TIMEOUT = 30
SUCCESS_STATUS = 200
BACKUP_SUFFIX = ".backup"
PROCESSED_SUFFIX = ".processed"
PROCESSED_PREFIX = "PROCESSED: "

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _content_size(content: str) -> int:
    return len(content.encode("utf-8"))


def _transform(content: str) -> str:
    return PROCESSED_PREFIX + content.translate(_ASCII_UPPER)


def _is_valid(content: str) -> bool:
    return bool(content) and _content_size(content) <= MAX_CONTENT_SIZE


class FileProcessor:
    """Turns input content into upper-cased, prefixed output content."""

    def __init__(
        self,
        file_system: FileSystem,
        network_client: NetworkClient,
        logger: Logger,
    ) -> None:
        self._file_system = file_system
        self._network_client = network_client
        self._logger = logger
        self._total_processed_size = 0

    @property
    def total_processed_size(self) -> int:
        """Bytes of input content successfully processed so far."""
        return self._total_processed_size

    def _store(self, content: str, output_file: str, success: str, failure: str) -> bool:
        written = self._file_system.write_file(output_file, _transform(content))
        if written:
            self._total_processed_size += _content_size(content)
            self._logger.info(success)
        else:
            self._logger.error(failure)
        return written

    def process_file(self, input_file: str, output_file: str) -> bool:
        """Transform ``input_file`` into ``output_file``; return True on success."""
        if not input_file or not output_file:
            self._logger.error("Invalid file names provided")
            return False
        if not self._file_system.file_exists(input_file):
            self._logger.error(f"Input file does not exist: {input_file}")
            return False

        self._logger.info(f"Processing file: {input_file}")
        content = self._file_system.read_file(input_file)
        if not content:
            self._logger.warning(f"Input file is empty: {input_file}")
            return False
        if not _is_valid(content):
            self._logger.error(f"Content validation failed for: {input_file}")
            return False

        return self._store(
            content,
            output_file,
            f"File processed successfully: {input_file} -> {output_file}",
            f"Failed to write output file: {output_file}",
        )

    def download_and_process(self, url: str, output_file: str) -> bool:
        """Fetch ``url`` and store its transformed body; return True on success."""
        if not url or not output_file:
            self._logger.error("Invalid URL or output file name")
            return False

        self._logger.info(f"Downloading from URL: {url}")
        self._network_client.set_timeout(DOWNLOAD_TIMEOUT)
        content = self._network_client.get(url)

        if self._network_client.response_code != SUCCESS_STATUS:
            self._logger.error(f"Failed to download from URL: {url}")
            return False
        if not content:
            self._logger.warning(f"Downloaded content is empty from: {url}")
            return False
        if not _is_valid(content):
            self._logger.error(f"Downloaded content validation failed from: {url}")
            return False

        return self._store(
            content,
            output_file,
            f"URL content processed successfully: {url} -> {output_file}",
            f"Failed to save processed content to: {output_file}",
        )

    def backup_file(self, filename: str) -> bool:
        """Copy ``filename`` to ``filename.backup``; return True on success."""
        if not filename:
            self._logger.error("Cannot backup: empty filename")
            return False
        if not self._file_system.file_exists(filename):
            self._logger.error(f"Cannot backup non-existent file: {filename}")
            return False

        backup_name = filename + BACKUP_SUFFIX
        content = self._file_system.read_file(filename)
        if self._file_system.write_file(backup_name, content):
            self._logger.info(f"File backed up successfully: {filename} -> {backup_name}")
            return True
        self._logger.error(f"Failed to backup file: {filename}")
        return False

    def process_multiple_files(self, files: Iterable[str]) -> list[str]:
        """Process each file to ``<file>.processed``; return the outputs written."""
        files = list(files)
        self._logger.info(f"Processing multiple files, count: {len(files)}")
        results = [
            output
            for output in (name + PROCESSED_SUFFIX for name in files)
            if self.process_file(output[: -len(PROCESSED_SUFFIX)], output)
        ]
        self._logger.info(
            f"Successfully processed {len(results)} out of {len(files)} files"
        )
        return results