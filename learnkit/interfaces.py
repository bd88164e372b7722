"""Abstract collaborators: storage, file system, network and logging."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Database(ABC):
    """Key-value store of strings."""

    @abstractmethod
    def save(self, key: str, value: str) -> bool:
        """Store ``value`` under ``key``; return True on success."""

    @abstractmethod
    def load(self, key: str) -> str:
        """Return the value stored under ``key``."""

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Delete ``key``; return True on success."""

    @abstractmethod
    def all_keys(self) -> list[str]:
        """Return every stored key."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return True when ``key`` is stored."""


class FileSystem(ABC):
    """Text file storage."""

    @abstractmethod
    def write_file(self, filename: str, content: str) -> bool:
        """Write ``content`` to ``filename``; return True on success."""

    @abstractmethod
    def read_file(self, filename: str) -> str:
        """Return the content of ``filename``."""

    @abstractmethod
    def delete_file(self, filename: str) -> bool:
        """Delete ``filename``; return True on success."""

    @abstractmethod
    def file_exists(self, filename: str) -> bool:
        """Return True when ``filename`` exists."""

    @abstractmethod
    def file_size(self, filename: str) -> int:
        """Return the size of ``filename`` in bytes."""


class NetworkClient(ABC):
    """Minimal HTTP-like client."""

    @abstractmethod
    def get(self, url: str) -> str:
        """Fetch ``url`` and return the body."""

    @abstractmethod
    def post(self, url: str, data: str) -> bool:
        """Send ``data`` to ``url``; return True on success."""

    @property
    @abstractmethod
    def response_code(self) -> int:
        """Status code of the last request."""

    @abstractmethod
    def set_timeout(self, seconds: int) -> None:
        """Set the request timeout in seconds."""


class Logger(ABC):
    """Sink for log messages at four levels."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message."""