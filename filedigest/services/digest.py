"""
Digest Service - Size-bounded streaming MD5 of a single file.

The file is checked for existence, opened once, measured through the open
handle, and only read when it fits under the size ceiling:

  no regular file        -> FileMissing
  size > max_file_size   -> TooLarge (contents never read)
  OSError while reading  -> ReadFailed (FileMissing if it vanished)
  otherwise              -> Success(lowercase hex digest)

MD5 is used for identity and integrity checks, not security.
"""

import hashlib
import os
from dataclasses import dataclass
from typing import Union

from loguru import logger

DEFAULT_MAX_FILE_SIZE = 1024 * 1024 * 1024
DEFAULT_CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class Empty:
    """No path given yet."""


@dataclass(frozen=True)
class FileMissing:
    path: str


@dataclass(frozen=True)
class TooLarge:
    path: str
    actual_size: int
    limit: int


@dataclass(frozen=True)
class ReadFailed:
    path: str
    reason: str


@dataclass(frozen=True)
class Success:
    hex_digest: str


DigestOutcome = Union[Empty, FileMissing, TooLarge, ReadFailed, Success]


def md5_file(fileobj, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Stream an open binary file through MD5 and return the hex digest."""
    hasher = hashlib.md5(usedforsecurity=False)
    while chunk := fileobj.read(chunk_size):
        hasher.update(chunk)
    return hasher.hexdigest()


class DigestService:
    """
    Compute file digests under a fixed size ceiling.

    Holds no state between calls besides its two limits, so one instance
    can serve every query.
    """

    def __init__(
        self,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if max_file_size < 0:
            raise ValueError(f"max_file_size must be non-negative, got {max_file_size}")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.max_file_size = max_file_size
        self.chunk_size = chunk_size
        logger.debug(
            f"DigestService initialized (max_file_size={max_file_size}, chunk_size={chunk_size})"
        )

    def compute(self, path: str) -> DigestOutcome:
        """
        Digest the file at path.

        Args:
            path: File path as typed by the user (already unquoted)

        Returns:
            One DigestOutcome variant; never raises for file problems.
        """
        if not path:
            return Empty()

        if not os.path.isfile(path):
            return FileMissing(path)

        try:
            with open(path, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if size > self.max_file_size:
                    return TooLarge(path, size, self.max_file_size)
                return Success(md5_file(f, self.chunk_size))
        except FileNotFoundError:
            # Deleted between the existence check and the open
            logger.warning(f"File disappeared before it could be read: {path}")
            return FileMissing(path)
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            return ReadFailed(path, e.strerror or str(e))
