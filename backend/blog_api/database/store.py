"""
JSON file persistence for the whole application state.

Every operation works on the complete document: ``load`` reads the file,
``save`` rewrites it. Mutations go through ``transaction`` so concurrent
requests cannot interleave their read-modify-write cycles.
"""
import asyncio
import json
import logging
import os
import tempfile
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from pydantic import ValidationError as SchemaError

from blog_api.models.document import Document

logger = logging.getLogger(__name__)


class JsonStore:
    """Single-file document store with a per-store writer lock."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def load(self) -> Document:
        """
        Read the persisted document.

        A missing, unparsable or malformed file yields an empty document,
        which makes first-run initialization implicit. An unparsable or
        malformed file is first moved aside so the next save cannot
        overwrite it.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Document()
        except OSError as e:
            logger.warning("Could not read %s, starting empty: %s", self.path, e)
            return Document()

        try:
            return Document.model_validate(json.loads(raw))
        except (json.JSONDecodeError, SchemaError) as e:
            logger.warning("Unreadable data file %s, starting empty: %s", self.path, e)
            self._quarantine()
            return Document()

    def _quarantine(self) -> None:
        """Rename the current data file to `<name>.corrupt-<unix ms>`."""
        backup = self.path.with_name(f"{self.path.name}.corrupt-{time.time_ns() // 1_000_000}")
        try:
            os.replace(self.path, backup)
        except FileNotFoundError:
            # Another reader already moved it.
            return
        except OSError as e:
            logger.error("Could not back up %s: %s", self.path, e)
            return
        logger.warning("Moved unreadable data file to %s", backup)

    def save(self, document: Document) -> None:
        """
        Overwrite the data file with the full document.

        The JSON is written to a sibling temp file and moved into place,
        so readers never observe a half-written file.

        Raises:
            OSError: If the data file's directory is missing or unwritable
        """
        payload = document.model_dump_json(by_alias=True, indent=2)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Document]:
        """
        Serialize a load-mutate-save cycle.

        Usage:
            async with store.transaction() as document:
                document.articles.append(article)

        The document is saved only if the block exits without raising.
        """
        async with self._lock:
            document = self.load()
            yield document
            self.save(document)

    def check(self) -> None:
        """
        Readiness check for the data directory.

        Raises:
            OSError: If the directory is missing or not writable
        """
        directory = self.path.parent
        if not directory.is_dir():
            raise FileNotFoundError(f"Data directory {directory} does not exist")
        if not os.access(directory, os.W_OK):
            raise PermissionError(f"Data directory {directory} is not writable")
