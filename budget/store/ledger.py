"""File-backed ledger store."""

import json
import logging
import os
import tempfile
from pathlib import Path

from budget.domain.errors import CorruptStoreError
from budget.domain.ledger import LedgerDocument
from budget.store.schema import document_from_dict, document_to_dict, get_data_path

logger = logging.getLogger(__name__)


class LedgerStore:
    """Loads and saves the whole ledger document as one JSON file.

    Every mutation is a full read-modify-write of the file. There is no
    locking: when two processes save concurrently the last one wins.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else get_data_path()

    def __repr__(self) -> str:
        return f"LedgerStore({str(self.path)!r})"

    def exists(self) -> bool:
        """Check if a persisted ledger exists."""
        return self.path.exists()

    def load(self) -> LedgerDocument:
        """Load the ledger, or an empty one if nothing is persisted yet.

        Returns:
            The persisted LedgerDocument.

        Raises:
            CorruptStoreError: If the file is not a valid ledger.
            OSError: If the file cannot be read.
        """
        if not self.path.exists():
            logger.debug("No ledger at %s, starting empty", self.path)
            return LedgerDocument()

        raw = self.path.read_bytes()

        try:
            payload = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise CorruptStoreError(f"{self.path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"{self.path} is not valid JSON: {e}") from e

        document = document_from_dict(payload)
        logger.debug(
            "Loaded %d transactions and %d goals from %s",
            len(document.transactions),
            len(document.goals),
            self.path,
        )
        return document

    def save(self, document: LedgerDocument) -> None:
        """Overwrite the persisted ledger with the given document.

        The document is written to a temporary file beside the ledger and
        moved into place, so a failed write leaves the old file intact.

        Raises:
            OSError: If the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(document_to_dict(document), indent=2, ensure_ascii=False) + "\n"

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved %d transactions to %s", len(document.transactions), self.path)
