"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import StoreDecodeError, StoreEncodeError, StoreReadError, StoreWriteError
from ...log import logger


class JsonStore:
    """JSON file store that reads and rewrites the whole document.

    A missing file is the empty state (``_default()``).  Any other failure
    to read, parse, encode or write is raised as a ``StoreError``; there is
    no partial recovery.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, returning ``_default()`` if absent."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no store at %s, starting empty", self.path)
            return self._default()
        except OSError as exc:
            raise StoreReadError(f"cannot access harpoon store file: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreDecodeError(f"corrupt harpoon store file {self.path}: {exc}") from exc

    def save_raw(self, data: dict | list, *, sort_keys: bool = False) -> None:
        """Write *data* as pretty-printed JSON, creating parents as needed."""
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        except (TypeError, ValueError) as exc:
            raise StoreEncodeError(f"cannot encode harpoon store: {exc}") from exc
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError(f"cannot write harpoon store file: {exc}") from exc
        logger.debug("saved store to %s", self.path)

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
