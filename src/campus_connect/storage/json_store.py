from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from .base import LockingStore, Record
from .connection import StoreConfig

logger = logging.getLogger(__name__)


class JsonFileStore(LockingStore):
    """One ``<collection>.json`` file per collection under ``data_dir``.

    Writes go to a temp file in the same directory and are moved into place with
    ``os.replace`` so a reader never sees a half-written file.
    """

    def __init__(self, config: StoreConfig):
        super().__init__(lock_timeout=config.lock_timeout)
        self._dir = Path(config.data_dir)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: str) -> Path:
        return self._dir / f"{collection}.json"

    def _read(self, collection: str) -> List[Record]:
        path = self._path(collection)
        if not path.exists():
            return []
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return []
        return list(json.loads(text))

    def _write(self, collection: str, records: List[Record]) -> None:
        path = self._path(collection)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{collection}.", suffix=".tmp", dir=str(self._dir))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except Exception:
            logger.exception("Failed to write collection %s", collection)
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def ensure_collections(self, *names: str) -> None:
        for name in names:
            if not self._path(name).exists():
                self.save(name, [])
