from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS


@dataclass
class StoreConfig:
    data_dir: Path
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls, data_dir: str | Path, lock_timeout: Optional[float] = None) -> "StoreConfig":
        return cls(
            data_dir=Path(data_dir),
            lock_timeout=float(lock_timeout if lock_timeout is not None else DEFAULT_LOCK_TIMEOUT_SECONDS),
        )
