# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Per-run mapping from legacy identifiers to newly allocated ids."""
import threading
from typing import Optional


class TranslationTable:
    """Write-only until sealed, read-only afterwards.

    ``seal()`` is the barrier between the roster phases (players, trainers,
    shirt sets) and the event phase: every mapping must be recorded before
    the first reference is resolved.
    """

    def __init__(self) -> None:
        self._ids: dict[str, str] = {}
        self._sealed = threading.Event()
        self._lock = threading.Lock()

    def record(self, legacy_id: str, new_id: str) -> None:
        with self._lock:
            if self._sealed.is_set():
                raise RuntimeError("translation table is sealed; no further mappings allowed")
            self._ids[legacy_id] = new_id

    def seal(self) -> None:
        with self._lock:
            self._sealed.set()

    @property
    def sealed(self) -> bool:
        return self._sealed.is_set()

    def resolve(self, legacy_id: str) -> Optional[str]:
        """New id for ``legacy_id``, or None when the export never defined it."""
        if not self._sealed.is_set():
            raise RuntimeError("translation table read before the roster phases completed")
        return self._ids.get(legacy_id)

    def __contains__(self, legacy_id: str) -> bool:
        return legacy_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
