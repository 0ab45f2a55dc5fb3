# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: collision-free identifier allocation per namespace.

Shared by every id-issuing call site (group creation, legacy import). The
counter lives in the store and is bumped with one atomic statement, so any
number of threads, processes or concurrent imports may call ``allocate``.
"""
from typing import Iterable, Tuple

from sqlalchemy.exc import SQLAlchemyError

from teams_api.core.exceptions import AllocationFailure
from teams_api.core.logging import get_logger
from teams_api.metrics import ALLOCATION_FAILURES, SEQUENCE_ALLOCATIONS
from teams_api.repositories.sequence_repository import SequenceRepository

logger = get_logger(__name__)

DEFAULT_NAMESPACES: Tuple[str, ...] = (
    "groups", "members", "events", "shirtsets", "invitations", "teams",
)


class SequenceAllocator:
    def __init__(self, repo: SequenceRepository):
        self._repo = repo

    def allocate(self, namespace: str) -> str:
        """Return the next id in ``namespace`` as a decimal string ("1" on first use).

        Raises AllocationFailure unless the increment was durably applied.
        """
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        try:
            value = self._repo.increment(namespace)
        except SQLAlchemyError as exc:
            ALLOCATION_FAILURES.labels(namespace=namespace).inc()
            logger.warning("Sequence increment failed namespace=%s: %s", namespace, exc,
                           extra={"namespace": namespace})
            raise AllocationFailure(namespace, exc) from exc
        if value is None:
            ALLOCATION_FAILURES.labels(namespace=namespace).inc()
            raise AllocationFailure(namespace, "increment returned no row")
        SEQUENCE_ALLOCATIONS.labels(namespace=namespace).inc()
        return str(value)

    def bootstrap(self, namespaces: Iterable[str] = DEFAULT_NAMESPACES) -> list[str]:
        """Create zero counters for unseen namespaces; existing counters keep their value."""
        created = []
        for name in namespaces:
            if self._repo.ensure(name):
                created.append(name)
                logger.info("Initialized sequence for: %s", name)
        return created

    def current(self, namespace: str) -> int:
        return self._repo.current(namespace)
