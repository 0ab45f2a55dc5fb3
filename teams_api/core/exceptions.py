# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain error taxonomy shared by repositories, services and controllers."""
from typing import Optional


class TeamsApiError(Exception):
    """Base class for every error raised by the teams-api domain."""


class AllocationFailure(TeamsApiError):
    """A sequence counter increment could not be durably applied."""

    def __init__(self, namespace: str, cause: object):
        self.namespace = namespace
        self.cause = cause
        super().__init__(f"could not allocate id in namespace '{namespace}': {cause}")


class PersistenceFailure(TeamsApiError):
    """An entity could not be written after its id was allocated.

    The allocated id is burned; it is never handed out again.
    """

    def __init__(self, entity: str, entity_id: Optional[str], cause: object):
        self.entity = entity
        self.entity_id = entity_id
        self.cause = cause
        super().__init__(f"could not persist {entity} {entity_id}: {cause}")


class MalformedSnapshot(TeamsApiError):
    """The legacy export does not have the expected structure."""

    def __init__(self, detail: str, errors: Optional[list] = None):
        self.detail = detail
        self.errors = errors or []
        super().__init__(detail)


class GroupNotFound(TeamsApiError):
    def __init__(self, group_id: str):
        self.group_id = group_id
        super().__init__(f"Group {group_id} not found")
