"""
Ownership guard shared by every module that mutates owned records.

Tweets are owned by their author, user profiles by the user themselves.
Both go through the same check so the rule lives in one place.

Callers must confirm the record exists before asking the guard: a missing
record is a NotFoundError, a foreign record is an OwnershipError. Keeping the
two distinct is part of the public contract (404 vs 403).
"""

from .exceptions import AuthorizationError


class OwnershipError(AuthorizationError):
    """Raised when the caller does not own the record it tries to mutate."""

    def __init__(self, resource: str, resource_id: str, caller_id: str):
        super().__init__(
            f"You can only modify your own {resource}",
            code="NOT_OWNER",
            details={
                "resource": resource,
                "resource_id": resource_id,
                "caller_id": caller_id,
            },
        )


def is_owner(owner_id: str, caller_id: str) -> bool:
    """Return True when ``caller_id`` is the recorded owner."""
    return owner_id == caller_id


class OwnershipGuard:
    """
    Decides whether a caller may mutate an owned record.

    Stateless; one instance is shared by all services.
    """

    def authorize(
        self,
        owner_id: str,
        caller_id: str,
        resource: str = "resource",
        resource_id: str = "",
    ) -> None:
        """
        Allow the mutation or raise.

        Args:
            owner_id: Owner recorded on the (existing) record
            caller_id: ID of the authenticated caller
            resource: Human-readable resource kind, used in the error
            resource_id: ID of the record, used in the error details

        Raises:
            OwnershipError: If the caller is not the owner
        """
        if not is_owner(owner_id, caller_id):
            raise OwnershipError(resource, resource_id, caller_id)
