"""
Users module interface.

The auth service depends on IUserStore, not on a concrete store. Tests can
substitute a fake, and a persistent backend can replace the in-memory one
without touching the service.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import UserRecord, UserType


@runtime_checkable
class IUserStore(Protocol):
    """
    Storage contract for user records.

    Email lookups are case-insensitive. ``create`` is an atomic
    insert-if-absent keyed on the email: implementations must guarantee
    that two concurrent creates for the same email cannot both succeed.
    """

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the record registered under this email, if any."""
        ...

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Return the record with this ID, if any."""
        ...

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        user_type: Optional[UserType] = None,
    ) -> UserRecord:
        """
        Insert a new record.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    def update(self, user_id: str, **fields: Any) -> Optional[UserRecord]:
        """
        Apply a partial update and refresh ``updated_at``.

        Returns:
            The updated record, or None if the ID is unknown
        """
        ...

    def delete(self, user_id: str) -> bool:
        """Remove a record. Returns True if something was removed."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...
