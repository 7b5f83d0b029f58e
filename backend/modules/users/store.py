"""
In-memory user store.

Placeholder backend for IUserStore. Records live in two dicts (by ID and by
normalized email) guarded by a single lock, so ``create`` can check and
insert atomically.
"""

import logging
import secrets
import string
import time
from threading import Lock
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from .exceptions import DuplicateEmailError, ImmutableFieldError, InvalidFieldValueError
from .interfaces import IUserStore
from .models import UserRecord, UserType, normalize_email, utc_now

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


def generate_user_id() -> str:
    """Timestamp plus a random suffix, e.g. ``user_1718000000000_k3j9x0a2b``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"user_{int(time.time() * 1000)}_{suffix}"


class InMemoryUserStore(IUserStore):
    """Thread-safe in-memory implementation of IUserStore."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._by_id: dict[str, UserRecord] = {}
        self._id_by_email: dict[str, str] = {}

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            user_id = self._id_by_email.get(normalize_email(email))
            return self._by_id.get(user_id) if user_id else None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._by_id.get(user_id)

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        user_type: Optional[UserType] = None,
    ) -> UserRecord:
        key = normalize_email(email)
        with self._lock:
            if key in self._id_by_email:
                raise DuplicateEmailError(email)

            user_id = generate_user_id()
            while user_id in self._by_id:
                user_id = generate_user_id()

            now = utc_now()
            record = UserRecord(
                id=user_id,
                name=name,
                email=email.strip(),
                password_hash=password_hash,
                user_type=user_type,
                created_at=now,
                updated_at=now,
            )
            self._by_id[user_id] = record
            self._id_by_email[key] = user_id

        logger.debug("Created user %s", user_id)
        return record

    def update(self, user_id: str, **fields: Any) -> Optional[UserRecord]:
        for field in fields:
            if field in _IMMUTABLE_FIELDS or field not in UserRecord.model_fields:
                raise ImmutableFieldError(field)

        with self._lock:
            current = self._by_id.get(user_id)
            if current is None:
                return None

            new_key = None
            if "email" in fields:
                new_key = normalize_email(fields["email"])
                owner = self._id_by_email.get(new_key)
                if owner is not None and owner != user_id:
                    raise DuplicateEmailError(fields["email"])
                fields["email"] = fields["email"].strip()

            try:
                updated = UserRecord.model_validate(
                    {**current.model_dump(), **fields, "updated_at": utc_now()}
                )
            except PydanticValidationError as exc:
                raise InvalidFieldValueError(str(exc.errors()[0]["loc"][0])) from exc

            self._by_id[user_id] = updated
            if new_key is not None and new_key != current.email_key:
                del self._id_by_email[current.email_key]
                self._id_by_email[new_key] = user_id

        return updated

    def delete(self, user_id: str) -> bool:
        with self._lock:
            record = self._by_id.pop(user_id, None)
            if record is None:
                return False
            self._id_by_email.pop(record.email_key, None)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)
