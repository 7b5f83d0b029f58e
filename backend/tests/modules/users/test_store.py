import threading
import time

import pytest

from modules.users.exceptions import (
    DuplicateEmailError,
    ImmutableFieldError,
    InvalidFieldValueError,
)
from modules.users.interfaces import IUserStore
from modules.users.models import UserType
from modules.users.store import InMemoryUserStore, generate_user_id


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


class TestCreate:
    def test_create_assigns_id_and_timestamps(self, store):
        user = store.create(name="Jo", email="A@B.com", password_hash="h")
        assert user.id.startswith("user_")
        assert user.created_at == user.updated_at
        assert user.user_type is None
        assert store.count() == 1

    def test_create_preserves_display_casing(self, store):
        user = store.create(name="Jo", email="A@B.com", password_hash="h")
        assert user.email == "A@B.com"

    def test_duplicate_email_rejected_any_case(self, store):
        """A second record with the same email, in any casing, is refused."""
        store.create(name="Jo", email="A@B.com", password_hash="h")
        with pytest.raises(DuplicateEmailError):
            store.create(name="Other", email="a@b.COM", password_hash="h2")
        assert store.count() == 1

    def test_concurrent_creates_produce_one_record(self, store):
        """Racing creates for the same email must not both succeed."""
        results: list[str] = []
        barrier = threading.Barrier(8)

        def worker(i: int) -> None:
            barrier.wait()
            try:
                store.create(name=f"User {i}", email="Race@Example.com", password_hash="h")
                results.append("created")
            except DuplicateEmailError:
                results.append("duplicate")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("created") == 1
        assert results.count("duplicate") == 7
        assert store.count() == 1


class TestFind:
    def test_find_by_email_case_insensitive(self, store):
        created = store.create(name="Jo", email="A@B.com", password_hash="h")
        assert store.find_by_email("a@b.com") == created
        assert store.find_by_email(" A@B.COM ") == created

    def test_find_by_email_missing(self, store):
        assert store.find_by_email("nobody@example.com") is None

    def test_find_by_id(self, store):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        assert store.find_by_id(created.id) == created
        assert store.find_by_id("missing") is None


class TestUpdate:
    def test_update_sets_fields_and_refreshes_updated_at(self, store):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        time.sleep(0.001)
        updated = store.update(created.id, user_type=UserType.VENDOR)

        assert updated is not None
        assert updated.user_type is UserType.VENDOR
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at
        assert store.find_by_id(created.id).user_type is UserType.VENDOR

    def test_update_unknown_id_returns_none(self, store):
        assert store.update("missing", name="New") is None

    @pytest.mark.parametrize("field", ["id", "created_at", "updated_at", "nonsense"])
    def test_update_rejects_fixed_or_unknown_fields(self, store, field):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        with pytest.raises(ImmutableFieldError):
            store.update(created.id, **{field: "x"})

    def test_update_rejects_invalid_value(self, store):
        """Bad values must not land in the store."""
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        with pytest.raises(InvalidFieldValueError) as exc_info:
            store.update(created.id, user_type="superuser")
        assert exc_info.value.details == {"field": "user_type"}
        assert exc_info.value.status_code == 400
        assert store.find_by_id(created.id).user_type is None

    def test_update_invalid_value_emits_no_warnings(self, store, recwarn):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        with pytest.raises(InvalidFieldValueError):
            store.update(created.id, user_type=42)
        assert len(recwarn) == 0

    def test_update_email_keeps_index_consistent(self, store):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        store.update(created.id, email="New@B.com")
        assert store.find_by_email("a@b.com") is None
        assert store.find_by_email("new@b.com").id == created.id

    def test_update_email_to_taken_address_rejected(self, store):
        store.create(name="Jo", email="a@b.com", password_hash="h")
        other = store.create(name="Al", email="c@d.com", password_hash="h")
        with pytest.raises(DuplicateEmailError):
            store.update(other.id, email="A@B.com")


class TestDelete:
    def test_delete_frees_email(self, store):
        created = store.create(name="Jo", email="a@b.com", password_hash="h")
        assert store.delete(created.id) is True
        assert store.find_by_id(created.id) is None
        assert store.find_by_email("a@b.com") is None
        store.create(name="Jo", email="A@B.com", password_hash="h")

    def test_delete_unknown(self, store):
        assert store.delete("missing") is False


class TestIds:
    def test_store_satisfies_interface(self, store):
        assert isinstance(store, IUserStore)

    def test_ids_are_unique(self):
        ids = {generate_user_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_id_format(self):
        prefix, timestamp, suffix = generate_user_id().split("_")
        assert prefix == "user"
        assert timestamp.isdigit()
        assert len(suffix) == 9
