# =============================================================================
# tests/test_task_store.py - TaskStore Tests
# =============================================================================
# Tests TaskStore against the in-memory Supabase fake:
# - create/get_all/find_by_id round trips
# - delete_by_id returns True exactly once per id
# - search is case-insensitive and skips null titles
# - top_n ordering and bounds
# - every client fault surfaces as StorageError with the cause chained
# =============================================================================

import pytest

from core.services.task_store import TaskStore
from lib.supabase_client import StorageError


# =============================================================================
# Create / Read
# =============================================================================

class TestCreateAndRead:
    """Test creating and reading tasks."""

    def test_create_returns_task_with_id(self, store):
        task = store.create("Buy milk")

        assert task.id
        assert task.title == "Buy milk"

    def test_created_task_is_listed(self, store):
        task = store.create("Buy milk")

        assert task in store.get_all()

    def test_create_stores_server_timestamp(self, store, fake_supabase):
        """Only the title is sent; the store fills in id and created_at."""
        store.create("Buy milk")

        row = fake_supabase.tables["tasks"][0]
        assert row["title"] == "Buy milk"
        assert row["created_at"]

    def test_ids_are_unique(self, store):
        ids = {store.create(f"Task {i}").id for i in range(10)}

        assert len(ids) == 10

    def test_get_all_empty(self, store):
        assert store.get_all() == []

    def test_find_by_id(self, store):
        task = store.create("Buy milk")

        assert store.find_by_id(task.id) == task

    def test_find_by_id_absent(self, store):
        assert store.find_by_id("nonexistent-id") is None

    def test_custom_table(self, fake_supabase):
        store = TaskStore(fake_supabase, table="todo_items")
        store.create("Buy milk")

        assert store.table == "todo_items"
        assert len(fake_supabase.tables["todo_items"]) == 1
        assert "tasks" not in fake_supabase.tables


# =============================================================================
# Delete
# =============================================================================

class TestDelete:
    """Test mark-done deletion."""

    def test_delete_unknown_id_returns_false(self, store):
        assert store.delete_by_id("never-created") is False

    def test_delete_returns_true_once(self, store):
        task = store.create("Buy milk")

        assert store.delete_by_id(task.id) is True
        assert store.delete_by_id(task.id) is False

    def test_deleted_task_is_gone(self, store):
        keep = store.create("Keep me")
        drop = store.create("Drop me")

        store.delete_by_id(drop.id)

        assert store.get_all() == [keep]
        assert store.find_by_id(drop.id) is None

    def test_delete_absent_skips_delete_call(self, store, fake_supabase):
        store.delete_by_id("never-created")

        assert ("tasks", "delete") not in fake_supabase.calls

    def test_delete_all(self, store):
        for i in range(3):
            store.create(f"Task {i}")

        assert store.delete_all() == 3
        assert store.get_all() == []

    def test_delete_all_empty(self, store):
        assert store.delete_all() == 0

    def test_delete_all_partial_failure(self, store, fake_supabase):
        """A failure mid-way leaves earlier deletions in place."""
        for i in range(3):
            store.create(f"Task {i}")
        fake_supabase.raise_on("delete", RuntimeError("connection reset"), after=1)

        with pytest.raises(StorageError) as exc_info:
            store.delete_all()

        assert exc_info.value.details["deleted"] == 1
        assert len(store.get_all()) == 2


# =============================================================================
# Search
# =============================================================================

class TestSearch:
    """Test title search."""

    @pytest.fixture
    def seeded(self, store):
        return [
            store.create("Buy milk"),
            store.create("Buy MILK chocolate"),
            store.create("Walk the dog"),
        ]

    def test_substring_match(self, store, seeded):
        results = store.search_by_title("milk")

        assert [t.title for t in results] == ["Buy milk", "Buy MILK chocolate"]

    def test_case_insensitive(self, store, seeded):
        lower = store.search_by_title("foo") + store.search_by_title("milk")
        upper = store.search_by_title("FOO") + store.search_by_title("MILK")

        assert lower == upper

    def test_no_match(self, store, seeded):
        assert store.search_by_title("groceries") == []

    def test_empty_term_matches_all(self, store, seeded):
        assert sorted(store.search_by_title(""), key=lambda t: t.id) == sorted(
            store.get_all(), key=lambda t: t.id
        )

    def test_null_titles_never_match(self, store, fake_supabase, seeded):
        legacy = fake_supabase.seed("tasks", None)

        ids = {t.id for t in store.search_by_title("")}

        assert legacy["id"] not in ids
        assert len(ids) == len(seeded)


# =============================================================================
# Top N
# =============================================================================

class TestTopN:
    """Test newest-first limited listing."""

    @pytest.fixture
    def seeded(self, store):
        return [store.create(f"Task {i}") for i in range(4)]

    def test_newest_first(self, store, seeded):
        results = store.top_n(2)

        assert [t.title for t in results] == ["Task 3", "Task 2"]

    def test_n_larger_than_collection(self, store, seeded):
        results = store.top_n(10)

        assert results == list(reversed(seeded))

    def test_zero_returns_empty(self, store, fake_supabase, seeded):
        calls_before = len(fake_supabase.calls)

        assert store.top_n(0) == []
        assert len(fake_supabase.calls) == calls_before

    def test_negative_returns_empty(self, store, seeded):
        assert store.top_n(-3) == []

    def test_empty_collection(self, store):
        assert store.top_n(5) == []


# =============================================================================
# Error Handling
# =============================================================================

class TestStorageErrors:
    """Every client fault becomes StorageError with the cause chained."""

    @pytest.mark.parametrize(
        "op, call",
        [
            ("insert", lambda s: s.create("Buy milk")),
            ("select", lambda s: s.get_all()),
            ("select", lambda s: s.find_by_id("task-1")),
            ("select", lambda s: s.search_by_title("milk")),
            ("select", lambda s: s.top_n(3)),
            ("select", lambda s: s.delete_by_id("task-1")),
            ("select", lambda s: s.ping()),
        ],
    )
    def test_client_fault_wrapped(self, store, fake_supabase, op, call):
        cause = ConnectionError("Supabase unreachable")
        fake_supabase.raise_on(op, cause)

        with pytest.raises(StorageError) as exc_info:
            call(store)

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.details["table"] == "tasks"

    def test_delete_fault_wrapped(self, store, fake_supabase):
        task = store.create("Buy milk")
        fake_supabase.raise_on("delete", TimeoutError("timed out"))

        with pytest.raises(StorageError) as exc_info:
            store.delete_by_id(task.id)

        assert exc_info.value.code == "DELETE_FAILED"
        assert exc_info.value.details["task_id"] == task.id

    def test_empty_insert_response(self, store, fake_supabase, monkeypatch):
        """An insert that returns no row is a storage fault, not a crash."""
        from tests.fakes import FakeResponse, FakeQuery

        monkeypatch.setattr(FakeQuery, "execute", lambda self: FakeResponse(data=[]))

        with pytest.raises(StorageError) as exc_info:
            store.create("Buy milk")

        assert exc_info.value.code == "CREATE_FAILED"

    def test_ping_ok(self, store):
        store.ping()
