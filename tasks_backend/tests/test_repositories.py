import threading

import pytest

from src.api.repositories import InMemoryRepository


def make_task(task_id, label="Task", completed=False):
    return {"id": task_id, "label": label, "completed": completed}


class TestInMemoryRepository:
    def test_create_assigns_fresh_id_and_defaults(self):
        repo = InMemoryRepository()
        first = repo.create("one")
        second = repo.create("two")
        assert first["id"] != second["id"]
        assert first["completed"] is False
        assert repo.list() == [first, second]

    def test_find_by_id_returns_none_when_absent(self):
        repo = InMemoryRepository([make_task("a")])
        assert repo.find_by_id("a") == make_task("a")
        assert repo.find_by_id("b") is None

    def test_append_rejects_duplicate_id(self):
        repo = InMemoryRepository([make_task("a")])
        with pytest.raises(ValueError):
            repo.append(make_task("a", label="again"))
        assert repo.list() == [make_task("a")]

    def test_replace_all_swaps_collection(self):
        repo = InMemoryRepository([make_task("a"), make_task("b")])
        repo.replace_all([make_task("c")])
        assert repo.list() == [make_task("c")]

    def test_returned_records_are_copies(self):
        repo = InMemoryRepository([make_task("a", label="original")])
        repo.list()[0]["label"] = "mutated"
        found = repo.find_by_id("a")
        found["completed"] = True
        assert repo.find_by_id("a") == make_task("a", label="original")

    def test_update_merges_only_supplied_fields(self):
        repo = InMemoryRepository([make_task("a", label="x"), make_task("b", label="y")])
        assert repo.update("a", {"completed": True}) is True
        assert repo.find_by_id("a") == make_task("a", label="x", completed=True)
        assert repo.find_by_id("b") == make_task("b", label="y")

    def test_update_never_changes_id(self):
        repo = InMemoryRepository([make_task("a")])
        repo.update("a", {"id": "z", "label": "renamed"})
        assert repo.find_by_id("z") is None
        assert repo.find_by_id("a")["label"] == "renamed"

    def test_update_and_delete_unknown_id_report_false(self):
        repo = InMemoryRepository([make_task("a")])
        assert repo.update("missing", {"label": "x"}) is False
        assert repo.delete("missing") is False
        assert repo.list() == [make_task("a")]

    def test_delete_preserves_order_of_remaining(self):
        repo = InMemoryRepository([make_task("a"), make_task("b"), make_task("c")])
        assert repo.delete("b") is True
        assert [t["id"] for t in repo.list()] == ["a", "c"]

    def test_concurrent_creates_all_land(self):
        repo = InMemoryRepository()
        threads = [
            threading.Thread(target=lambda n=n: [repo.create(f"t{n}-{i}") for i in range(50)])
            for n in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        items = repo.list()
        assert len(items) == 400
        assert len({t["id"] for t in items}) == 400

    def test_concurrent_updates_do_not_lose_records(self):
        repo = InMemoryRepository([make_task(str(i)) for i in range(100)])
        threads = [
            threading.Thread(target=lambda lo=lo: [repo.update(str(i), {"completed": True}) for i in range(lo, lo + 25)])
            for lo in range(0, 100, 25)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        items = repo.list()
        assert [t["id"] for t in items] == [str(i) for i in range(100)]
        assert all(t["completed"] for t in items)
