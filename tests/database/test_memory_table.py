from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.absence_manager.absence_manager.database.memory_base import MemoryTable
from src.absence_manager.absence_manager.departments.model import Department
from src.absence_manager.absence_manager.courses.model import Course


def test_ids_are_strictly_increasing_across_deletes():
    table = MemoryTable(Department)
    ids = []
    for i in range(5):
        rec = table.insert(name=f"D{i}")
        ids.append(rec.id)
        if i % 2 == 0:
            assert table.delete(rec.id)

    assert ids == [1, 2, 3, 4, 5]
    assert table.insert(name="after").id == 6


def test_insert_ignores_caller_supplied_id():
    table = MemoryTable(Department)
    table.insert(name="A")

    rec = table.insert(id=99, name="B")

    assert rec.id == 2
    assert table.get(99) is None


def test_update_preserves_untouched_fields():
    table = MemoryTable(Course)
    before = table.insert(name="Info", code="INF", department_id=1, description="desc", absence_threshold=4)

    after = table.update(before.id, name="Informatique")

    assert after.name == "Informatique"
    assert (after.code, after.department_id, after.description, after.absence_threshold) == ("INF", 1, "desc", 4)
    assert table.get(before.id) == after


def test_update_cannot_change_id_and_missing_id_returns_none():
    table = MemoryTable(Department)
    rec = table.insert(name="A")

    assert table.update(rec.id, id=42, name="B").id == rec.id
    assert table.update(12345, name="C") is None


def test_update_rejects_unknown_field():
    table = MemoryTable(Department)
    rec = table.insert(name="A")

    with pytest.raises(TypeError):
        table.update(rec.id, colour="red")


def test_delete_missing_returns_false_and_leaves_others():
    table = MemoryTable(Department)
    a = table.insert(name="A")
    b = table.insert(name="B")

    assert table.delete(a.id) is True
    assert table.delete(a.id) is False
    assert table.delete(999) is False
    assert table.all() == [b]


def test_filter_keeps_insertion_order():
    table = MemoryTable(Course)
    c1 = table.insert(name="c1", code="1", department_id=1)
    table.insert(name="c2", code="2", department_id=2)
    c3 = table.insert(name="c3", code="3", department_id=1)

    assert table.filter(department_id=1) == [c1, c3]
    assert [c for c in table.all() if c.department_id == 1] == table.filter(department_id=1)


def test_delete_first_removes_only_earliest_match():
    table = MemoryTable(Course)
    first = table.insert(name="x", code="X", department_id=1)
    second = table.insert(name="x", code="X", department_id=1)

    assert table.delete_first(code="X") is True
    assert table.all() == [second]
    assert first.id not in {c.id for c in table.all()}


def test_concurrent_inserts_get_distinct_contiguous_ids():
    table = MemoryTable(Department)
    n = 200

    with ThreadPoolExecutor(max_workers=8) as pool:
        records = list(pool.map(lambda i: table.insert(name=f"D{i}"), range(n)))

    assert sorted(r.id for r in records) == list(range(1, n + 1))
    assert len(table) == n
    assert table.insert(name="after").id == n + 1
