from __future__ import annotations

from src.absence_manager.absence_manager.core.enums import AbsenceStatus


def test_batch_create_preserves_order_and_assigns_fresh_ids(container):
    items = [
        {"session_id": 1, "student_id": 10, "status": AbsenceStatus.ABSENT},
        {"session_id": 1, "student_id": 11, "status": AbsenceStatus.PRESENT, "notes": "late"},
        {"session_id": 1, "student_id": 12, "status": AbsenceStatus.JUSTIFIED},
    ]

    created = container.absences_repo.batch_create(items)

    assert len(created) == 3
    assert len({a.id for a in created}) == 3
    for item, absence in zip(items, created):
        assert absence.session_id == item["session_id"]
        assert absence.student_id == item["student_id"]
        assert absence.status == item["status"]
        assert absence.notes == item.get("notes")
    assert container.absences_repo.list_all() == created


def test_batch_create_empty_returns_empty(container):
    assert container.absences_repo.batch_create([]) == []


def test_filters_by_session_and_student(container):
    repo = container.absences_repo
    a1 = repo.create(session_id=1, student_id=1, status=AbsenceStatus.ABSENT)
    a2 = repo.create(session_id=2, student_id=1, status=AbsenceStatus.PRESENT)
    a3 = repo.create(session_id=1, student_id=2, status=AbsenceStatus.UNJUSTIFIED)

    assert repo.list_by_session(1) == [a1, a3]
    assert repo.list_by_student(1) == [a1, a2]
    assert container.resolver.absences_for_session(2) == [a2]
    assert container.resolver.absences_for_student(2) == [a3]


def test_update_status_only(container):
    repo = container.absences_repo
    a = repo.create(session_id=1, student_id=1, status=AbsenceStatus.ABSENT, notes="no show")

    updated = repo.update(a.id, status=AbsenceStatus.JUSTIFIED)

    assert updated.status == AbsenceStatus.JUSTIFIED
    assert (updated.session_id, updated.student_id, updated.notes) == (1, 1, "no show")
