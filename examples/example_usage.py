"""Example: using the service layer directly (no Flask).

Builds a store, records one session of attendance and prints the dashboard figures.
"""

from datetime import datetime

from src.absence_manager.absence_manager.container import build_container
from src.absence_manager.absence_manager.core.enums import AbsenceStatus, SessionType


def main():
    container = build_container()

    dept = container.departments_repo.create(name="Computer Science")
    course = container.courses_repo.create(name="Software Engineering", code="SE", department_id=dept.id, absence_threshold=1)
    module = container.modules_repo.create(name="Databases", code="DB", course_id=course.id)
    element = container.module_elements_repo.create(name="DB lecture", code="DB-CM", module_id=module.id)
    alice = container.students_repo.create(
        student_id="SE001", first_name="Alice", last_name="Martin", email="alice@example.com", course_id=course.id
    )
    teacher = container.users_repo.get_by_username("teacher")

    for day in (3, 10):
        session = container.sessions_repo.create(
            date=datetime(2025, 3, day, 8, 30),
            type=SessionType.COURSE,
            module_element_id=element.id,
            teacher_id=teacher.id,
        )
        container.absences_repo.batch_create(
            [{"session_id": session.id, "student_id": alice.id, "status": AbsenceStatus.ABSENT}]
        )

    reports = container.report_service
    print(reports.statistics())
    print(reports.top_absentees())
    print(reports.recent_activity())
    print(reports.threshold_breaches(course.id))


if __name__ == "__main__":
    main()
