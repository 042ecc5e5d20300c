from __future__ import annotations


def _seed_course(client):
    dept = client.post("/api/departments", json={"name": "Science"}).get_json()
    course = client.post(
        "/api/courses", json={"name": "Info", "code": "INF", "departmentId": dept["id"], "absenceThreshold": 1}
    ).get_json()
    return dept, course


def _seed_student(client, course_id: int, n: int):
    resp = client.post(
        "/api/students",
        json={
            "studentId": f"S{n}",
            "firstName": f"First{n}",
            "lastName": f"Last{n}",
            "email": f"s{n}@example.com",
            "courseId": course_id,
        },
    )
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_requires_login(client):
    assert client.get("/api/departments").status_code == 401
    assert client.get("/api/statistics").status_code == 401


def test_login_session_and_logout(client, login):
    user = login("admin")
    assert user["role"] == "admin"
    assert "password" not in user

    resp = client.get("/api/auth/session")
    assert resp.get_json()["authenticated"] is True
    assert resp.get_json()["user"]["username"] == "admin"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/session").status_code == 401


def test_login_wrong_password(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid password"


def test_teacher_cannot_create_department(client, login):
    login("teacher")
    resp = client.post("/api/departments", json={"name": "X"})
    assert resp.status_code == 403


def test_department_head_manages_groups_but_not_students(client, login):
    login("admin")
    _, course = _seed_course(client)
    client.post("/api/auth/logout")

    login("head_d")
    assert client.post(
        "/api/students",
        json={"studentId": "S1", "firstName": "A", "lastName": "B", "email": "a@example.com", "courseId": course["id"]},
    ).status_code == 403
    resp = client.post("/api/student-groups", json={"name": "TD1", "type": "TD", "courseId": course["id"]})
    assert resp.status_code == 201
    assert resp.get_json()["type"] == "TD"


def test_crud_roundtrip_and_not_found(client, login):
    login("admin")
    dept, course = _seed_course(client)
    assert course["absenceThreshold"] == 1

    resp = client.put(f"/api/courses/{course['id']}", json={"name": "Informatique"})
    assert resp.status_code == 200
    assert resp.get_json()["code"] == "INF"
    assert resp.get_json()["name"] == "Informatique"

    assert client.get("/api/courses/999").status_code == 404
    assert client.put("/api/courses/999", json={"name": "x"}).status_code == 404

    assert client.delete(f"/api/departments/{dept['id']}").status_code == 200
    assert client.delete(f"/api/departments/{dept['id']}").status_code == 404
    # no cascade: course survives its department
    assert client.get(f"/api/courses/{course['id']}").status_code == 200


def test_list_filter_by_query_parameter(client, login):
    login("admin")
    _, course = _seed_course(client)
    other = client.post("/api/courses", json={"name": "Bio", "code": "BIO", "departmentId": 99}).get_json()

    resp = client.get(f"/api/courses?departmentId={course['departmentId']}")
    assert [c["id"] for c in resp.get_json()] == [course["id"]]
    assert len(client.get("/api/courses").get_json()) == 2
    assert other["absenceThreshold"] == 3
    assert client.get("/api/courses?departmentId=abc").status_code == 400


def test_validation_errors_are_structured(client, login):
    login("admin")
    resp = client.post("/api/courses", json={"name": "Info"})
    body = resp.get_json()

    assert resp.status_code == 400
    assert {e["field"] for e in body["errors"]} == {"code", "departmentId"}


def test_duplicate_course_code_rejected(client, login):
    login("admin")
    _seed_course(client)
    resp = client.post("/api/courses", json={"name": "Other", "code": "INF", "departmentId": 1})
    assert resp.status_code == 400


def test_users_endpoint_hides_passwords(client, login):
    login("admin")
    resp = client.post(
        "/api/users",
        json={"username": "prof", "password": "secret", "fullName": "Prof", "email": "p@example.com", "role": "teacher"},
    )
    assert resp.status_code == 201
    assert all("password" not in u for u in client.get("/api/users").get_json())
    assert client.post(
        "/api/users",
        json={"username": "x", "password": "secret", "fullName": "X", "email": "x@example.com", "role": "boss"},
    ).status_code == 400


def test_group_membership_routes(client, login):
    login("admin")
    _, course = _seed_course(client)
    s1 = _seed_student(client, course["id"], 1)
    s2 = _seed_student(client, course["id"], 2)
    group = client.post("/api/student-groups", json={"name": "TP1", "type": "TP", "courseId": course["id"]}).get_json()

    for s in (s2, s1):
        assert client.post(
            "/api/student-group-assignments", json={"studentId": s["id"], "groupId": group["id"]}
        ).status_code == 201

    members = client.get(f"/api/student-groups/{group['id']}/students").get_json()
    assert [m["id"] for m in members] == [s1["id"], s2["id"]]

    resp = client.delete(f"/api/student-group-assignments?studentId={s1['id']}&groupId={group['id']}")
    assert resp.status_code == 200
    resp = client.delete(f"/api/student-group-assignments?studentId={s1['id']}&groupId={group['id']}")
    assert resp.status_code == 404
    assert client.delete("/api/student-group-assignments?studentId=x").status_code == 400


def test_teacher_assignment_routes(client, login):
    login("admin")
    element = client.post("/api/module-elements", json={"name": "CM", "code": "CM1", "moduleId": 1}).get_json()
    assert client.post(
        "/api/teacher-module-elements", json={"teacherId": 2, "moduleElementId": element["id"]}
    ).status_code == 201

    assert [e["id"] for e in client.get("/api/teachers/2/module-elements").get_json()] == [element["id"]]
    assert len(client.get("/api/teacher-module-elements?teacherId=2").get_json()) == 1
    assert client.get("/api/teacher-module-elements").status_code == 400
    assert client.delete(
        f"/api/teacher-module-elements?teacherId=2&moduleElementId={element['id']}"
    ).status_code == 200


def test_attendance_flow_and_statistics(client, login):
    login("admin")
    _, course = _seed_course(client)
    s1 = _seed_student(client, course["id"], 1)
    s2 = _seed_student(client, course["id"], 2)
    client.post("/api/auth/logout")

    login("teacher")
    session = client.post(
        "/api/sessions",
        json={"date": "2025-03-10T08:30:00", "type": "course", "moduleElementId": 1, "teacherId": 2},
    )
    assert session.status_code == 201
    session_id = session.get_json()["id"]

    resp = client.post(
        "/api/absences/batch",
        json=[
            {"sessionId": session_id, "studentId": s1["id"], "status": "absent"},
            {"sessionId": session_id, "studentId": s1["id"], "status": "absent"},
            {"sessionId": session_id, "studentId": s2["id"], "status": "present"},
        ],
    )
    assert resp.status_code == 201
    assert [a["studentId"] for a in resp.get_json()] == [s1["id"], s1["id"], s2["id"]]

    bad = client.post("/api/absences/batch", json=[{"sessionId": session_id, "studentId": s1["id"], "status": "gone"}])
    assert bad.status_code == 400
    assert bad.get_json()["errors"][0]["index"] == 0

    stats = client.get("/api/statistics").get_json()
    assert stats["studentsCount"] == 2
    assert stats["absencesCount"] == 3

    top = client.get("/api/statistics/top-absentees?limit=5").get_json()
    assert top == [{"studentId": s1["id"], "studentName": "First1 Last1", "absenceCount": 2}]

    recent = client.get("/api/statistics/recent-activities").get_json()
    assert recent[0]["teacherName"] == "Teacher"
    assert recent[0]["absencesCount"] == 2
    assert recent[0]["date"] == "2025-03-10T08:30:00"

    report = client.get(f"/api/statistics/threshold-breaches?courseId={course['id']}").get_json()
    assert [b["studentId"] for b in report["breaches"]] == [s1["id"]]
    assert client.get("/api/statistics/threshold-breaches?courseId=999").status_code == 404

    assert len(client.get(f"/api/absences?sessionId={session_id}").get_json()) == 3
    summary = client.get(f"/api/students/{s1['id']}/absence-summary").get_json()
    assert summary["byStatus"]["absent"] == 2


def test_session_user_payload_uses_id_key(client, login):
    user = login("admin")
    assert user["id"] == 1
    assert "userId" not in user

    body = client.get("/api/auth/session").get_json()
    assert body["user"]["id"] == 1
    assert "userId" not in body["user"]


def test_recent_activities_with_mixed_date_forms(client, login):
    login("teacher")
    for date in ("2025-03-10", "2025-03-11T08:00:00Z"):
        resp = client.post(
            "/api/sessions",
            json={"date": date, "type": "course", "moduleElementId": 1, "teacherId": 2},
        )
        assert resp.status_code == 201, resp.get_json()
    assert resp.get_json()["date"] == "2025-03-11T08:00:00"

    resp = client.get("/api/statistics/recent-activities")

    assert resp.status_code == 200
    assert [row["date"] for row in resp.get_json()] == ["2025-03-11T08:00:00", "2025-03-10T00:00:00"]
