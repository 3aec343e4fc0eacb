from course_management.models.enrolment import Enrolment
from tests.conftest import TestingSessionLocal


def _enrolment_rows(course_id: int, student_id: int) -> list[Enrolment]:
    db = TestingSessionLocal()
    try:
        return (
            db.query(Enrolment)
            .filter(Enrolment.course_id == course_id, Enrolment.student_id == student_id)
            .all()
        )
    finally:
        db.close()


def enrol(client, student_id: int, course_id: int):
    return client.post("/enrolments", json={"student_id": student_id, "course_id": course_id})


def mark(client, actor_id: int, course_id: int, student_id: int, value):
    return client.patch(
        "/enrolments/mark",
        json={
            "actor_id": actor_id,
            "course_id": course_id,
            "student_id": student_id,
            "mark": value,
        },
    )


def test_student_can_enrol_once(client, seed_data):
    r1 = enrol(client, seed_data.student1, seed_data.open_course)
    assert r1.status_code == 201, r1.text
    body = r1.json()
    assert body["success"] == "Student enrolled in course"
    assert body["enrolment"]["mark"] is None

    r2 = enrol(client, seed_data.student1, seed_data.open_course)
    assert r2.status_code == 409
    assert r2.json()["detail"]["message"] == "Student is already enrolled in this course"

    assert len(_enrolment_rows(seed_data.open_course, seed_data.student1)) == 1


def test_two_students_can_enrol_in_same_course(client, seed_data):
    assert enrol(client, seed_data.student1, seed_data.open_course).status_code == 201
    assert enrol(client, seed_data.student2, seed_data.open_course).status_code == 201


def test_enrol_in_unavailable_course_is_forbidden(client, seed_data):
    r = enrol(client, seed_data.student1, seed_data.closed_course)
    assert r.status_code == 403
    assert _enrolment_rows(seed_data.closed_course, seed_data.student1) == []


def test_enrol_in_missing_course_is_404(client, seed_data):
    r = enrol(client, seed_data.student1, 9999)
    assert r.status_code == 404


def test_only_students_can_enrol(client, seed_data):
    r = enrol(client, seed_data.teacher1, seed_data.open_course)
    assert r.status_code == 403


def test_unknown_student_is_404(client, seed_data):
    r = enrol(client, 9999, seed_data.open_course)
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "Actor not found"


def test_enrol_requires_both_ids(client, seed_data):
    r = client.post("/enrolments", json={"student_id": seed_data.student1})
    assert r.status_code == 400
    assert r.json()["detail"]["kind"] == "bad_input"


def test_assigned_teacher_sets_mark(client, seed_data):
    enrol(client, seed_data.student1, seed_data.open_course)

    r = mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student1, "pass")
    assert r.status_code == 200, r.text
    assert r.json()["enrolment"]["mark"] == "pass"
    assert r.json()["enrolment"]["marked_at"] is not None

    r = mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student1, "fail")
    assert r.status_code == 200
    assert r.json()["enrolment"]["mark"] == "fail"


def test_unassigned_teacher_cannot_mark(client, seed_data):
    enrol(client, seed_data.student1, seed_data.open_course)

    r = mark(client, seed_data.teacher2, seed_data.open_course, seed_data.student1, "pass")
    assert r.status_code == 403
    assert _enrolment_rows(seed_data.open_course, seed_data.student1)[0].mark is None


def test_non_teacher_cannot_mark(client, seed_data):
    enrol(client, seed_data.student1, seed_data.open_course)

    for actor in (seed_data.admin, seed_data.student1):
        r = mark(client, actor, seed_data.open_course, seed_data.student1, "pass")
        assert r.status_code == 403


def test_mark_without_enrolment_is_404(client, seed_data):
    r = mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student2, "pass")
    assert r.status_code == 404
    assert r.json()["detail"]["message"] == "Enrolment not found"


def test_mark_must_be_pass_or_fail(client, seed_data):
    enrol(client, seed_data.student1, seed_data.open_course)

    for value in ("A+", None, ""):
        r = mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student1, value)
        assert r.status_code == 400, value


def test_reassigning_teacher_keeps_recorded_mark(client, seed_data):
    enrol(client, seed_data.student1, seed_data.open_course)
    mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student1, "pass")

    r = client.patch(
        f"/courses/{seed_data.open_course}/teacher",
        json={"actor_id": seed_data.admin, "teacher_id": seed_data.teacher2},
    )
    assert r.status_code == 200

    assert _enrolment_rows(seed_data.open_course, seed_data.student1)[0].mark.value == "pass"

    # the previous teacher no longer owns the course
    r = mark(client, seed_data.teacher1, seed_data.open_course, seed_data.student1, "fail")
    assert r.status_code == 403
