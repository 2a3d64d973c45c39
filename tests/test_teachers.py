from fastapi import status

ADA = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@x.com",
    "subject": "Math",
    "department": "Sci",
}


def test_school_walkthrough(client):
    """Create teacher and student, link them, delete the teacher."""
    teacher = client.post("/teacher", json=ADA)
    assert teacher.status_code == status.HTTP_201_CREATED
    assert teacher.json()["id"] == 1

    student = client.post(
        "/student", json={"firstName": "Bob", "lastName": "Lee", "email": "bob@x.com"}
    )
    assert student.status_code == status.HTTP_201_CREATED
    assert student.json()["id"] == 1

    linked = client.put("/student/1/assign-teacher/1")
    assert linked.status_code == status.HTTP_200_OK
    assert linked.json()["teacherId"] == 1

    deleted = client.delete("/teacher/1")
    assert deleted.status_code == status.HTTP_200_OK
    assert deleted.json() == {"message": "Teacher deleted successfully"}

    after = client.get("/student/1")
    assert after.status_code == status.HTTP_200_OK
    assert after.json()["teacherId"] is None
    assert client.get("/teacher/1").status_code == status.HTTP_404_NOT_FOUND


def test_create_teacher_duplicate_email(client, test_teacher):
    response = client.post("/teacher", json=ADA)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Teacher with email ada@x.com already exists"
    assert len(client.get("/teacher").json()) == 1


def test_create_teacher_invalid(client):
    response = client.post("/teacher", json={**ADA, "lastName": "L" * 51})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "lastName"


def test_get_teacher(client, test_teacher):
    response = client.get(f"/teacher/{test_teacher.id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["firstName"] == "Ada"
    assert data["department"] == "Sci"
    assert "students" not in data


def test_get_teacher_by_email(client, test_teacher):
    assert client.get("/teacher/email/ada@x.com").json()["id"] == test_teacher.id

    missing = client.get("/teacher/email/nobody@x.com")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json()["detail"] == "Teacher not found with email: nobody@x.com"


def test_get_nonexistent_teacher(client):
    response = client.get("/teacher/99999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Teacher not found with id: 99999"


def test_non_numeric_id(client):
    assert client.get("/teacher/abc").status_code == status.HTTP_400_BAD_REQUEST


def test_department_and_subject_filters(client, test_teacher, other_teacher):
    sci = client.get("/teacher/department/Sci").json()
    assert [t["email"] for t in sci] == ["ada@x.com"]
    assert client.get("/teacher/department/Sci/count").json() == 1
    assert client.get("/teacher/department/Arts/count").json() == 0

    lit = client.get("/teacher/subject/Literature").json()
    assert [t["email"] for t in lit] == ["jane@x.com"]


def test_search_teachers(client, test_teacher, other_teacher):
    rows = client.get("/teacher/search", params={"name": "LOVE"}).json()
    assert [t["lastName"] for t in rows] == ["Lovelace"]

    rows = client.get("/teacher/search", params={"name": "a"}).json()
    assert len(rows) == 2

    rows = client.get(
        "/teacher/by-name", params={"firstName": "Jane", "lastName": "Austen"}
    ).json()
    assert [t["email"] for t in rows] == ["jane@x.com"]


def test_teachers_with_students(client, test_teacher, other_teacher, make_student):
    make_student("Ann", "Smith", teacher=test_teacher)
    make_student("Ben", "Stone", teacher=test_teacher)
    make_student("Cid", "Moss")

    rows = {t["email"]: t for t in client.get("/teacher/with-students").json()}
    assert sorted(s["firstName"] for s in rows["ada@x.com"]["students"]) == ["Ann", "Ben"]
    assert rows["jane@x.com"]["students"] == []

    sci = client.get("/teacher/department/Sci/with-students").json()
    assert len(sci) == 1
    assert len(sci[0]["students"]) == 2


def test_update_teacher(client, test_teacher, make_student):
    student = make_student("Ann", "Smith", teacher=test_teacher)

    response = client.put(
        f"/teacher/{test_teacher.id}",
        json={**ADA, "email": "ada.l@x.com", "department": "Math"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "ada.l@x.com"
    assert response.json()["department"] == "Math"
    # the roster is untouched
    assert client.get(f"/student/{student.id}").json()["teacherId"] == test_teacher.id


def test_update_teacher_same_email(client, test_teacher):
    response = client.put(f"/teacher/{test_teacher.id}", json={**ADA, "phoneNumber": "1"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["phoneNumber"] == "1"


def test_update_teacher_email_taken(client, test_teacher, other_teacher):
    response = client.put(
        f"/teacher/{test_teacher.id}", json={**ADA, "email": other_teacher.email}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/teacher/{test_teacher.id}").json()["email"] == "ada@x.com"


def test_update_nonexistent_teacher(client):
    assert client.put("/teacher/99999", json=ADA).status_code == 404


def test_delete_teacher_unlinks_students(client, test_teacher, make_student):
    students = [make_student(n, "Smith", teacher=test_teacher) for n in ("Ann", "Ben", "Cid")]

    response = client.delete(f"/teacher/{test_teacher.id}")

    assert response.status_code == status.HTTP_200_OK
    for st in students:
        body = client.get(f"/student/{st.id}").json()
        assert body["teacherId"] is None
    assert client.get(f"/teacher/{test_teacher.id}/exists").json() is False
    assert len(client.get("/student").json()) == 3


def test_delete_nonexistent_teacher(client):
    response = client.delete("/teacher/99999")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_teacher_exists(client, test_teacher):
    assert client.get(f"/teacher/{test_teacher.id}/exists").json() is True
    assert client.get("/teacher/email/ada@x.com/exists").json() is True
    assert client.get("/teacher/email/nobody@x.com/exists").json() is False


def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


def test_create_teacher_rejects_display_name_email(client):
    response = client.post("/teacher", json={**ADA, "email": "Ada <ada@x.com>"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "email"
    assert client.get("/teacher").json() == []


def test_teacher_email_lookup_matches_submitted_address(client):
    created = client.post("/teacher", json={**ADA, "email": "Ada@X.COM"})
    assert created.status_code == status.HTTP_201_CREATED
    assert created.json()["email"] == "Ada@x.com"

    found = client.get("/teacher/email/Ada@X.COM")
    assert found.status_code == status.HTTP_200_OK
    assert found.json()["id"] == created.json()["id"]
    assert client.get("/teacher/email/Ada@X.COM/exists").json() is True


def test_update_teacher_rejects_display_name_email(client, test_teacher):
    response = client.put(
        f"/teacher/{test_teacher.id}", json={**ADA, "email": "Ada <ada2@x.com>"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get(f"/teacher/{test_teacher.id}").json()["email"] == "ada@x.com"
