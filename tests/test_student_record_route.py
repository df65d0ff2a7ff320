BASE = "/api/v1/students"

AMINA = {
    "student_name": "Amina Ali",
    "student_id": "S1",
    "course_name": "Math",
    "fee": "200",
    "paid": "50",
}


def register(client, **overrides):
    payload = dict(AMINA)
    payload.update(overrides)
    return client.post(BASE, json=payload)


def test_create_student(client, store):
    response = register(client)
    assert response.status_code == 201

    body = response.json()
    assert body["message"] == "Student added successfully."
    assert body["data"]["remaining"] == 150
    assert body["data"]["payment_status"] == "Installment"
    assert body["data"]["id"].startswith("S-")
    assert len(store) == 1


def test_create_accepts_numeric_json(client):
    response = register(client, fee=100, paid=100)
    assert response.status_code == 201
    assert response.json()["data"]["payment_status"] == "Full Payment"


def test_duplicate_id_rejected(client, store):
    register(client)
    response = register(client, student_id="s1", student_name="Someone Else")

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "reason": "duplicate_id",
        "msg": "Student ID already exists. Use a unique ID.",
    }
    assert len(store) == 1


def test_invalid_form_rejected(client, store):
    response = register(client, paid="500")
    assert response.status_code == 400
    assert response.json()["detail"]["reason"] == "paid_exceeds_fee"
    assert len(store) == 0


def test_validate_is_dry_run(client, store):
    response = client.post(f"{BASE}/validate", json=AMINA)
    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.json()["data"]["student_id"] == "S1"
    assert len(store) == 0

    bad = client.post(f"{BASE}/validate", json={**AMINA, "student_name": ""})
    assert bad.json()["ok"] is False
    assert bad.json()["reason"] == "missing_fields"
    assert bad.json()["data"] is None


def test_name_check(client):
    response = client.post(f"{BASE}/name-check", json={"value": "Amina9"})
    assert response.json() == {
        "value": "Amina",
        "had_digits": True,
        "msg": "Digits are not allowed in Name!",
    }


def test_list_and_search(client):
    register(client)
    register(client, student_name="Omar Farah", student_id="S2", course_name="Physics", fee="0", paid="0")

    everything = client.get(BASE).json()
    assert [row["student_id"] for row in everything["rows"]] == ["S1", "S2"]
    assert [row["index"] for row in everything["rows"]] == [1, 2]
    assert everything["empty"] is False

    found = client.get(BASE, params={"q": "PHYS"}).json()
    assert [row["student_id"] for row in found["rows"]] == ["S2"]
    assert found["rows"][0]["badge"] == "Scholarship"
    assert found["rows"][0]["fee"] == "$0.00"

    none = client.get(BASE, params={"q": "nobody"}).json()
    assert none == {"rows": [], "empty": True}


def test_summary(client):
    register(client)
    register(client, student_name="Omar Farah", student_id="S2", fee="100", paid="100")

    summary = client.get(f"{BASE}/summary").json()
    assert summary["total_students"] == 2
    assert summary["total_fee"] == 300
    assert summary["total_paid"] == 150
    assert summary["total_remaining"] == 150
    assert summary["total_fee_display"] == "$300.00"


def test_delete(client, store):
    record_id = register(client).json()["data"]["id"]

    response = client.delete(f"{BASE}/{record_id}")
    assert response.status_code == 200
    assert response.json()["deleted"] is True
    assert len(store) == 0

    again = client.delete(f"{BASE}/{record_id}")
    assert again.status_code == 200
    assert again.json()["deleted"] is False


def test_reset_all(client, store):
    register(client)
    register(client, student_id="S2")
    register(client, student_id="S3")

    response = client.delete(BASE)
    assert response.json() == {"message": "All records cleared.", "status": "success", "cleared": 3}

    summary = client.get(f"{BASE}/summary").json()
    assert summary["total_students"] == 0
    assert summary["total_fee"] == 0
    assert summary["total_paid"] == 0
    assert summary["total_remaining"] == 0


def test_blank_fee_registers_as_scholarship(client):
    response = register(client, fee="", paid="")
    assert response.status_code == 201
    assert response.json()["data"]["fee"] == 0
    assert response.json()["data"]["payment_status"] == "Scholarship"


def test_non_ascii_digits_rejected(client, store):
    response = register(client, fee="1_000")
    assert response.json()["detail"]["reason"] == "invalid_fee"

    response = register(client, fee="٢٠٠", paid="٥٠")
    assert response.status_code == 400
    assert response.json()["detail"]["reason"] == "invalid_fee"
    assert len(store) == 0
