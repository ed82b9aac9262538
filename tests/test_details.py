# tests/test_details.py
import base64
import io
import json

from werkzeug.http import parse_options_header

from models.user_details import UserDetails

PDF = b"%PDF-1.4 fake resume"


def submit(client, name="Bob", email="bob@example.com", exp="3", cv=PDF):
    data = {
        "data": json.dumps({"name": name, "email": email, "exp": exp}),
        "cv": (io.BytesIO(cv), "resume.pdf"),
    }
    return client.post("/api/add-details", data=data, content_type="multipart/form-data")


def only_id(session):
    return session.query(UserDetails).one().id


def test_add_details_defaults_unapproved(client, session):
    resp = submit(client)

    assert resp.status_code == 201
    assert resp.get_json() == {"message": "User details added successfully"}
    details = session.query(UserDetails).one()
    assert details.cv == PDF
    assert details.approved is False


def test_add_details_numeric_exp(client, session):
    assert submit(client, exp=5).status_code == 201
    assert session.query(UserDetails).one().exp == "5"


def test_add_details_allows_duplicates(client, session):
    submit(client)
    submit(client)
    assert session.query(UserDetails).count() == 2


def test_add_details_missing_file_is_server_error(client, session):
    resp = client.post(
        "/api/add-details",
        data={"data": json.dumps({"name": "Bob", "email": "bob@example.com"})},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal Server Error"}
    assert session.query(UserDetails).count() == 0


def test_add_details_bad_json_is_server_error(client):
    resp = client.post(
        "/api/add-details",
        data={"data": "{oops", "cv": (io.BytesIO(PDF), "resume.pdf")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 500


def test_approval_flow(client, session):
    submit(client)
    user_id = only_id(session)

    assert client.get("/api/approval-status/Bob").get_json() == {"approved": False}
    assert client.get(f"/api/check-approval/{user_id}").get_json() == {"approved": False}

    resp = client.put(f"/api/approve-user/{user_id}")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "User approved successfully"}

    assert client.get("/api/approval-status/Bob").get_json() == {"approved": True}
    assert client.get(f"/api/check-approval/{user_id}").get_json() == {"approved": True}


def test_approve_twice_is_idempotent(client, session):
    submit(client)
    user_id = only_id(session)

    assert client.put(f"/api/approve-user/{user_id}").status_code == 200
    assert client.put(f"/api/approve-user/{user_id}").status_code == 200
    assert client.get(f"/api/check-approval/{user_id}").get_json() == {"approved": True}


def test_approve_unknown_id_succeeds_without_creating(client, session):
    resp = client.put("/api/approve-user/999")

    assert resp.status_code == 200
    assert session.query(UserDetails).count() == 0


def test_approval_status_unknown_defaults_false(client):
    assert client.get("/api/approval-status/ghost").get_json() == {"approved": False}
    assert client.get("/api/check-approval/12345").get_json() == {"approved": False}


def test_user_details_listing(client, session):
    submit(client)
    submit(client, name="Carol", email="carol@example.com", exp="senior", cv=b"%PDF carol")

    resp = client.get("/api/user-details")

    assert resp.status_code == 200
    rows = resp.get_json()
    assert [r["name"] for r in rows] == ["Bob", "Carol"]
    assert set(rows[0]) == {"id", "name", "email", "exp", "cv"}
    assert base64.b64decode(rows[1]["cv"]) == b"%PDF carol"
    assert rows[1]["exp"] == "senior"


def test_download_cv(client, session):
    submit(client)
    user_id = only_id(session)

    resp = client.get(f"/api/download-cv/{user_id}")

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert parse_options_header(resp.headers["Content-Disposition"]) == (
        "attachment", {"filename": "Bob_CV.pdf"}
    )
    assert resp.data == PDF


def test_download_cv_missing_record(client):
    resp = client.get("/api/download-cv/424242")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal Server Error"}


def test_download_cv_non_ascii_name(client, session):
    submit(client, name="Łukasz", email="lukasz@example.com")
    user_id = only_id(session)

    resp = client.get(f"/api/download-cv/{user_id}")

    assert resp.status_code == 200
    header = resp.headers["Content-Disposition"]
    # must survive latin-1 encoding by the WSGI server
    header.encode("latin-1")
    assert "filename*=UTF-8''%C5%81ukasz_CV.pdf" in header
    assert resp.data == PDF


def test_download_cv_name_with_quote(client, session):
    submit(client, name='Bob "The Builder"')
    user_id = only_id(session)

    resp = client.get(f"/api/download-cv/{user_id}")

    assert resp.status_code == 200
    _, params = parse_options_header(resp.headers["Content-Disposition"])
    assert params["filename"] == 'Bob "The Builder"_CV.pdf'


def test_malformed_ids_are_server_errors(client):
    for resp in (
        client.get("/api/check-approval/not-an-id"),
        client.put("/api/approve-user/not-an-id"),
        client.get("/api/download-cv/not-an-id"),
    ):
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Internal Server Error"}
