from sqlalchemy.exc import SQLAlchemyError

from portal.models import Berkas
from tests.conftest import upload

MIB = 1024 * 1024


def test_upload_berkas_returns_201_and_reachable_path(client, public_dir):
    res = upload(client, "/api/berkas", title="Kalender Akademik")
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "File berhasil diupload"
    data = body["data"]
    assert data["title"] == "Kalender Akademik"
    assert data["filepath"].startswith("/berkas/")
    assert data["filepath"].endswith("-doc.pdf")

    stored = public_dir / data["filepath"].lstrip("/")
    assert stored.is_file()

    served = client.get(data["filepath"])
    assert served.status_code == 200
    assert served.content == b"%PDF-1.4 test"
    assert served.headers["content-type"] == "application/pdf"


def test_upload_without_title_defaults_to_untitled(client):
    res = upload(client, "/api/berkas")
    assert res.status_code == 201
    assert res.json()["data"]["title"] == "untitled"


def test_upload_without_file_part_is_400(client, db_session):
    res = client.post("/api/berkas", data={"title": "kosong"})
    assert res.status_code == 400
    assert res.json() == {"error": "File tidak ditemukan", "message": "Tidak ada file yang diupload"}
    assert db_session.query(Berkas).count() == 0


def test_upload_at_ceiling_is_accepted(client):
    res = upload(client, "/api/berkas", content=b"a" * MIB)
    assert res.status_code == 201


def test_upload_over_ceiling_fails_without_leaving_a_file(client, public_dir, db_session):
    res = upload(client, "/api/berkas", content=b"a" * (MIB + 1))
    assert res.status_code == 413
    assert res.json()["error"] == "File terlalu besar"
    assert list((public_dir / "berkas").glob("*")) == []
    assert db_session.query(Berkas).count() == 0


def test_database_failure_removes_stored_file(client, public_dir, db_session, monkeypatch):
    def boom():
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(db_session, "commit", boom)
    res = upload(client, "/api/berkas", title="gagal")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Error saving file"
    assert "details" not in body
    assert list((public_dir / "berkas").iterdir()) == []


def test_database_failure_includes_traceback_in_development(client, db_session, monkeypatch):
    from portal.config import get_settings

    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()

    def boom():
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(db_session, "commit", boom)
    res = upload(client, "/api/berkas")
    assert res.status_code == 500
    assert "database is locked" in res.json()["details"]


def test_list_and_search_berkas(client):
    upload(client, "/api/berkas", title="Panduan Skripsi")
    upload(client, "/api/berkas", title="Jadwal Ujian")
    upload(client, "/api/berkas", title="Template skripsi")

    res = client.get("/api/berkas")
    assert res.status_code == 200
    assert len(res.json()) == 3

    found = client.get("/api/berkas", params={"name": "SKRIPSI"}).json()
    assert sorted(x["title"] for x in found) == ["Panduan Skripsi", "Template skripsi"]


def test_get_berkas_detail_and_404(client):
    created = upload(client, "/api/berkas", title="SK Dekan").json()["data"]
    res = client.get(f"/api/berkas/{created['id']}")
    assert res.status_code == 200
    assert res.json()["filepath"] == created["filepath"]

    missing = client.get("/api/berkas/does-not-exist")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Berkas tidak ditemukan"


def test_page_berkas(client):
    for i in range(12):
        upload(client, "/api/berkas", title=f"Berkas {i:02d}")

    res = client.get("/api/berkas/page", params={"page": 3, "per_page": 5})
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 12
    assert body["total_pages"] == 3
    assert body["page"] == 3
    assert body["start_index"] == 10
    assert len(body["items"]) == 2
    assert body["pages"] == [1, 2, 3]

    clamped = client.get("/api/berkas/page", params={"page": 99, "per_page": 5}).json()
    assert clamped["page"] == 3


def test_preview_dispatch(client):
    pdf = upload(client, "/api/berkas", title="Surat").json()["data"]
    res = client.get(f"/api/berkas/{pdf['id']}/preview")
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "pdf"
    assert body["src"] == pdf["filepath"]
    assert body["mime_type"] == "application/pdf"
    assert body["download_url"] == pdf["filepath"]

    pptx = upload(
        client,
        "/api/berkas",
        filename="slides.pptx",
        content=b"PK",
        content_type="application/octet-stream",
    ).json()["data"]
    body = client.get(f"/api/berkas/{pptx['id']}/preview").json()
    assert body["kind"] == "office"
    assert body["src"].startswith("https://view.officeapps.live.com/op/embed.aspx?src=")
    assert "http%3A%2F%2Ftestserver%2Fberkas%2F" in body["src"]

    zipped = upload(client, "/api/berkas", filename="arsip.zip", content=b"PK").json()["data"]
    body = client.get(f"/api/berkas/{zipped['id']}/preview").json()
    assert body["kind"] == "none"
    assert body["src"] is None
    assert body["extension"] == "zip"


def test_berkas_has_no_delete_endpoint(client):
    res = client.delete("/api/berkas")
    assert res.status_code == 405
    assert res.json() == {"error": "Method not allowed", "message": "Method DELETE tidak diizinkan"}


def test_file_sent_as_text_field_is_400(client, db_session):
    res = client.post("/api/berkas", data={"file": "bukan-file", "title": "x"})
    assert res.status_code == 400
    assert res.json() == {"error": "File tidak ditemukan", "message": "Tidak ada file yang diupload"}
    assert db_session.query(Berkas).count() == 0


def test_invalid_page_size_is_400(client):
    res = client.get("/api/berkas/page", params={"per_page": 0})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Permintaan tidak valid"
    assert body["message"].startswith("per_page:")


def test_refresh_failure_after_commit_keeps_file_and_row(public_dir, db_session, monkeypatch):
    from fastapi.testclient import TestClient
    from portal.database import get_db
    from portal.main import app

    def override_get_db():
        yield db_session

    def boom(item):
        raise SQLAlchemyError("connection lost")

    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setattr(db_session, "refresh", boom)
    try:
        res = upload(TestClient(app, raise_server_exceptions=False), "/api/berkas", title="tetap")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert db_session.query(Berkas).count() == 1
    stored = db_session.query(Berkas).one()
    assert (public_dir / stored.filepath.lstrip("/")).is_file()
