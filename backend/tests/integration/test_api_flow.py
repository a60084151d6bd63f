"""End-to-end API tests against a throwaway SQLite database.

The app's session and document-service dependencies are overridden so that
each test gets its own database file and upload directory.
"""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.application.services import AuthService, DocumentService
from mozuk.infrastructure.database import Base
from mozuk.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyDocumentRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyUserRepository,
)
from mozuk.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    get_db_session,
)
from mozuk.infrastructure.dependencies import get_document_service, get_token_service
from mozuk.infrastructure.storage.local_file_storage import LocalFileStorage
from mozuk.main import app

ADMIN_EMAIL = "admin@mozuk.net"
ADMIN_PASSWORD = "admin123"


@pytest_asyncio.fixture
async def api(tmp_path) -> AsyncGenerator[AsyncClient, None]:
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        auth = AuthService(SQLAlchemyUserRepository(session), get_token_service(), bcrypt_rounds=4)
        await auth.ensure_user(ADMIN_EMAIL, ADMIN_PASSWORD, name="Admin")
        await session.commit()

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def _document_service(
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[DocumentService, None]:
        yield DocumentService(
            SQLAlchemyDocumentRepository(session),
            SQLAlchemyProjectRepository(session),
            SQLAlchemyClientRepository(session),
            LocalFileStorage(upload_dir=str(tmp_path / "uploads")),
            max_upload_bytes=1024,
        )

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_document_service] = _document_service
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        await engine.dispose()


@pytest_asyncio.fixture
async def auth_headers(api: AsyncClient) -> dict[str, str]:
    response = await api.post(
        "/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


async def _create_client(api: AsyncClient, headers, custom_id: str = "1000") -> dict:
    response = await api.post(
        "/api/v1/clients",
        json={"name": f"Client {custom_id}", "custom_id": custom_id},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def _create_project(api: AsyncClient, headers, client_id: str) -> dict:
    suggestion = await api.get(
        "/api/v1/projects/next-id", params={"client_id": client_id}, headers=headers
    )
    assert suggestion.status_code == 200
    response = await api.post(
        "/api/v1/projects",
        json={
            "client_id": client_id,
            "name": "Hull survey",
            "display_id": suggestion.json()["display_id"],
            "project_date": "2024-03-15",
            "project_tag": "MOZUK_MARINE",
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


# ── Auth ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(api: AsyncClient):
    response = await api.post(
        "/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_returns_signed_in_user(api: AsyncClient, auth_headers):
    response = await api.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == ADMIN_EMAIL


@pytest.mark.asyncio
async def test_invalid_token_rejected(api: AsyncClient):
    response = await api.get("/api/v1/clients", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 401


# ── Identifiers ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_project_ids_are_sequential_per_client(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)

    first = await _create_project(api, auth_headers, client["id"])
    second = await _create_project(api, auth_headers, client["id"])

    assert first["display_id"] == "1000-001"
    assert second["display_id"] == "1000-002"
    assert first["project_tag"] == "MOZUK_MARINE"
    assert first["project_date"] == "2024-03-15"


@pytest.mark.asyncio
async def test_edited_suffix_is_composed_as_given(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)

    response = await api.get(
        "/api/v1/projects/next-id",
        params={"client_id": client["id"], "suffix": ""},
        headers=auth_headers,
    )

    assert response.json() == {"suffix": "", "display_id": "1000-"}


@pytest.mark.asyncio
async def test_duplicate_display_id_returns_409(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    payload = {"client_id": client["id"], "name": "A", "display_id": "1000-001"}

    assert (await api.post("/api/v1/projects", json=payload, headers=auth_headers)).status_code == 201
    response = await api.post("/api/v1/projects", json=payload, headers=auth_headers)

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_duplicate_client_code_returns_409(api: AsyncClient, auth_headers):
    await _create_client(api, auth_headers, "1000")
    response = await api.post(
        "/api/v1/clients", json={"name": "Again", "custom_id": "1000"}, headers=auth_headers
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_document_id_includes_project_code(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.get(
        "/api/v1/documents/next-id", params={"project_id": project["id"]}, headers=auth_headers
    )

    assert response.json()["display_id"] == "1000-001-01"


@pytest.mark.asyncio
async def test_next_id_for_unknown_client_returns_404(api: AsyncClient, auth_headers):
    response = await api.get(
        "/api/v1/projects/next-id", params={"client_id": "missing"}, headers=auth_headers
    )
    assert response.status_code == 404


# ── Ledger ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_ledger_totals_across_endpoints(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])
    documents = [
        {"document_type": "INVOICE", "name": "Inv 1", "amount": "100", "paid": True},
        {"document_type": "INVOICE", "name": "Inv 2", "amount": "50", "paid": False},
        {"document_type": "REPORT", "name": "Report", "amount": "999", "paid": True},
    ]
    for payload in documents:
        response = await api.post(
            "/api/v1/documents",
            json={"project_id": project["id"], **payload},
            headers=auth_headers,
        )
        assert response.status_code == 201

    stats = (await api.get("/api/v1/dashboard/stats", headers=auth_headers)).json()
    assert (stats["clients"], stats["projects"], stats["documents"]) == (1, 1, 3)
    ledger = stats["ledger"]
    assert Decimal(ledger["total_invoiced"]) == Decimal("150")
    assert Decimal(ledger["total_collected"]) == Decimal("100")
    assert Decimal(ledger["outstanding"]) == Decimal("50")
    assert ledger["outstanding_display"] == "$50.00"

    project_ledger = (
        await api.get(f"/api/v1/projects/{project['id']}/ledger", headers=auth_headers)
    ).json()
    assert project_ledger["invoice_count"] == 2
    assert project_ledger["collected_count"] == 1

    financials = (
        await api.get(f"/api/v1/clients/{client['id']}/financials", headers=auth_headers)
    ).json()
    assert len(financials["projects"]) == 1
    assert financials["projects"][0]["display_id"] == "1000-001"
    assert Decimal(financials["total"]["total_invoiced"]) == Decimal("150")


@pytest.mark.asyncio
async def test_report_document_stores_no_amount(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.post(
        "/api/v1/documents",
        json={
            "project_id": project["id"],
            "name": "Report",
            "document_type": "REPORT",
            "amount": "999",
            "paid": True,
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["amount"] is None
    assert response.json()["paid"] is None


# ── Uploads and cascades ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_upload_and_download(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.post(
        "/api/v1/documents/upload",
        data={"project_id": project["id"], "document_type": "REPORT", "display_id": "1000-001-01"},
        files={"file": ("survey.txt", b"survey contents", "text/plain")},
        headers=auth_headers,
    )
    assert response.status_code == 201
    document = response.json()
    assert document["has_file"] is True
    assert document["name"] == "survey.txt"

    download = await api.get(f"/api/v1/documents/{document['id']}/download", headers=auth_headers)
    assert download.status_code == 200
    assert download.content == b"survey contents"


@pytest.mark.asyncio
async def test_uploaded_invoice_counts_in_ledger(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.post(
        "/api/v1/documents/upload",
        data={
            "project_id": project["id"],
            "document_type": "INVOICE",
            "amount": "250.75",
            "paid": "true",
        },
        files={"file": ("invoice.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert Decimal(response.json()["amount"]) == Decimal("250.75")
    assert response.json()["paid"] is True

    ledger = (
        await api.get(f"/api/v1/projects/{project['id']}/ledger", headers=auth_headers)
    ).json()
    assert Decimal(ledger["total_invoiced"]) == Decimal("250.75")
    assert Decimal(ledger["total_collected"]) == Decimal("250.75")


@pytest.mark.asyncio
async def test_uploaded_report_ignores_amount(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.post(
        "/api/v1/documents/upload",
        data={"project_id": project["id"], "document_type": "REPORT", "amount": "99"},
        files={"file": ("report.txt", b"text", "text/plain")},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["amount"] is None


@pytest.mark.asyncio
async def test_delete_document_removes_row_and_file(api: AsyncClient, auth_headers, tmp_path):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])
    uploaded = await api.post(
        "/api/v1/documents/upload",
        data={"project_id": project["id"]},
        files={"file": ("notes.txt", b"notes", "text/plain")},
        headers=auth_headers,
    )
    document_id = uploaded.json()["id"]
    uploads = tmp_path / "uploads" / "documents"
    assert len(list(uploads.iterdir())) == 1

    response = await api.delete(f"/api/v1/documents/{document_id}", headers=auth_headers)

    assert response.status_code == 204
    assert list(uploads.iterdir()) == []
    assert (await api.get(f"/api/v1/documents/{document_id}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_failed_commit_keeps_file_of_deleted_document(
    api: AsyncClient, auth_headers, tmp_path, monkeypatch
):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])
    uploaded = await api.post(
        "/api/v1/documents/upload",
        data={"project_id": project["id"]},
        files={"file": ("notes.txt", b"notes", "text/plain")},
        headers=auth_headers,
    )
    document_id = uploaded.json()["id"]

    async def _failing_commit(self):
        raise RuntimeError("commit failed")

    monkeypatch.setattr(AsyncSession, "commit", _failing_commit)
    with pytest.raises(RuntimeError):
        await api.delete(f"/api/v1/documents/{document_id}", headers=auth_headers)
    monkeypatch.undo()

    assert len(list((tmp_path / "uploads" / "documents").iterdir())) == 1
    download = await api.get(f"/api/v1/documents/{document_id}/download", headers=auth_headers)
    assert download.status_code == 200


@pytest.mark.asyncio
async def test_upload_too_large_returns_413(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])

    response = await api.post(
        "/api/v1/documents/upload",
        data={"project_id": project["id"]},
        files={"file": ("big.bin", b"x" * 4096, "application/octet-stream")},
        headers=auth_headers,
    )

    assert response.status_code == 413


@pytest.mark.asyncio
async def test_deleting_client_removes_projects_and_documents(api: AsyncClient, auth_headers):
    client = await _create_client(api, auth_headers)
    project = await _create_project(api, auth_headers, client["id"])
    created = await api.post(
        "/api/v1/documents",
        json={"project_id": project["id"], "name": "Notes", "document_type": "OTHERS"},
        headers=auth_headers,
    )
    document_id = created.json()["id"]

    response = await api.delete(f"/api/v1/clients/{client['id']}", headers=auth_headers)
    assert response.status_code == 204

    assert (await api.get(f"/api/v1/projects/{project['id']}", headers=auth_headers)).status_code == 404
    assert (await api.get(f"/api/v1/documents/{document_id}", headers=auth_headers)).status_code == 404
