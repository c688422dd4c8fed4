"""Public lead submission and admin lead listing integration tests."""

from __future__ import annotations

from datetime import timedelta

import httpx
import pytest
from sqlmodel import Session, select

from app.core.constants import NOTIFICATION_EMAILS_SETTING_KEY, utcnow
from app.models.lead import Lead
from app.routers.deps import get_mailer, get_verifier
from app.services import setting_service
from app.services.verification_service import RecaptchaVerifier

VALID_LEAD = {
    "fullName": "Ayşe Yılmaz",
    "email": "ayse@example.com",
    "phone": "5551234567",
    "consent": True,
}


def _verifier(app, handler, **kwargs) -> None:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    verifier = RecaptchaVerifier("recaptcha-secret", client=client, **kwargs)
    app.dependency_overrides[get_verifier] = lambda: verifier


def test_submit_lead_persists_and_returns_created_record(api, engine):
    status_code, body = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 201
    assert body["id"]
    assert body["createdAt"]
    assert body["fullName"] == "Ayşe Yılmaz"
    assert body["email"] == "ayse@example.com"
    assert body["phone"] == "5551234567"
    assert body["consent"] is True

    with Session(engine) as session:
        leads = session.exec(select(Lead)).all()
        assert [lead.id for lead in leads] == [body["id"]]


def test_submit_lead_trims_fields(api):
    status_code, body = api(
        "POST",
        "/api/leads",
        json_body={
            "fullName": "  Ayşe Yılmaz ",
            "email": " ayse@example.com ",
            "phone": " 5551234567 ",
            "consent": True,
        },
    )

    assert status_code == 201
    assert body["fullName"] == "Ayşe Yılmaz"
    assert body["email"] == "ayse@example.com"
    assert body["phone"] == "5551234567"


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"consent": False}, "Devam etmek için onayı kabul etmelisiniz."),
        ({"consent": "true"}, "Devam etmek için onayı kabul etmelisiniz."),
        ({"fullName": " A "}, "Ad Soyad en az 2 karakter olmalıdır."),
        ({"email": "ayse@"}, "Geçerli bir e-posta adresi giriniz."),
        ({"phone": "555 123"}, "Geçerli bir telefon numarası giriniz."),
    ],
)
def test_submit_lead_rejects_invalid_fields(api, engine, overrides, message):
    status_code, body = api("POST", "/api/leads", json_body={**VALID_LEAD, **overrides})

    assert status_code == 400
    assert body == {"error": message}

    with Session(engine) as session:
        assert session.exec(select(Lead)).all() == []


def test_submit_lead_reports_first_failing_field(api):
    status_code, body = api("POST", "/api/leads", json_body={"email": "bad", "consent": False})

    assert status_code == 400
    assert body == {"error": "Ad Soyad en az 2 karakter olmalıdır."}


def test_submit_lead_notifies_configured_recipients(api, session, mailer):
    setting_service.set_setting(
        session,
        NOTIFICATION_EMAILS_SETTING_KEY,
        " sales@example.com, , not-an-address ,owner@example.com",
    )

    status_code, _ = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 201
    assert len(mailer.sent) == 1
    assert mailer.sent[0]["to"] == ["sales@example.com", "owner@example.com"]
    assert mailer.sent[0]["subject"] == "Yeni Form Başvurusu: Ayşe Yılmaz"
    assert "ayse@example.com" in mailer.sent[0]["html"]


def test_submit_lead_skips_notification_without_recipients(api, mailer):
    status_code, _ = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 201
    assert mailer.sent == []


def test_submit_lead_succeeds_when_notification_fails(api, app, engine, session, mailer):
    setting_service.set_setting(session, NOTIFICATION_EMAILS_SETTING_KEY, "sales@example.com")
    mailer.error = RuntimeError("mail provider down")

    status_code, body = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 201
    with Session(engine) as check_session:
        assert check_session.get(Lead, body["id"]) is not None


def test_submit_lead_succeeds_without_mail_provider(api, app):
    app.dependency_overrides[get_mailer] = lambda: None

    status_code, _ = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 201


def test_submit_lead_requires_verification_token_when_enabled(api, app):
    _verifier(app, lambda request: httpx.Response(200, json={"success": True}))

    status_code, body = api("POST", "/api/leads", json_body=VALID_LEAD)

    assert status_code == 400
    assert body == {"error": "Güvenlik doğrulaması gerekli."}


def test_submit_lead_accepts_verified_token(api, app):
    seen_forms: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_forms.append(request.content)
        return httpx.Response(200, json={"success": True, "score": 0.9})

    _verifier(app, handler)

    status_code, _ = api(
        "POST",
        "/api/leads",
        json_body={**VALID_LEAD, "verificationToken": "client-token"},
    )

    assert status_code == 201
    assert len(seen_forms) == 1
    assert b"response=client-token" in seen_forms[0]
    assert b"secret=recaptcha-secret" in seen_forms[0]


@pytest.mark.parametrize(
    "verification_response",
    [
        {"success": False, "error-codes": ["invalid-input-response"]},
        {"success": True, "score": 0.3},
    ],
)
def test_submit_lead_rejects_failed_verification(api, app, engine, verification_response):
    _verifier(app, lambda request: httpx.Response(200, json=verification_response))

    status_code, body = api(
        "POST",
        "/api/leads",
        json_body={**VALID_LEAD, "recaptchaToken": "client-token"},
    )

    assert status_code == 400
    assert body == {"error": "Güvenlik doğrulaması başarısız. Lütfen tekrar deneyin."}
    with Session(engine) as session:
        assert session.exec(select(Lead)).all() == []


def test_submit_lead_fails_open_when_verification_service_errors(api, app):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    _verifier(app, handler)

    status_code, _ = api(
        "POST",
        "/api/leads",
        json_body={**VALID_LEAD, "verificationToken": "client-token"},
    )

    assert status_code == 201


def test_submit_lead_fails_closed_when_configured(api, app):
    _verifier(app, lambda request: httpx.Response(200, text="<html>"), fail_open=False)

    status_code, body = api(
        "POST",
        "/api/leads",
        json_body={**VALID_LEAD, "verificationToken": "client-token"},
    )

    assert status_code == 400
    assert body == {"error": "Güvenlik doğrulaması başarısız. Lütfen tekrar deneyin."}


def test_list_leads_requires_auth(api):
    status_code, body = api("GET", "/api/leads")

    assert status_code == 401
    assert body == {"error": "Unauthorized"}


def test_list_leads_returns_newest_first(api, session, admin_token):
    now = utcnow()
    for days_ago, name in [(2, "First One"), (0, "Third One"), (1, "Second One")]:
        session.add(
            Lead(
                full_name=name,
                email="lead@example.com",
                phone="5551234567",
                consent=True,
                created_at=now - timedelta(days=days_ago),
            )
        )
    session.commit()

    status_code, body = api("GET", "/api/leads", token=admin_token)

    assert status_code == 200
    assert [lead["fullName"] for lead in body] == ["Third One", "Second One", "First One"]
    assert set(body[0]) == {"id", "fullName", "email", "phone", "consent", "createdAt"}


def test_list_leads_includes_submissions(api, admin_token):
    api("POST", "/api/leads", json_body=VALID_LEAD)
    api(
        "POST",
        "/api/leads",
        json_body={**VALID_LEAD, "fullName": "Mehmet Demir", "email": "mehmet@example.com"},
    )

    status_code, body = api("GET", "/api/leads", token=admin_token)

    assert status_code == 200
    assert {lead["fullName"] for lead in body} == {"Ayşe Yılmaz", "Mehmet Demir"}


def test_submit_lead_rejects_non_string_field_in_turkish(api, engine):
    status_code, body = api("POST", "/api/leads", json_body={**VALID_LEAD, "fullName": 12})

    assert status_code == 400
    assert body == {"error": "Geçersiz istek"}
    with Session(engine) as session:
        assert session.exec(select(Lead)).all() == []
