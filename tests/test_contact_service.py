"""
ContactService: template loading, rendering and send ordering.
"""
import pytest

from contact_api.core.config import Settings
from contact_api.core.contact_service import ContactService, load_template
from contact_api.core.mailer import EmailDeliveryError
from contact_api.main import create_app
from contact_api.models.contact import ContactSubmission
from tests.conftest import FakeMailer, SENDER


def make_submission(name="Jane Doe"):
    return ContactSubmission(
        name=name,
        email="jane@gmail.com",
        phone="555-0100",
        subject="Hello",
        message="Hi there",
    )


def test_bundled_template_has_single_name_token(settings):
    template = load_template(settings.template_path)

    assert template.count("{(name)}") == 1


def test_only_first_token_is_replaced(settings):
    service = ContactService(settings, FakeMailer(), "<p>{(name)}</p><p>{(name)}</p>")

    assert service.render_confirmation("Jane") == "<p>Jane</p><p>{(name)}</p>"


def test_custom_template_path(tmp_path):
    template = tmp_path / "thanks.html"
    template.write_text("<h1>Thanks, {(name)}!</h1>", encoding="utf-8")
    settings = Settings(_env_file=None, email_user=SENDER, confirmation_template=str(template))

    service = ContactService.from_settings(settings, FakeMailer())

    assert service.build_confirmation(make_submission()).html == "<h1>Thanks, Jane!</h1>"


def test_missing_template_fails_at_startup(tmp_path):
    settings = Settings(_env_file=None, confirmation_template=str(tmp_path / "missing.html"))

    with pytest.raises(FileNotFoundError):
        create_app(settings=settings, mailer=FakeMailer())


def test_first_name():
    assert make_submission("Jane Doe").first_name == "Jane"
    assert make_submission("Madonna").first_name == "Madonna"
    assert make_submission("Mary Ann Smith").first_name == "Mary"


@pytest.mark.anyio
async def test_submit_sends_team_notification_first(settings):
    mailer = FakeMailer()
    service = ContactService(settings, mailer, "Hi {(name)}")

    await service.submit(make_submission())

    assert [email.to for email in mailer.sent] == ["team@wynstrategies.com", "jane@gmail.com"]


@pytest.mark.anyio
async def test_submit_stops_after_first_failure(settings):
    mailer = FakeMailer(fail_on={0})
    service = ContactService(settings, mailer, "Hi {(name)}")

    with pytest.raises(EmailDeliveryError):
        await service.submit(make_submission())

    assert mailer.attempts == 1
