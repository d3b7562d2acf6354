"""BDD tests for production progress notifications."""

from ordering.order.progress import SendProgressNotification
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/progress_notification.feature")


@when(parsers.cfparse('progress {progress:d} is sent for key "{product_key}"'))
def send_progress(order, progress, product_key, error):
    try:
        current_domain.process(
            SendProgressNotification(
                order_id=order.id,
                email=order.email,
                product_key=product_key,
                progress=progress,
            ),
            asynchronous=False,
        )
    except ObjectNotFoundError as exc:
        error["exc"] = exc


@then("an email is sent to the customer")
def email_sent(email_channel, order):
    assert len(email_channel.sent_emails) == 1
    assert email_channel.last_email["to"] == order.email


@then("no email is sent")
def no_email(email_channel, error):
    assert email_channel.sent_emails == []
    assert isinstance(error["exc"], ObjectNotFoundError)


@then("the subject announces the article is ready")
def subject_ready(email_channel):
    assert email_channel.last_email["subject"].endswith("Votre création est prête !")


@then(parsers.cfparse("the subject mentions {progress:d}%"))
def subject_mentions_progress(email_channel, progress):
    assert f"({progress}%)" in email_channel.last_email["subject"]


@then("both languages use the completion wording")
def completion_wording(email_channel):
    body = email_channel.last_email["body"]
    assert "Bonne nouvelle !" in body
    assert "خبر سار!" in body
