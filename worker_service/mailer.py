import smtplib
from email.message import EmailMessage
from html import escape

from worker_service.config import WorkerSettings

SUBJECT = "New Coding Question Posted!"

TEMPLATE = """\
<h2>A new question has been posted!</h2>
<p>Hello,</p>
<p>A new coding question titled "<strong>{title}</strong>" has been added by {creator}.</p>
<p><strong>Topic:</strong> {topic}</p>
<p>You can check it out now on the platform.</p>
<p>Happy coding!</p>
"""


def compose_notification(title, topic, creator_email, recipients, sender):
    msg = EmailMessage()
    msg["Subject"] = SUBJECT
    msg["From"] = sender
    msg["To"] = ", ".join(recipients)
    msg.set_content(f'A new coding question "{title}" ({topic}) has been added by {creator_email}.')
    msg.add_alternative(
        TEMPLATE.format(
            title=escape(title or ""),
            topic=escape(topic or ""),
            creator=escape(creator_email),
        ),
        subtype="html",
    )
    return msg


def send_message(msg: EmailMessage, settings: WorkerSettings) -> None:
    with smtplib.SMTP(settings.MAIL_HOST, settings.MAIL_PORT) as smtp:
        if settings.MAIL_USE_TLS:
            smtp.starttls()
        if settings.MAIL_USERNAME:
            smtp.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
        smtp.send_message(msg)
