from celery import Celery
from celery.utils.log import get_task_logger
from sqlalchemy import select

from worker_service.config import get_settings
from worker_service.database import SessionLocal
from worker_service.mailer import compose_notification, send_message
from worker_service.models import User

UNKNOWN_CREATOR = "an unknown user"

app = Celery('worker_service', broker=get_settings().CELERY_BROKER_URL)

logger = get_task_logger(__name__)


@app.task(name='tasks.notify_new_question')
def notify_new_question(title, topic, creator_id):
    settings = get_settings()
    session = SessionLocal()
    try:
        recipients = list(session.scalars(select(User.email)).all())
        if not recipients:
            logger.info("No users to notify about question %r", title)
            return

        creator = session.get(User, creator_id) if creator_id else None
        creator_email = creator.email if creator is not None else UNKNOWN_CREATOR

        msg = compose_notification(title, topic, creator_email, recipients, settings.MAIL_FROM)
        send_message(msg, settings)
        logger.info("Notification for %r sent to %d recipients", title, len(recipients))
    except Exception:
        # logged only, never retried
        logger.exception("Error sending notification for question %r", title)
    finally:
        session.close()
