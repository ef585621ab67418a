# api_service/notifier.py

import logging

from celery import Celery
from fastapi import Request

logger = logging.getLogger(__name__)

NOTIFY_NEW_QUESTION_TASK = 'tasks.notify_new_question'


def get_celery_app(request: Request) -> Celery:
    return request.app.state.celery_app


def schedule_new_question(celery, title, topic, creator_id):
    """Hand the new question over to the worker.

    Runs as a background task after the response has gone out; a broker
    failure only ends up in the log.
    """
    try:
        celery.send_task(
            NOTIFY_NEW_QUESTION_TASK,
            kwargs={"title": title, "topic": topic, "creator_id": creator_id},
            retry=False,
        )
    except Exception:
        logger.exception("Could not schedule notification for question %r", title)
        return
    logger.info("Scheduled notification for question %r", title)
