from celery import Celery

from api_service.config import Settings

celery_app = Celery('api_service')


def configure_celery(settings: Settings) -> Celery:
    celery_app.conf.broker_url = settings.CELERY_BROKER_URL
    return celery_app
