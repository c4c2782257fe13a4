"""
Celery tasks for webhook events.
"""
from celery import shared_task

from .handler import handle


@shared_task(bind=True, name='process_webhook_event')
def process_webhook_event(self, event):
    """
    Consume one payment event from the queue.
    Not retried: a failure is left to the worker's own error handling.
    """
    handle(event, self.request)
