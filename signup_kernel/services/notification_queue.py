"""进程内通知队列

注册请求只负责把任务放入队列，邮件发送在后台线程中完成，
请求的响应时间不包含发信耗时。
"""

import logging
import queue
import threading
from typing import Callable

from flask import Flask
from pydantic import BaseModel

from ..constant import NotificationKind
from ..exceptions import QueueError

logger = logging.getLogger(__name__)

EXTENSION_KEY = "notification_queue"


class NotificationJob(BaseModel):
    user_id: int
    kind: NotificationKind = NotificationKind.WELCOME


class NotificationQueue:
    """FIFO queue drained by a single daemon worker thread.

    Each job runs inside the application context captured by ``init_app``.
    A failing job is logged and dropped; callers of ``enqueue`` never see it.
    """

    def __init__(self, handler: Callable[[NotificationJob], object] | None = None,
                 maxsize: int = 0, autostart: bool = True):
        self._handler = handler
        self._jobs: queue.Queue = queue.Queue(maxsize=maxsize)
        self._autostart = autostart
        self._app: Flask | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._stopped = False

    def init_app(self, app: Flask) -> None:
        self._app = app
        app.extensions[EXTENSION_KEY] = self

    @property
    def pending(self) -> int:
        return self._jobs.qsize()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def enqueue(self, user_id: int, kind: NotificationKind = NotificationKind.WELCOME) -> NotificationJob:
        """Accept a job and return immediately."""
        if self._stopped:
            raise QueueError("Notification queue is stopped")

        job = NotificationJob(user_id=user_id, kind=kind)
        try:
            self._jobs.put_nowait(job)
        except queue.Full as exc:
            raise QueueError("Notification queue is full") from exc

        logger.info("Queued %s notification for user %s", job.kind.value, job.user_id,
                    extra={"event": "notification.enqueued", "user_id": job.user_id,
                           "kind": job.kind.value})
        if self._autostart:
            self.start()
        return job

    def start(self) -> threading.Thread:
        with self._lock:
            self._stopped = False
            if not self.running:
                self._thread = threading.Thread(target=self._worker, name="notification-worker", daemon=True)
                self._thread.start()
            return self._thread

    def stop(self, timeout: float | None = 5.0) -> None:
        """Drain outstanding jobs, then stop the worker."""
        with self._lock:
            self._stopped = True
            thread = self._thread
        if thread is None:
            return
        self._jobs.put(None)
        thread.join(timeout)
        self._thread = None

    def join(self) -> None:
        """Block until every queued job has been processed."""
        self._jobs.join()

    def process_pending(self) -> int:
        """Run queued jobs on the calling thread; returns how many ran."""
        processed = 0
        while True:
            try:
                job = self._jobs.get_nowait()
            except queue.Empty:
                return processed
            try:
                if job is not None:
                    self._run(job)
                    processed += 1
            finally:
                self._jobs.task_done()

    def _worker(self) -> None:
        while True:
            job = self._jobs.get()
            try:
                if job is None:
                    return
                self._run(job)
            finally:
                self._jobs.task_done()

    def _run(self, job: NotificationJob) -> None:
        handler = self._handler
        if handler is None:
            from .notification_tasks import deliver
            handler = deliver
        try:
            if self._app is not None:
                with self._app.app_context():
                    handler(job)
            else:
                handler(job)
        except Exception as e:
            logger.exception("Notification job failed: %s", e,
                             extra={"event": "notification.failed", "user_id": job.user_id,
                                    "kind": job.kind.value})
            return
        logger.info("Delivered %s notification for user %s", job.kind.value, job.user_id,
                    extra={"event": "notification.delivered", "user_id": job.user_id,
                           "kind": job.kind.value})


def get_notification_queue(app: Flask | None = None) -> NotificationQueue:
    if app is None:
        from flask import current_app
        app = current_app
    return app.extensions[EXTENSION_KEY]
