# weaviate_community/backups.py
from __future__ import annotations
import logging
import time
from typing import TYPE_CHECKING, Callable

from . import models as M
from .exceptions import BackupError

if TYPE_CHECKING:
    from .client import WeaviateClient

log = logging.getLogger(__name__)


class Backups:
    """Create and restore backups through a configured backend module.

    ``wait_for_completion`` polls the status endpoint every
    ``ClientConfig.backup_poll_interval_s`` until the backup reports
    ``SUCCESS`` or ``FAILED``. An error status while polling raises at once.
    """

    def __init__(self, core: WeaviateClient, sleep: Callable[[float], None] = time.sleep):
        self.core = core
        self._sleep = sleep

    def create(
        self,
        backend: M.BackupBackend,
        request: M.BackupCreateRequest,
        wait_for_completion: bool = False,
    ) -> M.BackupResponse:
        backend = M.BackupBackend(backend)
        r = self.core._request(
            "POST",
            f"/v1/backups/{backend.value}",
            json=request.to_wire(),
            error=BackupError,
            action="create backup",
        )
        created = M.BackupResponse.model_validate(self.core._json(r, "create backup"))
        if wait_for_completion and not created.status.finished:
            status = self._wait(lambda: self.get_backup_status(backend, created.id))
            created = created.model_copy(update={"status": status.status, "error": status.error})
        return created

    def get_backup_status(self, backend: M.BackupBackend, backup_id: str) -> M.BackupStatusResponse:
        backend = M.BackupBackend(backend)
        r = self.core._request(
            "GET",
            f"/v1/backups/{backend.value}/{backup_id}",
            error=BackupError,
            action="get backup status",
        )
        return M.BackupStatusResponse.model_validate(self.core._json(r, "get backup status"))

    def restore(
        self,
        backend: M.BackupBackend,
        backup_id: str,
        request: M.BackupRestoreRequest | None = None,
        wait_for_completion: bool = False,
    ) -> M.BackupResponse:
        """Restore a backup; classes that already exist on the server make this fail."""
        backend = M.BackupBackend(backend)
        request = request or M.BackupRestoreRequest()
        r = self.core._request(
            "POST",
            f"/v1/backups/{backend.value}/{backup_id}/restore",
            json=request.to_wire(),
            error=BackupError,
            action="restore backup",
        )
        restored = M.BackupResponse.model_validate(self.core._json(r, "restore backup"))
        if wait_for_completion and not restored.status.finished:
            status = self._wait(lambda: self.get_restore_status(backend, backup_id))
            restored = restored.model_copy(update={"status": status.status, "error": status.error})
        return restored

    def get_restore_status(self, backend: M.BackupBackend, backup_id: str) -> M.BackupStatusResponse:
        backend = M.BackupBackend(backend)
        r = self.core._request(
            "GET",
            f"/v1/backups/{backend.value}/{backup_id}/restore",
            error=BackupError,
            action="get restore status",
        )
        return M.BackupStatusResponse.model_validate(self.core._json(r, "get restore status"))

    def _wait(self, poll: Callable[[], M.BackupStatusResponse]) -> M.BackupStatusResponse:
        while True:
            status = poll()
            if status.status.finished:
                log.info("backup %s finished with %s", status.id, status.status.value)
                return status
            log.debug("backup %s is %s", status.id, status.status.value)
            self._sleep(self.core.cfg.backup_poll_interval_s)
