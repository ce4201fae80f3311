import pytest

from weaviate_community import models as M
from weaviate_community.exceptions import BackupError


def test_create_without_waiting(client, article_class):
    res = client.backups.create(M.BackupBackend.FILESYSTEM, M.BackupCreateRequest(id="b1"))
    assert res.status is M.BackupStatus.STARTED
    assert res.classes == ["Article"]
    assert res.backend is M.BackupBackend.FILESYSTEM

    status = client.backups.get_backup_status("filesystem", "b1")
    assert status.status is M.BackupStatus.SUCCESS


def test_create_waits_until_finished(client, app, article_class):
    sleeps = []
    client.backups._sleep = sleeps.append
    app.state.store.backup_polls_left = 2

    res = client.backups.create(
        M.BackupBackend.FILESYSTEM,
        M.BackupCreateRequest(id="b2", include=["Article"]),
        wait_for_completion=True,
    )
    assert res.status is M.BackupStatus.SUCCESS
    assert res.id == "b2"
    assert sleeps == [0.01, 0.01]


def test_restore_and_status(client, app, article_class):
    client.backups._sleep = lambda _: None
    client.backups.create(M.BackupBackend.FILESYSTEM, M.BackupCreateRequest(id="b3"))
    app.state.store.backup_polls_left = 1

    res = client.backups.restore(M.BackupBackend.FILESYSTEM, "b3", wait_for_completion=True)
    assert res.status is M.BackupStatus.SUCCESS
    assert res.classes == ["Article"]

    assert client.backups.get_restore_status(M.BackupBackend.FILESYSTEM, "b3").status is M.BackupStatus.SUCCESS


def test_duplicate_backup_and_unknown_backup(client, article_class):
    client.backups.create(M.BackupBackend.FILESYSTEM, M.BackupCreateRequest(id="dup"))
    with pytest.raises(BackupError) as ei:
        client.backups.create(M.BackupBackend.FILESYSTEM, M.BackupCreateRequest(id="dup"))
    assert ei.value.status_code == 422

    with pytest.raises(BackupError) as ei:
        client.backups.get_backup_status(M.BackupBackend.S3, "nope")
    assert ei.value.status_code == 404


def test_unknown_backend_name_is_rejected_locally(client):
    with pytest.raises(ValueError):
        client.backups.create("tape", M.BackupCreateRequest(id="x"))
