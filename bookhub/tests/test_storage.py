"""Тесты бэкендов хранилища."""

import threading

from bookhub.config import Settings
from bookhub.core.storage import FileStorage, NullStorage, select_storage


def test_file_storage_set_get_remove(tmp_path):
    storage = FileStorage(tmp_path / "nested" / "session.json")
    assert storage.get_item("auth_token") is None

    storage.set_item("auth_token", "abc")
    storage.set_item("auth_user", '{"id": 1}')
    assert storage.get_item("auth_token") == "abc"

    storage.remove_item("auth_token")
    assert storage.get_item("auth_token") is None
    assert storage.get_item("auth_user") == '{"id": 1}'

    # удаление отсутствующего ключа не ошибка
    storage.remove_item("auth_token")


def test_file_storage_survives_new_instance(tmp_path):
    path = tmp_path / "session.json"
    FileStorage(path).set_item("auth_token", "abc")
    assert FileStorage(path).get_item("auth_token") == "abc"


def test_file_storage_corrupt_file_reads_empty(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    storage = FileStorage(path)
    assert storage.get_item("auth_token") is None

    storage.set_item("auth_token", "fresh")
    assert storage.get_item("auth_token") == "fresh"


def test_null_storage_discards_writes():
    storage = NullStorage()
    storage.set_item("auth_token", "abc")
    assert storage.get_item("auth_token") is None
    storage.remove_item("auth_token")


def test_select_storage(tmp_path):
    file_settings = Settings(storage_backend="file", session_file=tmp_path / "s.json", _env_file=None)
    selected = select_storage(file_settings)
    assert isinstance(selected, FileStorage)
    assert selected.path == tmp_path / "s.json"

    none_settings = Settings(storage_backend="none", _env_file=None)
    assert isinstance(select_storage(none_settings), NullStorage)


def test_file_storage_concurrent_writes_keep_all_keys(tmp_path):
    storage = FileStorage(tmp_path / "session.json")

    threads = [
        threading.Thread(target=storage.set_item, args=(f"key_{i}", str(i)))
        for i in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert all(storage.get_item(f"key_{i}") == str(i) for i in range(20))
