"""Test durable key/value storage."""
import pytest

from medicare_client.storage import KeyValueStorage


def test_missing_key_returns_none(storage):
    assert storage.get_item("token") is None


def test_set_and_get_round_trip(storage):
    storage.set_item("token", "abc")

    assert storage.get_item("token") == "abc"


def test_set_overwrites_existing_value(storage):
    storage.set_item("role", "patient")
    storage.set_item("role", "doctor")

    assert storage.get_item("role") == "doctor"
    assert storage.keys() == ["role"]


def test_remove_item(storage):
    storage.set_item("token", "abc")
    storage.remove_item("token")

    assert storage.get_item("token") is None


def test_remove_missing_key_is_noop(storage):
    storage.remove_item("nothing-here")

    assert storage.keys() == []


def test_clear_removes_everything(storage):
    storage.set_item("token", "abc")
    storage.set_item("role", "admin")

    assert storage.clear() == 2
    assert storage.keys() == []


def test_values_survive_new_instance(tmp_path):
    """A file-backed store is readable by a fresh instance (process restart)."""
    url = f"sqlite:///{tmp_path / 'session.db'}"

    first = KeyValueStorage(url)
    first.set_item("token", "persisted")
    first.close()

    second = KeyValueStorage(url)
    try:
        assert second.get_item("token") == "persisted"
    finally:
        second.close()
