"""Tests for subscriber management."""

from yerushalmi_yomi.subscribers import SubscriberStore


def test_load_empty(tmp_path):
    assert SubscriberStore(tmp_path / "subscribers.json").load() == set()


def test_save_and_load(tmp_path):
    store = SubscriberStore(tmp_path / "state" / "subscribers.json")
    store.save({111, 222, 333})
    assert store.load() == {111, 222, 333}


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "subscribers.json"
    path.write_text("{not json")
    assert SubscriberStore(path).load() == set()


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "subscribers.json"
    path.write_text("[1, 2, 3]")
    assert SubscriberStore(path).load() == set()


def test_add_subscriber(tmp_path):
    store = SubscriberStore(tmp_path / "subscribers.json")
    assert store.add(100) is True
    assert store.add(100) is False  # Already exists
    assert 100 in store


def test_remove_subscriber(tmp_path):
    store = SubscriberStore(tmp_path / "subscribers.json")
    store.add(200)
    assert store.remove(200) is True
    assert store.remove(200) is False  # Already removed
    assert 200 not in store


def test_subscriber_count(tmp_path):
    store = SubscriberStore(tmp_path / "subscribers.json")
    for chat_id in (1, 2, 3):
        store.add(chat_id)
    assert len(store) == 3
