import json
import threading
from unittest.mock import patch

import pytest

from app.core.errors import InvalidEmailError, PersistenceError
from app.subscriptions.store import SubscriberStore, normalize_email


def test_missing_file_loads_as_empty(subscriber_store):
    assert subscriber_store.load() == []


def test_subscribe_appends_and_rewrites_file(subscriber_store):
    assert subscriber_store.subscribe("witch@example.com") is True
    assert subscriber_store.subscribe("warlock@example.com") is True

    raw = subscriber_store.path.read_text(encoding="utf-8")
    assert json.loads(raw) == ["witch@example.com", "warlock@example.com"]
    assert raw.startswith("[\n  ")


def test_duplicate_subscription_is_idempotent(subscriber_store):
    assert subscriber_store.subscribe("witch@example.com") is True
    assert subscriber_store.subscribe("witch@example.com") is False

    assert subscriber_store.load() == ["witch@example.com"]


def test_existing_file_is_preserved(tmp_path):
    path = tmp_path / "emails.json"
    path.write_text(json.dumps(["first@example.com"]), encoding="utf-8")

    store = SubscriberStore(path)
    store.subscribe("second@example.com")

    assert store.load() == ["first@example.com", "second@example.com"]


@pytest.mark.parametrize("email", [None, "", "   ", "not-an-email", 5])
def test_invalid_email_is_rejected(subscriber_store, email):
    with pytest.raises(InvalidEmailError) as excinfo:
        subscriber_store.subscribe(email)

    assert excinfo.value.message == "Invalid email address."
    assert not subscriber_store.path.exists()


def test_only_the_at_sign_is_checked():
    assert normalize_email("  odd@address ") == "odd@address"


def test_corrupt_file_raises_persistence_error(tmp_path):
    path = tmp_path / "emails.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        SubscriberStore(path).subscribe("witch@example.com")


def test_non_list_file_raises_persistence_error(tmp_path):
    path = tmp_path / "emails.json"
    path.write_text('{"emails": []}', encoding="utf-8")

    with pytest.raises(PersistenceError):
        SubscriberStore(path).load()


def test_write_failure_raises_persistence_error(subscriber_store):
    with patch("app.subscriptions.store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistenceError):
            subscriber_store.subscribe("witch@example.com")


def test_concurrent_subscriptions_are_not_lost(subscriber_store):
    emails = [f"seeker{i}@example.com" for i in range(20)]
    threads = [threading.Thread(target=subscriber_store.subscribe, args=(e,)) for e in emails]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(subscriber_store.load()) == sorted(emails)
