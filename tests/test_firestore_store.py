import json
from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions as google_exceptions

from store import InMemoryStore, InitializationError, StoreError, open_store
from store.firestore_client import FirestoreStore, initialize_app


def make_snapshots(count):
    return [MagicMock(name=f"snapshot_{i}") for i in range(count)]


def test_delete_where_applies_every_filter_and_chunks_batches():
    client = MagicMock()
    query = client.collection.return_value.where.return_value.where.return_value
    snapshots = make_snapshots(5)
    query.stream.return_value = snapshots

    store = FirestoreStore(client, batch_size=2)
    removed = store.delete_where("driver_locations", {"isMockData": True, "puvType": "Bus"})

    assert removed == 5
    client.collection.assert_called_once_with("driver_locations")

    first_filter = client.collection.return_value.where.call_args.kwargs["filter"]
    assert (first_filter.field_path, first_filter.op_string, first_filter.value) == ("isMockData", "==", True)
    second_filter = client.collection.return_value.where.return_value.where.call_args.kwargs["filter"]
    assert (second_filter.field_path, second_filter.op_string, second_filter.value) == ("puvType", "==", "Bus")

    # 5 deletes at 2 per batch -> 3 commits
    batch = client.batch.return_value
    assert client.batch.call_count == 3
    assert batch.commit.call_count == 3
    assert [call.args[0] for call in batch.delete.call_args_list] == [s.reference for s in snapshots]


def test_delete_where_without_filters_clears_collection():
    client = MagicMock()
    client.collection.return_value.stream.return_value = make_snapshots(2)

    removed = FirestoreStore(client).delete_where("routes")

    assert removed == 2
    client.collection.return_value.where.assert_not_called()
    assert client.batch.return_value.commit.call_count == 1


def test_delete_where_on_empty_collection_commits_nothing():
    client = MagicMock()
    client.collection.return_value.stream.return_value = []

    assert FirestoreStore(client).delete_where("routes") == 0
    client.batch.assert_not_called()


def test_delete_failure_is_a_store_error():
    client = MagicMock()
    client.collection.return_value.where.return_value.stream.side_effect = google_exceptions.ServiceUnavailable("down")

    with pytest.raises(StoreError) as excinfo:
        FirestoreStore(client).delete_where("commuter_locations", {"isMockData": True})

    assert isinstance(excinfo.value.__cause__, google_exceptions.ServiceUnavailable)


def test_upsert_sets_document_with_merge_flag():
    client = MagicMock()
    data = {"farePrice": 12.0}

    FirestoreStore(client).upsert("routes", "R2", data, merge=True)

    client.collection.assert_called_once_with("routes")
    client.collection.return_value.document.assert_called_once_with("R2")
    client.collection.return_value.document.return_value.set.assert_called_once_with(data, merge=True)


def test_upsert_failure_is_a_store_error():
    client = MagicMock()
    client.collection.return_value.document.return_value.set.side_effect = google_exceptions.PermissionDenied("nope")

    with pytest.raises(StoreError):
        FirestoreStore(client).upsert("driver_locations", "mock_bus_0", {})


def test_retry_deadline_is_a_store_error():
    """
    When the SDK gives up retrying it raises RetryError, which is not a
    GoogleAPICallError; it still has to come out as a StoreError.
    """
    client = MagicMock()
    client.collection.return_value.document.return_value.set.side_effect = google_exceptions.RetryError(
        "Deadline of 300.0s exceeded", google_exceptions.ServiceUnavailable("down")
    )

    with pytest.raises(StoreError) as excinfo:
        FirestoreStore(client).upsert("routes", "R2", {"farePrice": 12.0})

    assert isinstance(excinfo.value.__cause__, google_exceptions.RetryError)

    client.collection.return_value.stream.side_effect = google_exceptions.RetryError(
        "Deadline of 300.0s exceeded", google_exceptions.ServiceUnavailable("down")
    )

    with pytest.raises(StoreError):
        FirestoreStore(client).delete_where("routes")


def test_batch_size_is_bounded():
    with pytest.raises(ValueError):
        FirestoreStore(MagicMock(), batch_size=501)

    with pytest.raises(ValueError):
        FirestoreStore(MagicMock(), batch_size=0)


# --- initialization ---

def test_initialize_app_reuses_existing_app():
    existing = MagicMock(name="app")

    with patch("store.firestore_client.firebase_admin.get_app", return_value=existing), \
            patch("store.firestore_client.credentials.Certificate") as certificate:
        assert initialize_app("unused.json") is existing

    certificate.assert_not_called()


def test_initialize_app_missing_credentials(tmp_path):
    with patch("store.firestore_client.firebase_admin.get_app", side_effect=ValueError("no app")):
        with pytest.raises(InitializationError):
            initialize_app(str(tmp_path / "missing.json"))


def test_initialize_app_invalid_credentials(tmp_path):
    path = tmp_path / "serviceAccountKey.json"
    path.write_text(json.dumps({"type": "authorized_user"}))

    with patch("store.firestore_client.firebase_admin.get_app", side_effect=ValueError("no app")):
        with pytest.raises(InitializationError):
            initialize_app(str(path))


def test_open_store_memory_backend():
    assert isinstance(open_store("memory"), InMemoryStore)


def test_open_store_unknown_backend():
    with pytest.raises(InitializationError):
        open_store("postgres")
