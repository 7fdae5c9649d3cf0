"""
Purpose: In-process document store with the same surface as FirestoreStore.
What it does:
Backs dry runs (IPARA_STORE=memory) and the tests. Collections are plain
dicts of document id -> field dict.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Optional


class InMemoryStore:
    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)

    def delete_where(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        documents = self.collections[collection]
        doomed = [
            doc_id
            for doc_id, data in documents.items()
            if all(field_path in data and data[field_path] == value for field_path, value in (filters or {}).items())
        ]
        for doc_id in doomed:
            del documents[doc_id]
        return len(doomed)

    def upsert(self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False) -> None:
        """
        Like Firestore's set(): with merge=True nested maps are merged key by
        key, every other value is replaced.
        """
        documents = self.collections[collection]
        if merge and doc_id in documents:
            _merge_fields(documents[doc_id], data)
        else:
            documents[doc_id] = _merge_fields({}, data)

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        return self.collections[collection].get(doc_id)

    def documents(self, collection: str) -> Dict[str, Dict[str, Any]]:
        return self.collections[collection]


def _merge_fields(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in source.items():
        if isinstance(value, dict):
            existing = target.get(key)
            target[key] = _merge_fields(existing if isinstance(existing, dict) else {}, value)
        else:
            target[key] = value
    return target
