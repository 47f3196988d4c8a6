"""
Object storage for seller verification documents.

Backends share the `ObjectStore` contract: `put()` stores bytes under a key
and returns a `StoredObject` (size + SHA-256), `delete()` removes a key.
"""

from findora.storage.object_store import InMemoryObjectStore, ObjectStore, S3ObjectStore, StoredObject

__all__ = ["ObjectStore", "StoredObject", "S3ObjectStore", "InMemoryObjectStore"]
