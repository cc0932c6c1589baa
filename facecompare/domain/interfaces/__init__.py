"""Service interfaces package."""
from .recognition.face_comparator import FaceComparator
from .storage.object_store import ObjectStore

__all__ = ["FaceComparator", "ObjectStore"]
