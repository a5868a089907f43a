from .hash_index import HashIndex, MapEntry, polynomial_hash

__all__ = ["HashIndex", "MapEntry", "polynomial_hash"]
