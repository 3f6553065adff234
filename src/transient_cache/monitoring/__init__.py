from .metrics import Counter, cache_deletes_total, cache_lookups_total, cache_writes_total

__all__ = ["Counter", "cache_lookups_total", "cache_writes_total", "cache_deletes_total"]
