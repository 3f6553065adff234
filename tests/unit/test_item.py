"""Unit tests for CacheItem lazy resolution."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from transient_cache.exceptions import InvalidArgumentError
from transient_cache.item import CacheItem, ItemState
from transient_cache.monitoring.metrics import cache_lookups_total
from transient_cache.serialization import JsonSerializer


class TestCacheItemResolution:
    """Test how items read the store."""

    def test_starts_unresolved_without_reading(self, spy_store, serializer):
        item = CacheItem("key", spy_store, serializer)
        assert item.get_key() == "key"
        assert item.state is ItemState.UNRESOLVED
        spy_store.get.assert_not_called()

    def test_miss(self, memory_store, serializer):
        item = CacheItem("missing", memory_store, serializer)
        assert item.is_hit() is False
        assert item.get() is None
        assert item.state is ItemState.MISS
        assert cache_lookups_total.get(result="miss") == 1

    def test_hit(self, memory_store, serializer):
        memory_store.set("key", serializer.dumps({"a": 1}))
        item = CacheItem("key", memory_store, serializer)
        assert item.is_hit() is True
        assert item.get() == {"a": 1}
        assert cache_lookups_total.get(result="hit") == 1

    def test_stored_false_is_a_hit(self, memory_store, serializer):
        memory_store.set("flag", serializer.dumps(False))
        item = CacheItem("flag", memory_store, serializer)
        assert item.is_hit() is True
        assert item.get() is False

    def test_stored_none_is_a_hit(self, memory_store, serializer):
        memory_store.set("nothing", serializer.dumps(None))
        item = CacheItem("nothing", memory_store, serializer)
        assert item.is_hit() is True
        assert item.get() is None

    def test_false_with_foreign_encoding_is_a_miss(self, memory_store):
        """JSON accepts whitespace, so b' false' decodes to False but is not our encoding."""
        memory_store.set("flag", b" false")
        item = CacheItem("flag", memory_store, JsonSerializer())
        assert item.is_hit() is False
        assert item.get() is None

    def test_stored_false_as_str_is_a_hit(self, memory_store):
        """Stores with decoded responses return str payloads."""
        memory_store.set("flag", "false")
        item = CacheItem("flag", memory_store, JsonSerializer())
        assert item.is_hit() is True
        assert item.get() is False

    def test_false_roundtrip_through_decoding_store(self, memory_store):
        decoding_store = Mock(wraps=memory_store)
        decoding_store.get.side_effect = lambda key: memory_store.get(key).decode("utf-8")
        memory_store.set("flag", JsonSerializer().dumps(False))

        item = CacheItem("flag", decoding_store, JsonSerializer())

        assert item.get() is False
        assert item.state is ItemState.HIT

    def test_undecodable_payload_is_a_miss(self, memory_store, serializer):
        memory_store.set("junk", b"\x00garbage")
        item = CacheItem("junk", memory_store, serializer)
        assert item.is_hit() is False

    def test_resolves_once(self, spy_store, serializer, memory_store):
        memory_store.set("key", serializer.dumps("v"))
        item = CacheItem("key", spy_store, serializer)

        for _ in range(3):
            assert item.is_hit() is True
            assert item.get() == "v"

        assert spy_store.get.call_count == 1

    def test_snapshot_ignores_later_store_changes(self, memory_store, serializer):
        memory_store.set("key", serializer.dumps("old"))
        item = CacheItem("key", memory_store, serializer)
        assert item.get() == "old"

        memory_store.delete("key")
        assert item.is_hit() is True
        assert item.get() == "old"

    def test_miss_stays_miss(self, memory_store, serializer):
        item = CacheItem("key", memory_store, serializer)
        assert item.is_hit() is False
        memory_store.set("key", serializer.dumps("late"))
        assert item.is_hit() is False


class TestCacheItemMutation:
    """Test local mutators."""

    def test_set_marks_hit_without_reading(self, spy_store, serializer):
        item = CacheItem("key", spy_store, serializer)
        assert item.set("value") is item
        assert item.is_hit() is True
        assert item.get() == "value"
        spy_store.get.assert_not_called()

    def test_set_after_miss_keeps_state_but_updates_value(self, memory_store, serializer):
        item = CacheItem("key", memory_store, serializer)
        assert item.is_hit() is False
        item.set("value")
        assert item.state is ItemState.MISS
        assert item.get() == "value"

    def test_expires_at(self, memory_store, serializer):
        deadline = datetime.now(timezone.utc) + timedelta(days=1)
        item = CacheItem("key", memory_store, serializer)
        assert item.get_expiration() is None
        assert item.expires_at(deadline) is item
        assert item.get_expiration() is deadline
        item.expires_at(None)
        assert item.get_expiration() is None

    def test_expires_at_rejects_durations(self, memory_store, serializer):
        item = CacheItem("key", memory_store, serializer)
        with pytest.raises(InvalidArgumentError):
            item.expires_at(60)

    def test_expires_after_keeps_raw_expression(self, memory_store, serializer):
        item = CacheItem("key", memory_store, serializer)
        assert item.expires_after(60).get_expiration() == 60
        delta = timedelta(minutes=5)
        assert item.expires_after(delta).get_expiration() is delta
        assert item.expires_after(None).get_expiration() is None

    def test_expires_after_rejects_garbage(self, memory_store, serializer):
        item = CacheItem("key", memory_store, serializer)
        with pytest.raises(InvalidArgumentError):
            item.expires_after("soon")
