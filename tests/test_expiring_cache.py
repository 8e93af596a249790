from __future__ import annotations

import unittest

from farmboard.infrastructure.cache.expiring_cache import ExpiringCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms / 1000.0


class ExpiringCacheTests(unittest.TestCase):
    def test_get_returns_value_within_ttl(self):
        clock = FakeClock()
        cache = ExpiringCache(30_000, clock=clock)
        cache.set("pools", ("a", "b"))

        clock.advance_ms(29_999)
        self.assertEqual(cache.get("pools"), ("a", "b"))

    def test_entry_expires_exactly_at_ttl(self):
        clock = FakeClock()
        cache = ExpiringCache(30_000, clock=clock)
        cache.set("pools", ["x"])

        clock.advance_ms(30_000)
        self.assertIsNone(cache.get("pools"))
        self.assertEqual(len(cache), 0)

    def test_missing_key_is_a_miss(self):
        cache = ExpiringCache(1_000, clock=FakeClock())
        self.assertIsNone(cache.get("prices"))

    def test_set_overwrites_and_restarts_ttl(self):
        clock = FakeClock()
        cache = ExpiringCache(1_000, clock=clock)
        cache.set("k", 1)
        clock.advance_ms(900)
        cache.set("k", 2)
        clock.advance_ms(900)

        self.assertEqual(cache.get("k"), 2)

    def test_keys_are_independent(self):
        clock = FakeClock()
        cache = ExpiringCache(1_000, clock=clock)
        cache.set("pools", "p")
        clock.advance_ms(600)
        cache.set("prices", "q")
        clock.advance_ms(600)

        self.assertIsNone(cache.get("pools"))
        self.assertEqual(cache.get("prices"), "q")

    def test_full_store_drops_stale_entries_on_write(self):
        clock = FakeClock()
        cache = ExpiringCache(1_000, max_entries=2, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        clock.advance_ms(1_500)
        cache.set("c", 3)

        self.assertEqual(len(cache), 1)
        self.assertEqual(cache.get("c"), 3)

    def test_clear_empties_store(self):
        cache = ExpiringCache(1_000, clock=FakeClock())
        cache.set("a", 1)
        cache.clear()
        self.assertIsNone(cache.get("a"))

    def test_rejects_non_positive_ttl(self):
        with self.assertRaises(ValueError):
            ExpiringCache(0)


if __name__ == "__main__":
    unittest.main()
