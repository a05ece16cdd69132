"""Live block registry tests."""
import pytest

from seiac.live_blocks import MAX_BLOCK_MINUTES, LiveBlockRegistry


def test_block_then_query(clock):
    registry = LiveBlockRegistry(clock=clock)
    record = registry.block_user("k", 5)

    status = registry.is_user_blocked("k")

    assert record.blocked_until == clock.now + 5 * 60_000
    assert status.blocked is True
    assert 0 < status.remaining_ms <= 5 * 60_000


def test_default_block_is_ten_minutes(clock):
    registry = LiveBlockRegistry(clock=clock)
    assert registry.block_user("k").blocked_until == clock.now + 10 * 60_000


def test_block_overwrites_instead_of_stacking(clock):
    registry = LiveBlockRegistry(clock=clock)
    registry.block_user("k", 5)
    registry.block_user("k", 1)

    assert registry.is_user_blocked("k").remaining_ms <= 60_000


def test_duration_is_clamped_to_one_minute(clock):
    registry = LiveBlockRegistry(clock=clock)

    assert registry.block_user("zero", 0).blocked_until == clock.now + 60_000
    assert registry.block_user("negative", -5).blocked_until == clock.now + 60_000


def test_unblock_clears_state(clock):
    registry = LiveBlockRegistry(clock=clock)
    registry.block_user("k", 5)

    assert registry.unblock_user("k") is True
    assert registry.is_user_blocked("k").to_dict() == {"blocked": False, "remainingMs": 0}
    assert registry.unblock_user("k") is False


def test_lapsed_block_expires_on_read(clock):
    registry = LiveBlockRegistry(clock=clock)
    registry.block_user("k", 0)
    clock.advance(60_000)

    status = registry.is_user_blocked("k")

    assert status.blocked is False
    assert status.remaining_ms == 0
    assert registry.get_all_blocks() == []
    assert registry.unblock_user("k") is False


def test_get_all_blocks_purges_expired(clock):
    registry = LiveBlockRegistry(clock=clock)
    registry.block_user("short", 1)
    registry.block_user("long", 30)
    clock.advance(2 * 60_000)

    blocks = registry.get_all_blocks()

    assert [b.key for b in blocks] == ["long"]
    assert registry.unblock_user("short") is False


def test_unknown_key_is_not_blocked(clock):
    registry = LiveBlockRegistry(clock=clock)
    status = registry.is_user_blocked("never-seen")
    assert status.blocked is False
    assert status.remaining_ms == 0


@pytest.mark.parametrize(
    ("minutes", "expected_minutes"),
    [
        (float("inf"), MAX_BLOCK_MINUTES),
        (1e308, MAX_BLOCK_MINUTES),
        (10**400, MAX_BLOCK_MINUTES),
        (float("nan"), 1),
        (float("-inf"), 1),
        (2.5, 2.5),
    ],
)
def test_block_length_is_bounded(clock, minutes, expected_minutes):
    registry = LiveBlockRegistry(clock=clock)

    record = registry.block_user("k", minutes)

    assert record.blocked_until == clock.now + int(expected_minutes * 60_000)
    assert registry.is_user_blocked("k").blocked is True


@pytest.mark.parametrize("key", ["", " ", "k", "EVAL42|ana@example.com", "x" * 500])
@pytest.mark.parametrize("minutes", [0, -1, float("nan"), float("inf"), 1e308, 10])
def test_registry_operations_never_raise(clock, key, minutes):
    registry = LiveBlockRegistry(clock=clock)

    registry.block_user(key, minutes)
    assert registry.is_user_blocked(key).blocked is True
    assert [b.key for b in registry.get_all_blocks()] == [key]
    assert registry.unblock_user(key) is True
    assert registry.unblock_user(key) is False
    assert registry.is_user_blocked(key).to_dict() == {"blocked": False, "remainingMs": 0}
    assert registry.get_all_blocks() == []
