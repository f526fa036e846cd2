"""Tests for id generation and padding."""

from rankban.ids import next_episode_number, next_id, normalize_id, pad_id, snapshot_id


def test_normalize_id():
    assert normalize_id("007") == "7"
    assert normalize_id("10") == "10"
    assert normalize_id("000") == "0"


def test_pad_id():
    assert pad_id("7") == "007"
    assert pad_id("1234") == "1234"
    assert pad_id("5", width=5) == "00005"


def test_next_id():
    assert next_id([]) == "1"
    assert next_id(["1", "2", "9"]) == "10"
    assert next_id(["3", "notes"]) == "4"


def test_next_episode_number():
    assert next_episode_number([]) == 1
    assert next_episode_number([1, 4, 2]) == 5


def test_snapshot_id_is_random():
    assert snapshot_id() != snapshot_id()
    assert len(snapshot_id()) == 32
