import pytest

from algokit.hashmap import ChainedHashMap


def test_insert_and_get():
    table = ChainedHashMap(10)
    table.insert(2, "two")
    table.insert(12, "twelve")
    assert table.get(2) == "two"
    assert table.get(12) == "twelve"
    assert len(table) == 2


def test_missing_key_raises():
    table = ChainedHashMap(4)
    table.insert(1, "one")
    with pytest.raises(KeyError):
        table.get(5)


def test_reinsert_updates_without_growing():
    table = ChainedHashMap(10)
    table.insert(1, "one")
    table.insert(1, "uno")
    assert table.get(1) == "uno"
    assert len(table) == 1


def test_contains():
    table = ChainedHashMap(3)
    table.insert("a", 1)
    assert "a" in table
    assert "b" not in table
    assert [] not in table


def test_zero_buckets_rejected():
    with pytest.raises(ValueError):
        ChainedHashMap(0)


def test_colliding_keys_share_a_bucket():
    table = ChainedHashMap(10)
    for key in (1, 11, 21, 31, 41):
        table.insert(key, str(key))
    assert {table.bucket_of(key) for key in (1, 11, 21, 31, 41)} == {table.bucket_of(1)}
    assert all(table.get(key) == str(key) for key in (1, 11, 21, 31, 41))


def test_render_shows_chains_newest_first():
    table = ChainedHashMap(3)
    table.insert(1, "one")
    table.insert(4, "four")
    lines = table.render().splitlines()
    assert len(lines) == table.bucket_count
    assert lines[0] == "Bucket0------>NULL"
    assert lines[1] == "Bucket1------><--->4,four<--->1,one"


def test_many_keys_round_trip():
    table = ChainedHashMap(7)
    pairs = {n: n * n for n in range(100)}
    for key, value in pairs.items():
        table.insert(key, value)
    assert len(table) == len(pairs)
    assert all(table.get(key) == value for key, value in pairs.items())