import re

from projecthub.utils.ids import new_id, now, parse_timestamp


def test_new_id_shape():
    assert re.fullmatch(r"project_\d{13}_[0-9a-z]{9}", new_id("project"))


def test_new_ids_differ():
    assert len({new_id("task") for _ in range(200)}) == 200


def test_now_is_strictly_increasing():
    stamps = [parse_timestamp(now()) for _ in range(500)]
    assert all(a < b for a, b in zip(stamps, stamps[1:]))


def test_now_is_utc_iso_text():
    value = now()
    assert value.endswith("Z")
    assert parse_timestamp(value).utcoffset().total_seconds() == 0


def test_parse_timestamp_accepts_seed_format():
    parsed = parse_timestamp("2024-01-15T10:00:00Z")
    assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2024, 1, 15, 10)
