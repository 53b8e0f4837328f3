import json
import logging

import pytest

from secret_recon.errors import DuplicateXValue, InvalidDigit, InvalidInputStructure
from secret_recon.records import Point, ShareRequest, dump_records, load_records, parse_record, to_record

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_parse_sample_record():
    request = parse_record(SAMPLE)
    assert request.n == 4
    assert request.k == 3
    assert request.points == (Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39))
    assert request.x_values == [1, 2, 3, 6]
    assert request.y_values == [4, 7, 12, 39]


def test_numeric_base_and_string_counts():
    record = {"keys": {"n": "1", "k": "1"}, "5": {"base": 16, "value": "FF"}}
    request = parse_record(record)
    assert request.points == (Point(5, 255),)


@pytest.mark.parametrize(
    "record, field",
    [
        ({}, "keys"),
        ({"keys": []}, "keys"),
        ({"keys": {"k": 1}}, "keys.n"),
        ({"keys": {"n": 1}}, "keys.k"),
        ({"keys": {"n": 0, "k": 1}}, "keys.n"),
        ({"keys": {"n": 2, "k": "two"}}, "keys.k"),
        ({"keys": {"n": True, "k": 1}}, "keys.n"),
        ({"keys": {"n": 1, "k": 2}}, "keys.k"),
        ({"keys": {"n": 1, "k": 1}, "x": {"base": "10", "value": "1"}}, "x"),
        ({"keys": {"n": 1, "k": 1}, "1": "10"}, "1"),
        ({"keys": {"n": 1, "k": 1}, "1": {"value": "1"}}, "1.base"),
        ({"keys": {"n": 1, "k": 1}, "1": {"base": "10"}}, "1.value"),
        ({"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 7}}, "1.value"),
    ],
)
def test_structure_errors_name_the_field(record, field):
    with pytest.raises(InvalidInputStructure) as exc:
        parse_record(record)
    assert exc.value.field == field


def test_non_mapping_record():
    with pytest.raises(InvalidInputStructure):
        parse_record(["keys"])


def test_invalid_digit_propagates():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "g"}}
    with pytest.raises(InvalidDigit):
        parse_record(record)


def test_equivalent_x_keys_are_duplicates():
    record = {
        "keys": {"n": 2, "k": 1},
        "1": {"base": "10", "value": "1"},
        "01": {"base": "10", "value": "2"},
    }
    with pytest.raises(DuplicateXValue):
        parse_record(record)


def test_point_count_mismatch_only_warns(caplog):
    record = {"keys": {"n": 5, "k": 1}, "1": {"base": "10", "value": "1"}}
    with caplog.at_level(logging.WARNING, logger="secret_recon.records"):
        request = parse_record(record)
    assert len(request.points) == 1
    assert "n=5" in caplog.text


def test_to_record_round_trip():
    request = ShareRequest(n=2, k=2, points=(Point(1, 255), Point(2, 7)))
    record = to_record(request, {1: 16, 2: 2})
    assert record == {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "16", "value": "ff"},
        "2": {"base": "2", "value": "111"},
    }
    assert parse_record(record) == request


def test_load_json_single_and_list(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps(SAMPLE))
    assert load_records(single) == [(str(single), SAMPLE)]

    batch = tmp_path / "many.json"
    batch.write_text(json.dumps([SAMPLE, {}]))
    loaded = load_records(batch)
    assert [label for label, _ in loaded] == [f"{batch}[0]", f"{batch}[1]"]


def test_load_yaml(tmp_path):
    path = tmp_path / "case.yaml"
    path.write_text(
        "keys:\n"
        "  n: 2\n"
        "  k: 2\n"
        "1:\n"
        "  base: 10\n"
        "  value: '5'\n"
        "2:\n"
        "  base: '2'\n"
        "  value: '101'\n"
    )
    [(label, record)] = load_records(path)
    assert label == str(path)
    assert parse_record(record).points == (Point(1, 5), Point(2, 5))


def test_load_unreadable_document(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidInputStructure):
        load_records(path)


def test_dump_records_formats():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "9"}}
    assert json.loads(dump_records([record])) == record
    assert json.loads(dump_records([record, record])) == [record, record]
    assert "keys:" in dump_records([record], fmt="yaml")


def test_x_key_beyond_int_str_digit_limit():
    key = "1" * 5000
    record = {"keys": {"n": 1, "k": 1}, key: {"base": "10", "value": "7"}}
    request = parse_record(record)
    assert request.points == (Point((10**5000 - 1) // 9, 7),)
    assert list(to_record(request, {}))[1] == key


def test_negative_x_key():
    record = {"keys": {"n": 1, "k": 1}, "-3": {"base": "10", "value": "7"}}
    assert parse_record(record).points == (Point(-3, 7),)
