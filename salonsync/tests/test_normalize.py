"""Test platform payload normalization."""

from __future__ import annotations

from salonsync.platform.normalize import extract_records


def test_direct_list():
    assert extract_records([{"id": 1}, {"id": 2}]) == [{"id": 1}, {"id": 2}]


def test_keyed_object():
    assert extract_records({"a": {"id": 1}, "b": {"id": 2}}) == [{"id": 1}, {"id": 2}]


def test_data_envelope_list():
    payload = {"success": True, "data": [{"id": 1}], "meta": []}
    assert extract_records(payload) == [{"id": 1}]


def test_data_envelope_keyed():
    payload = {"success": True, "data": {"1": {"id": 1}}}
    assert extract_records(payload) == [{"id": 1}]


def test_non_dict_items_dropped():
    assert extract_records([{"id": 1}, "junk", 3, None]) == [{"id": 1}]


def test_empty_and_scalar_payloads():
    assert extract_records(None) == []
    assert extract_records([]) == []
    assert extract_records({"data": None}) == []
    assert extract_records("oops") == []


def test_envelope_without_data():
    assert extract_records({"success": True, "meta": {"total_count": 0}}) == []
    assert extract_records({"meta": {"message": "No records"}}) == []
