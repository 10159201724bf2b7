"""Tests for core.models."""

import json

from core.models import FetchParams, FetchResult, RecordEnvelope


def test_params_defaults():
    params = FetchParams()

    assert (params.limit, params.offset, params.shuffle, params.token) == (25, 0, 0, None)
    assert params.query() == [("limit", "25"), ("offset", "0"), ("shuffle", "0")]


def test_params_repr_masks_token():
    assert "s3cret" not in repr(FetchParams(token="s3cret"))


def test_envelope_count_tracks_records():
    envelope = RecordEnvelope(records=[{"id": 1}])
    assert envelope.count == 1

    envelope.records.append({"id": 2})
    assert envelope.to_dict() == {"count": 2, "records": [{"id": 1}, {"id": 2}]}


def test_empty_envelope():
    assert RecordEnvelope().to_dict() == {"count": 0, "records": []}


def test_error_result_text_is_verbatim():
    result = FetchResult.failed("Request failed: 404 Not Found")

    assert result.is_error
    assert result.envelope is None
    assert result.to_text() == "Request failed: 404 Not Found"


def test_ok_result_text_is_indented_json():
    result = FetchResult.ok(RecordEnvelope(records=[{"id": 1}]))

    assert not result.is_error
    assert result.to_text() == json.dumps({"count": 1, "records": [{"id": 1}]}, indent=2)
