"""Tests for the RowCodec facade."""

import json

import structlog
import yaml

from orgdata.codec import RowCodec
from orgdata.config import CodecConfig


def _row(nil_id):
    return {
        "user_id": nil_id,
        "owner_id": nil_id,
        "created_at": "2024-01-01 00:00:00",
        "updated_at": "2024-01-02 00:00:00",
    }


def test_default_codec_reads_naive_timestamps_as_utc(nil_id):
    codec = RowCodec()
    encoded = codec.encode(codec.decode_user(_row(nil_id)))
    assert encoded["metadata"]["created_at"] == "2024-01-01T00:00:00Z"


def test_configured_timezone(nil_id):
    codec = RowCodec(CodecConfig(timezone="Europe/Berlin"))
    encoded = codec.encode(codec.decode_user(_row(nil_id)))
    assert encoded["metadata"]["created_at"] == "2023-12-31T23:00:00Z"


def test_dumps_uses_configured_indent(nil_id):
    codec = RowCodec(CodecConfig(json_indent=0))
    text = codec.dumps(codec.decode_user(_row(nil_id)))
    assert "\n" not in text
    assert json.loads(text)["user_id"] == nil_id


def test_decode_organization(nil_id):
    codec = RowCodec()
    row = _row(nil_id)
    row["organization_id"] = row.pop("user_id")
    org = codec.decode_organization(row)
    assert codec.encode(org)["users"] == []


def test_from_file(tmp_path, nil_id):
    path = tmp_path / "orgdata.yaml"
    path.write_text(yaml.dump({"timezone": "UTC", "json_indent": 2, "logging": {"level": "warning"}}))
    codec = RowCodec.from_file(path)
    assert codec.config.json_indent == 2
    assert '\n  "user_id"' in codec.dumps(codec.decode_user(_row(nil_id)))


def test_from_file_leaves_logging_alone(tmp_path):
    path = tmp_path / "orgdata.yaml"
    path.write_text(yaml.dump({"logging": {"level": "error", "format": "text"}}))
    before = structlog.get_config()
    RowCodec.from_file(path)
    assert structlog.get_config() == before
    assert not structlog.is_configured()
