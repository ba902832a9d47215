"""
Unit tests for loading consignment records from YAML/JSON documents.
"""

import json

import pytest

from consignment.core.exceptions import RecordLoadError
from consignment.core.models import ConsignmentType, Email, Phone, load_records, parse_records

RECORD = {
    "direction": "outbound",
    "who_pays": "abc",
    "cost_centre": "cc1",
    "sender": {"business_name": "Acme"},
    "receiver": {"business_name": "Globex"},
    "contact_methods": [{"kind": "phone", "value": "12345"}],
}


class TestParseRecords:
    """Tests for parse_records"""

    def test_single_mapping(self):
        records = parse_records(RECORD)
        assert len(records) == 1
        assert records[0].who_pays == "abc"
        assert records[0].contact_methods == (Phone(value="12345"),)

    def test_consignments_list(self):
        second = {**RECORD, "direction": "incoming", "contact_methods": []}
        records = parse_records({"consignments": [RECORD, second]})
        assert [r.direction for r in records] == [ConsignmentType.OUTBOUND, ConsignmentType.INCOMING]

    def test_bare_list(self):
        assert len(parse_records([RECORD, RECORD])) == 2

    def test_invalid_record_names_index(self):
        broken = {**RECORD}
        del broken["who_pays"]
        with pytest.raises(RecordLoadError) as exc_info:
            parse_records({"consignments": [RECORD, broken]}, source="batch.yaml")
        assert "record 1" in str(exc_info.value)
        assert exc_info.value.source == "batch.yaml"

    @pytest.mark.parametrize("document", [None, "text", 42, {"consignments": "nope"}])
    def test_wrong_shape(self, document):
        with pytest.raises(RecordLoadError):
            parse_records(document)


class TestLoadRecords:
    """Tests for load_records"""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text(
            "consignments:\n"
            "  - direction: incoming\n"
            "    who_pays: ok\n"
            "    cost_centre: ok\n"
            "    sender: {business_name: ok}\n"
            "    receiver: {business_name: ok}\n"
            "    contact_methods:\n"
            "      - {kind: email, value: a@b.io}\n"
        )
        records = load_records(path)
        assert records[0].contact_methods == (Email(value="a@b.io"),)

    def test_json_file(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([RECORD]))
        assert load_records(path)[0].receiver.business_name == "Globex"

    def test_unicode_values(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({**RECORD, "who_pays": "çöü"}, ensure_ascii=False), encoding="utf-8")
        assert load_records(path)[0].who_pays == "çöü"

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordLoadError) as exc_info:
            load_records(tmp_path / "missing.yaml")
        assert "not found" in str(exc_info.value)

    def test_unparseable_json(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text("{not json")
        with pytest.raises(RecordLoadError) as exc_info:
            load_records(path)
        assert "cannot parse" in str(exc_info.value)

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "records.yml"
        path.write_text("consignments: [unclosed\n")
        with pytest.raises(RecordLoadError):
            load_records(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(RecordLoadError, match="cannot read"):
            load_records(tmp_path)
