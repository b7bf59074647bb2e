"""
Unit tests for fincheck.data.store, loader and schemas
"""
import dataclasses
import json

import pytest

from fincheck.data.loader import load_raw_records, parse_registry
from fincheck.data.schemas import FilterSpec, MatchResult, Record
from fincheck.data.store import RecordStore


class TestLoad:

    def test_ids_follow_position(self, store):
        assert [r.id for r in store.records] == [0, 1, 2, 3]

    def test_dates_normalized_once(self, store):
        assert [r.iso_date for r in store.records] == ["2021-12-23", "2021-01-05", None, "2021-01-31"]

    def test_fields_pass_through(self, store, raw_records):
        rec = store.records[3]
        assert rec["Keterangan"] == "terdaftar"
        assert rec.get("Tanggal Berizin/Terdaftar") == "31, Januari, 2021"
        assert dict(rec.fields) == raw_records[3]

    def test_missing_fields_stay_absent(self, store):
        rec = store.records[3]
        assert "Nomor" not in rec
        assert rec.get("Surat Tanda Berizin/Terdaftar") is None
        assert store.records[1]["Alamat Website"] is None

    def test_no_dedup(self):
        raw = [{"Nama Perusahaan": "PT A"}, {"Nama Perusahaan": "PT A"}]
        assert RecordStore.load(raw).row_count() == 2

    def test_non_mapping_entries_keep_positions(self):
        store = RecordStore.load([{"Nama Perusahaan": "PT A"}, "junk", None, {"Nama Perusahaan": "PT B"}])
        assert store.row_count() == 4
        assert store.records[3].id == 3
        assert dict(store.records[1].fields) == {}

    def test_records_are_immutable(self, store):
        rec = store.records[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            rec.id = 99
        with pytest.raises(TypeError):
            rec.fields["Nama Perusahaan"] = "changed"

    def test_source_mutation_does_not_leak(self, raw_records):
        store = RecordStore.load(raw_records)
        raw_records[0]["Nama Perusahaan"] = "PT Lain"
        assert store.records[0]["Nama Perusahaan"] == "PT Kredit Pintar Indonesia"

    def test_nested_values_are_copied(self):
        raw = [{"Nama Perusahaan": "PT A", "Cabang": ["Jakarta"], "Kontak": {"email": "a@pt.id"}}]
        store = RecordStore.load(raw)
        raw[0]["Cabang"].append("Bandung")
        raw[0]["Kontak"]["email"] = "x@pt.id"
        assert store.records[0]["Cabang"] == ["Jakarta"]
        assert store.records[0]["Kontak"] == {"email": "a@pt.id"}

    def test_reload_builds_new_store(self, store, raw_records):
        fresh = RecordStore.load(raw_records[:1])
        assert fresh is not store
        assert store.row_count() == 4
        assert fresh.row_count() == 1

    def test_to_dict(self, store):
        d = store.records[0].to_dict()
        assert d["__id"] == 0
        assert d["__isoDate"] == "2021-12-23"
        assert d["Nama Perusahaan"] == "PT Kredit Pintar Indonesia"
        assert list(d)[:2] == ["__id", "__isoDate"]


class TestMetadata:

    def test_counts(self, store):
        assert store.row_count() == 4
        assert store.dated_count() == 3

    def test_business_types(self, store):
        assert store.business_types() == ["Equity Crowdfunding", "Pembayaran", "Pinjaman Online"]

    def test_date_range(self, store):
        assert store.date_range() == "2021-01-05 to 2021-12-23"

    def test_empty_store(self):
        store = RecordStore.load([])
        assert store.row_count() == 0
        assert store.business_types() == []
        assert store.date_range() == "N/A"
        assert store.search(FilterSpec(query="x")).matched == 0


class TestSearch:

    def test_idle(self, store):
        result = store.search(FilterSpec())
        assert result.verdict == "idle"
        assert result.matched == result.total == 4
        assert not result.criteria_active

    def test_listed(self, store):
        result = store.search(FilterSpec(query="kredit"))
        assert result.verdict == "listed"
        assert result.matched == 1
        assert result.total == 4

    def test_unlisted(self, store):
        result = store.search(FilterSpec(query="pinjol ilegal"))
        assert result.verdict == "unlisted"
        assert "ILEGAL" in result.message


class TestFilterSpec:

    def test_string_dates_coerced(self):
        spec = FilterSpec(date_from="2021-01-01", date_to="")
        assert spec.date_from.isoformat() == "2021-01-01"
        assert spec.date_to is None

    def test_invalid_date_raises(self):
        with pytest.raises(ValueError):
            FilterSpec(date_from="01/01/2021")

    def test_is_active(self):
        assert not FilterSpec().is_active
        assert FilterSpec(query="a").is_active
        assert FilterSpec(website="a").is_active
        assert FilterSpec(date_to="2021-01-01").is_active

    def test_field_filters_keyed_by_record_field(self):
        spec = FilterSpec(company="pt", business_type="pinjaman")
        assert spec.field_filters() == {"Nama Perusahaan": "pt", "Jenis Usaha": "pinjaman"}

    def test_label(self):
        assert FilterSpec().label == "No criteria"
        spec = FilterSpec(query="kredit", company="pt", date_from="2021-01-01")
        assert spec.label == '"kredit", company=pt, 2021-01-01 to ?'


class TestMatchResult:

    def test_verdicts(self):
        rec = Record(id=0, iso_date=None, fields={})
        assert MatchResult([], 0, False).verdict == "idle"
        assert MatchResult([rec], 1, True).verdict == "listed"
        assert MatchResult([], 1, True).verdict == "unlisted"


class TestLoader:

    def test_valid_file(self, data_file, raw_records):
        assert load_raw_records(data_file) == raw_records

    def test_missing_file(self, tmp_path, capsys):
        assert load_raw_records(tmp_path / "nope.json") == []
        assert "Warning" in capsys.readouterr().out

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_raw_records(path) == []

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"data": []}), encoding="utf-8")
        assert load_raw_records(path) == []

    def test_parse_registry_rejects_object(self):
        with pytest.raises(ValueError):
            parse_registry(b'{"a": 1}')

    def test_from_file(self, data_file):
        store = RecordStore.from_file(data_file)
        assert store.row_count() == 4
        assert store.source == str(data_file)

    def test_from_missing_file_is_empty(self, tmp_path):
        assert RecordStore.from_file(tmp_path / "nope.json").row_count() == 0
