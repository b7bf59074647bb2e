"""Shared fixtures: a small registry snapshot and an API client bound to it."""
import json

import pytest
from fastapi.testclient import TestClient

from fincheck.api import dependencies
from fincheck.data.store import RecordStore
from fincheck.main import app


RAW_RECORDS = [
    {
        "Nomor": 1,
        "Nama Perusahaan": "PT Kredit Pintar Indonesia",
        "Nama Sistem Elektronik": "KrediPintar",
        "Surat Tanda Berizin/Terdaftar": "KEP-123/D.05/2021",
        "Tanggal Berizin/Terdaftar": "23 Desember 2021",
        "Jenis Usaha": "Pinjaman Online",
        "Alamat Website": "www.kredipintar.co.id",
    },
    {
        "Nomor": 2,
        "Nama Perusahaan": "PT Dana Cepat",
        "Nama Sistem Elektronik": "DanaCepat",
        "Surat Tanda Berizin/Terdaftar": "S-45/MS.72/2020",
        "Tanggal Berizin/Terdaftar": "5 Januari 2021",
        "Jenis Usaha": "Pembayaran",
        "Alamat Website": None,
    },
    {
        "Nomor": 3,
        "Nama Perusahaan": "PT Modal Rakyat",
        "Nama Sistem Elektronik": "ModalRakyat",
        "Surat Tanda Berizin/Terdaftar": "S-77/NB.213/2019",
        "Tanggal Berizin/Terdaftar": "bad date",
        "Jenis Usaha": "Pinjaman Online",
        "Alamat Website": "modalrakyat.id",
    },
    {
        "Nama Perusahaan": "PT Invoice Nusantara",
        "Nama Sistem Elektronik": "InvoiceKu",
        "Tanggal Berizin/Terdaftar": "31, Januari, 2021",
        "Jenis Usaha": "Equity Crowdfunding",
        "Alamat Website": "invoiceku.com",
        "Keterangan": "terdaftar",
    },
]


@pytest.fixture
def raw_records():
    return [dict(r) for r in RAW_RECORDS]


@pytest.fixture
def store(raw_records):
    return RecordStore.load(raw_records, source="test")


@pytest.fixture
def data_file(tmp_path, raw_records):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_records), encoding="utf-8")
    return path


@pytest.fixture
def client(store):
    """TestClient without lifespan; the store is injected directly."""
    previous = dependencies._store
    dependencies.set_store(store)
    yield TestClient(app)
    dependencies.set_store(previous)
