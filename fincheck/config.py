"""
Fintech Checker — Configuration: paths, field names, month table, messages.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with FINCHECK_DATA_DIR / FINCHECK_DATA_FILE env vars
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("FINCHECK_DATA_DIR", str(Path.cwd() / "data")))
DATA_FILE = Path(os.environ.get("FINCHECK_DATA_FILE", str(_data_dir / "data.json")))
EXPORTS_FOLDER = _data_dir / "exports"

# ---------------------------------------------------------------------------
# Registry field names (keys in data.json)
# ---------------------------------------------------------------------------
COMPANY_FIELD = "Nama Perusahaan"
SYSTEM_FIELD = "Nama Sistem Elektronik"
LICENSE_FIELD = "Surat Tanda Berizin/Terdaftar"
DATE_FIELD = "Tanggal Berizin/Terdaftar"
BUSINESS_TYPE_FIELD = "Jenis Usaha"
WEBSITE_FIELD = "Alamat Website"
ORDER_FIELD = "Nomor"

# Per-field filter name → record key
FILTER_FIELDS = {
    "company": COMPANY_FIELD,
    "system": SYSTEM_FIELD,
    "license": LICENSE_FIELD,
    "business_type": BUSINESS_TYPE_FIELD,
    "website": WEBSITE_FIELD,
}

# Fields searched by the free-text query (any one match is enough)
QUERY_FIELDS = [
    COMPANY_FIELD,
    SYSTEM_FIELD,
    WEBSITE_FIELD,
    LICENSE_FIELD,
    BUSINESS_TYPE_FIELD,
]

# Serialized names of the two derived attributes
ID_KEY = "__id"
ISO_DATE_KEY = "__isoDate"

# ---------------------------------------------------------------------------
# Indonesian month names → two-digit month
# ---------------------------------------------------------------------------
MONTHS_ID = {
    "januari": "01",
    "februari": "02",
    "maret": "03",
    "april": "04",
    "mei": "05",
    "juni": "06",
    "juli": "07",
    "agustus": "08",
    "september": "09",
    "oktober": "10",
    "november": "11",
    "desember": "12",
}

# ---------------------------------------------------------------------------
# Display columns (results table / Excel export), in order
# (key, col_type, label) — "No" falls back to the 1-based row number
# ---------------------------------------------------------------------------
DISPLAY_COLUMNS = [
    (ORDER_FIELD, "number", "No"),
    (COMPANY_FIELD, "text", "Nama Perusahaan"),
    (SYSTEM_FIELD, "text", "Nama Sistem Elektronik"),
    (LICENSE_FIELD, "text", "Surat Tanda"),
    (DATE_FIELD, "text", "Tanggal Terdaftar"),
    (BUSINESS_TYPE_FIELD, "text", "Jenis Usaha"),
    (WEBSITE_FIELD, "text", "Alamat Website"),
]

# ---------------------------------------------------------------------------
# Compliance verdicts
# ---------------------------------------------------------------------------
VERDICT_IDLE = "idle"
VERDICT_LISTED = "listed"
VERDICT_UNLISTED = "unlisted"

VERDICT_MESSAGES = {
    VERDICT_IDLE: "Use the search to find specific fintech registrations.",
    VERDICT_LISTED: "Found in the official registry.",
    VERDICT_UNLISTED: "Tidak ditemukan dalam daftar resmi — kemungkinan ILEGAL / UNLISTED",
}

UNLISTED_TIP = "Tips: cek kembali ejaan nama, sistem, website, surat, atau jenis usaha."
