"""Registry loading, date normalization, and in-memory search engine."""
from .dates import parse_indo_date
from .loader import load_raw_records, parse_registry
from .store import RecordStore
from .schemas import FilterSpec, MatchResult, Record
from .filters import match_records
