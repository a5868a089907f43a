from .models import MovieRecord
from .reader import iter_records, parse_line, read_records

__all__ = ["MovieRecord", "iter_records", "parse_line", "read_records"]
