"""
Reader for the slash-delimited movie cast dataset.

Each line holds one movie followed by its cast:

    Apollo 13 (1995)/Hanks, Tom/Bacon, Kevin/Paxton, Bill
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from bacon_number.exceptions import DatasetNotFoundException
from .models import MovieRecord

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "/"


def parse_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> Optional[MovieRecord]:
    """Tokenize one dataset line into a MovieRecord.

    Empty tokens are dropped, so repeated, leading or trailing delimiters
    produce no blank cast names.

    Args:
      line: The raw line, with or without its line terminator.
      delimiter: The token separator.

    Returns:
      The record, or None if the line holds no tokens.

    Examples:
      "Diner/Bacon, Kevin/"   =>   MovieRecord(name="Diner", cast=["Bacon, Kevin"])
      ""                      =>   None
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string.")
    tokens = [token for token in line.rstrip("\r\n").split(delimiter) if token]
    if not tokens:
        return None
    return MovieRecord(name=tokens[0], cast=tokens[1:])


def iter_records(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> Iterator[MovieRecord]:
    """Yield a MovieRecord for every non-blank line of the dataset file."""
    dataset_path = Path(path)
    if not dataset_path.is_file():
        raise DatasetNotFoundException(f"Dataset file not found at {dataset_path.resolve()}")

    with dataset_path.open("r", encoding=encoding, errors="replace") as f:
        for line_no, line in enumerate(f, start=1):
            record = parse_line(line, delimiter)
            if record is None:
                logger.debug(f"{dataset_path.name}:{line_no}: blank line skipped")
                continue
            yield record


def read_records(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = "utf-8",
) -> List[MovieRecord]:
    """Read the whole dataset file into memory."""
    records = list(iter_records(path, delimiter=delimiter, encoding=encoding))
    logger.info(f"Read {len(records)} movie records from {path}")
    return records
