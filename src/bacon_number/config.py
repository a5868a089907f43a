import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_REFERENCE_ACTOR = "Bacon, Kevin"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaconConfig(BaseModel):
    """Configuration for loading the dataset and answering queries."""

    # Dataset settings
    data_path: Optional[str] = Field(None, description="Path to the slash-delimited movie cast file")
    delimiter: str = Field("/", min_length=1, description="Token separator within a dataset line")
    encoding: str = Field("utf-8", description="Text encoding of the dataset file")

    # Query settings
    reference_actor: str = Field(DEFAULT_REFERENCE_ACTOR, min_length=1, description="Target actor of Bacon-number queries")
    strict_keys: bool = Field(True, description="Compare names, not only their hashes, when searching the indexes")

    # Logging settings
    log_level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    use_rich_logs: bool = Field(True, description="Use Rich's colored log output")

    @classmethod
    def from_env(cls) -> "BaconConfig":
        """Create config from environment variables (and a .env file, if present)."""
        load_dotenv()
        return cls(
            data_path=os.getenv("BACON_DATA_PATH") or None,
            delimiter=os.getenv("BACON_DELIMITER", "/"),
            encoding=os.getenv("BACON_ENCODING", "utf-8"),
            reference_actor=os.getenv("BACON_REFERENCE_ACTOR", DEFAULT_REFERENCE_ACTOR),
            strict_keys=_env_flag("BACON_STRICT_KEYS", "true"),
            log_level=os.getenv("BACON_LOG_LEVEL", "INFO"),
            use_rich_logs=_env_flag("BACON_RICH_LOGS", "true"),
        )
