"""
Environment variable helpers

Reads ``.env`` files and the process environment. Only the configuration
loader uses this module; pipeline components receive a ``SyncConfig`` instead.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


class EnvManager:
    """Merged view over a ``.env`` file and the process environment."""

    def __init__(
        self,
        env_file_path: Optional[str] = ".env",
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.env_file_path = Path(env_file_path) if env_file_path else None
        self.environ = os.environ if environ is None else environ
        self.env_data: Dict[str, str] = {}
        self.load_env_file()

    def load_env_file(self):
        """Load ``KEY=value`` lines from the env file, if it exists."""
        if self.env_file_path is None:
            return
        if not self.env_file_path.exists():
            logger.debug(f"No env file at {self.env_file_path}")
            return

        with open(self.env_file_path, "r", encoding="utf-8") as f:
            for raw_line in f:
                entry = self._parse_line(raw_line)
                if entry is not None:
                    self.env_data[entry[0]] = entry[1]

        logger.info(
            f"Loaded {len(self.env_data)} variable(s) from {self.env_file_path}"
        )

    @staticmethod
    def _parse_line(raw_line: str) -> Optional[Tuple[str, str]]:
        """``(key, value)`` for an assignment line; comments and blanks give None."""
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            return None

        key, _, value = line.partition("=")
        value = value.strip()
        for quote in ('"', "'"):
            if len(value) >= 2 and value[0] == quote and value[-1] == quote:
                value = value[1:-1]
                break
        return key.strip(), value

    def get_env_var(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Process environment first, then the env file."""
        value = self.environ.get(key)
        if value is not None:
            return value

        return self.env_data.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get_env_var(key)
        if value is None or value == "":
            return default
        return value.strip().lower() in TRUE_VALUES

    def get_list(self, key: str) -> Optional[List[str]]:
        """Comma separated value as a list; ``None`` when unset or blank."""
        value = self.get_env_var(key)
        if not value:
            return None
        items = [item.strip() for item in value.split(",") if item.strip()]
        return items or None
