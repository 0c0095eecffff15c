"""Runtime settings, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from smartfield.catalog.loader import DEFAULT_CATALOG_PATH


@dataclass
class Settings:
    """smartfield settings.

    Resolution order for each value: environment variable, then default.
    - SMARTFIELD_CATALOG_PATH: directory of field definition YAML files
    - SMARTFIELD_AUTOFILL_MIN_CHANGE: default autofill change threshold
    - SMARTFIELD_LOG_LEVEL: logging level name for the CLI
    """

    catalog_path: Path = DEFAULT_CATALOG_PATH
    autofill_min_change: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        catalog_path = os.environ.get("SMARTFIELD_CATALOG_PATH")
        min_change = os.environ.get("SMARTFIELD_AUTOFILL_MIN_CHANGE")

        if min_change is not None and not min_change.isdigit():
            raise ValueError(
                f"SMARTFIELD_AUTOFILL_MIN_CHANGE must be a non-negative integer, got '{min_change}'"
            )

        return cls(
            catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
            autofill_min_change=int(min_change) if min_change is not None else None,
            log_level=os.environ.get("SMARTFIELD_LOG_LEVEL", "WARNING").upper(),
        )

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )
