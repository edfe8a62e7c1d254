"""Environment configuration.

Settings are read from the process environment after ``load_dotenv()`` has
merged a local ``.env`` file into it:

    PFQ_LANG_CONSTRUCTORS   comma-separated constructor names
                            (default: Maybe,Action)
    PFQ_LANG_LOG_LEVEL      logging level for the CLI (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .grammar import DEFAULT_CONSTRUCTORS
from .result import Err, Ok, Result
from .view import IDENT_CHARS

CONSTRUCTORS_VAR = "PFQ_LANG_CONSTRUCTORS"
LOG_LEVEL_VAR = "PFQ_LANG_LOG_LEVEL"


@dataclass(frozen=True)
class LangConfig:
    constructors: frozenset[str] = DEFAULT_CONSTRUCTORS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Result[LangConfig, Exception]:
        """Build the configuration from the environment (and ``.env``)."""
        load_dotenv()

        constructors = DEFAULT_CONSTRUCTORS
        match os.getenv(CONSTRUCTORS_VAR):
            case str(raw) if raw.strip():
                names = [n.strip() for n in raw.split(",") if n.strip()]
                bad = [n for n in names if not all(c in IDENT_CHARS for c in n)]
                if bad:
                    return Err(
                        ValueError(f"{CONSTRUCTORS_VAR}: invalid constructor names {bad}")
                    )
                constructors = frozenset(names)
            case _:
                pass

        level = (os.getenv(LOG_LEVEL_VAR) or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return Err(ValueError(f"{LOG_LEVEL_VAR}: unknown logging level {level!r}"))

        return Ok(cls(constructors=constructors, log_level=level))
