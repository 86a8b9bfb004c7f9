from __future__ import annotations
import logging
from typing import List, Optional

import pandas as pd

from bombo.core.errors import EmptyParticipantPool, SourceUnavailable, UsageError

logger = logging.getLogger(__name__)


def load_participants(path: str, encoding: str = "utf-8") -> List[str]:
    """Read one participant per line from a text file.

    Trailing ``\\n``/``\\r`` are removed (Unix and Windows endings), lines that
    end up empty are skipped and the original order is kept. Any other
    whitespace is part of the name.
    """
    parts: List[str] = []
    try:
        # split on \n only (a lone \r stays in the name); endings are stripped below
        with open(path, encoding=encoding, newline="\n") as f:
            for line in f:
                name = line.rstrip("\r\n")
                if not name:
                    continue
                parts.append(name)
    except UnicodeDecodeError as e:
        raise SourceUnavailable(path, f"not valid {encoding}: {e.reason}") from e
    except OSError as e:
        raise SourceUnavailable(path) from e

    logger.debug(f"Loaded {len(parts)} participants from {path}")
    return parts


def load_participants_from_csv(path: str, column: str, encoding: str = "utf-8", sep: str = ",") -> List[str]:
    """Read participants from one column of a CSV file.

    Cells are stripped, empty cells are dropped and row order is kept.
    """
    try:
        df = pd.read_csv(path, sep=sep, encoding=encoding, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise SourceUnavailable(path, f"not valid CSV: {e}") from e
    except UnicodeDecodeError as e:
        raise SourceUnavailable(path, f"not valid {encoding}: {e.reason}") from e
    except OSError as e:
        raise SourceUnavailable(path) from e

    # normalize headers the same way for lookup
    columns = {str(c).strip().lower(): c for c in df.columns}
    key = column.strip().lower()
    if key not in columns:
        available = ", ".join(str(c) for c in df.columns) or "(none)"
        raise UsageError(f"Error: Column '{column}' not found in '{path}'. Available columns: {available}")

    values = df[columns[key]].astype(str).str.strip()
    parts = [v for v in values.tolist() if v]

    logger.debug(f"Loaded {len(parts)} participants from column '{column}' of {path}")
    return parts


def read_pool(path: str, column: Optional[str] = None, encoding: str = "utf-8", sep: str = ",") -> List[str]:
    """Load the participant pool and refuse an empty one."""
    if column:
        parts = load_participants_from_csv(path, column, encoding=encoding, sep=sep)
    else:
        parts = load_participants(path, encoding=encoding)

    if not parts:
        raise EmptyParticipantPool(path)
    return parts
