"""
CSV loading for the sales engine repositories.

Each file is read with pandas as plain strings and every record goes
through its model's ``from_row``; type coercion lives in the models.
"""
from pathlib import Path
from typing import Any, Dict, List, Type, Union

import pandas as pd

from sales_engine.exceptions import DataLoadError
from sales_engine.observability import Timer, get_logger
from sales_engine.repositories import Repository

logger = get_logger(__name__)

PathLike = Union[str, Path]


def read_rows(path: PathLike) -> List[Dict[str, Any]]:
    """
    Read a CSV file into a list of row dicts with string values.

    Empty cells become empty strings, never NaN.

    Raises:
        DataLoadError: If the file is missing, unreadable, not UTF-8 or
                       not valid CSV
    """
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    except FileNotFoundError as e:
        raise DataLoadError("Source file not found", str(path), path=str(path)) from e
    except OSError as e:
        raise DataLoadError("Source file cannot be read", str(e), path=str(path)) from e
    except UnicodeDecodeError as e:
        raise DataLoadError("Source file is not UTF-8", str(e), path=str(path)) from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadError("Source file is not valid CSV", str(e), path=str(path)) from e

    return frame.to_dict("records")


def load_repository(repository_cls: Type[Repository], path: PathLike) -> Repository:
    """
    Build a repository from a CSV file.

    Args:
        repository_cls: Repository class; its ``model`` parses each row
        path: CSV file with a header row

    Returns:
        Populated repository, rows in file order

    Raises:
        DataLoadError: If the file cannot be read or a row cannot be parsed
    """
    model = repository_cls.model

    with Timer(f"load_{model.__name__.lower()}", logger) as timer:
        rows = read_rows(path)
        records = []
        for number, row in enumerate(rows, start=1):
            try:
                records.append(model.from_row(row))
            except (KeyError, TypeError, ValueError) as e:
                raise DataLoadError(
                    f"Invalid {model.__name__} row {number}",
                    f"{type(e).__name__}: {e}",
                    path=str(path),
                    row=number,
                ) from e

    logger.info(
        f"Loaded {len(records)} {model.__name__} rows",
        extra={"path": str(path), "duration_ms": round(timer.elapsed_ms, 2)}
    )
    return repository_cls(records)
