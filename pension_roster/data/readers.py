# pension_roster/data/readers.py
"""
Functions for reading employee rosters from JSON or CSV census files.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from pydantic import ValidationError

from pension_roster.schema.models import Employee
from pension_roster.utils.columns import (
    EMP_ID,
    EMP_PENSION_PLAN,
    PLAN_COLUMNS,
    PLAN_REFERENCE_NUMBER,
    REQUIRED_EMPLOYEE_COLUMNS,
)

logger = logging.getLogger(__name__)


class DataReadError(Exception):
    """Custom exception for errors during data reading."""
    pass


def employees_from_records(records: Iterable[Dict[str, Any]], source: str = "<records>") -> List[Employee]:
    """
    Build Employee models from interchange records.

    The first malformed record aborts the whole load.

    Raises:
        DataReadError: If any record is missing a required field or holds an invalid value.
    """
    employees: List[Employee] = []
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            raise DataReadError(f"Record {idx} in {source} is not an object: {record!r}")
        try:
            employees.append(Employee.model_validate(record))
        except ValidationError as e:
            ident = record.get(EMP_ID, idx)
            logger.error(f"Invalid employee record {ident} in {source}: {e}")
            raise DataReadError(f"Invalid employee record {ident} in {source}: {e}") from e

    counts = Counter(emp.id for emp in employees)
    duplicates = sorted(emp_id for emp_id, n in counts.items() if n > 1)
    if duplicates:
        logger.warning(f"Duplicate employee ids in {source}: {duplicates}")

    logger.info(f"Loaded {len(employees)} employees from {source}")
    return employees


def _read_json_records(file_path: Path) -> List[Dict[str, Any]]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON roster {file_path}: {e}")
        raise DataReadError(f"Error parsing JSON roster {file_path}") from e

    if isinstance(payload, dict) and "employees" in payload:
        payload = payload["employees"]
    if not isinstance(payload, list):
        raise DataReadError(
            f"JSON roster {file_path} must be a list of employees or an object with an 'employees' list"
        )
    return payload


def _clean_cell(value: Any) -> Optional[Any]:
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    return value or None


def _read_csv_records(file_path: Path) -> List[Dict[str, Any]]:
    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Error reading CSV roster {file_path}: {e}")
        raise DataReadError(f"Error reading CSV roster {file_path}") from e

    logger.debug(f"Columns loaded: {df.columns.tolist()}")
    missing = [c for c in REQUIRED_EMPLOYEE_COLUMNS if c not in df.columns]
    if missing:
        logger.error(f"CSV roster {file_path} is missing required columns: {missing}")
        raise DataReadError(f"CSV roster {file_path} is missing required columns: {missing}")

    records: List[Dict[str, Any]] = []
    for row in df.to_dict(orient="records"):
        record = {col: _clean_cell(row[col]) for col in REQUIRED_EMPLOYEE_COLUMNS}
        plan = {col: _clean_cell(row.get(col)) for col in PLAN_COLUMNS}
        # A blank plan reference means the employee holds no plan
        if plan[PLAN_REFERENCE_NUMBER] is not None:
            record[EMP_PENSION_PLAN] = plan
        records.append(record)
    return records


def read_roster(file_path: Path) -> List[Employee]:
    """
    Reads an employee roster from a JSON or CSV file.

    Args:
        file_path: Path object pointing to the roster file.

    Returns:
        The employees in file order.

    Raises:
        DataReadError: If the file cannot be found, read, or any record is malformed.
    """
    if not isinstance(file_path, Path):
        file_path = Path(file_path)

    logger.info(f"Attempting to read roster from: {file_path}")

    if not file_path.exists():
        logger.error(f"Roster file not found: {file_path}")
        raise DataReadError(f"Roster file not found: {file_path}")

    file_suffix = file_path.suffix.lower()
    if file_suffix == ".json":
        records = _read_json_records(file_path)
    elif file_suffix == ".csv":
        records = _read_csv_records(file_path)
    else:
        logger.error(f"Unsupported roster file format: {file_path}. Please use .json or .csv.")
        raise DataReadError(f"Unsupported roster file format: {file_path.suffix}")

    if not records:
        logger.warning(f"No employees in roster file: {file_path}")

    return employees_from_records(records, source=str(file_path))
