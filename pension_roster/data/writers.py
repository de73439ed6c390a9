# pension_roster/data/writers.py
"""
Functions for rendering employees as JSON and writing report files.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List

from pension_roster.schema.models import Employee
from pension_roster.utils.columns import ALL_EMPLOYEES_FILE, UPCOMING_ENROLLEES_FILE

if TYPE_CHECKING:
    from pension_roster.reporting.report import RosterReport

logger = logging.getLogger(__name__)


class DataWriteError(Exception):
    """Custom exception for errors during data writing."""

    pass


def employees_to_records(employees: Iterable[Employee]) -> List[Dict[str, Any]]:
    """
    Serialize employees with their interchange field names.

    Dates become ISO strings and money becomes plain numbers. Absent optional
    fields, including a missing pension plan, are left out of the record.
    """
    return [
        emp.model_dump(mode="json", by_alias=True, exclude_none=True)
        for emp in employees
    ]


def render_json(employees: Iterable[Employee], indent: int = 2) -> str:
    return json.dumps(employees_to_records(employees), indent=indent)


def write_report(report: "RosterReport", output_dir: Path, indent: int = 2) -> Dict[str, Path]:
    """
    Writes both report sections to JSON files under ``output_dir``.

    Args:
        report: The built roster report.
        output_dir: Path object for the directory to save files.
        indent: JSON indentation.

    Returns:
        Mapping of section name to the file written.

    Raises:
        DataWriteError: If writing fails.
    """
    output_dir = Path(output_dir)
    targets = {
        "all_employees": (output_dir / ALL_EMPLOYEES_FILE, report.all_employees),
        "upcoming_enrollees": (output_dir / UPCOMING_ENROLLEES_FILE, report.upcoming_enrollees),
    }

    written: Dict[str, Path] = {}
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for section, (path, employees) in targets.items():
            path.write_text(render_json(employees, indent=indent) + "\n", encoding="utf-8")
            logger.info(f"Wrote {len(employees)} employees to {path}")
            written[section] = path
    except OSError as e:
        logger.error(f"Failed to write report files to {output_dir}: {e}")
        raise DataWriteError(f"Failed to write report files to {output_dir}") from e

    return written
