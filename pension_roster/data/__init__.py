from .readers import DataReadError, employees_from_records, read_roster
from .sample import load_sample_roster
from .writers import DataWriteError, employees_to_records, render_json, write_report

__all__ = [
    "DataReadError",
    "DataWriteError",
    "employees_from_records",
    "employees_to_records",
    "load_sample_roster",
    "read_roster",
    "render_json",
    "write_report",
]
