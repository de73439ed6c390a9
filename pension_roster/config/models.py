# pension_roster/config/models.py
"""
Pydantic models for validating the structure and types of the report
configuration loaded from YAML files (e.g., roster.yaml).
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EnrollmentRules(BaseModel):
    min_service_years: int = Field(
        3, ge=0, description="Years of service after which a non-enrolled employee is overdue"
    )


class OutputConfig(BaseModel):
    indent: int = Field(2, ge=0, description="JSON indentation for rendered reports")
    output_dir: Optional[Path] = Field(
        None, description="Directory to write report files to; stdout only when unset"
    )


class LoggingConfig(BaseModel):
    log_dir: Optional[Path] = Field(
        None, description="Directory for rotating log files; console logging only when unset"
    )
    debug: bool = False


class ReportConfig(BaseModel):
    """Top-level configuration for a roster report run."""

    reference_date: Optional[date] = Field(
        None, description="As-of date for quarter and tenure checks; today when unset"
    )
    census_path: Optional[Path] = Field(
        None, description="Roster file (.json or .csv); built-in sample roster when unset"
    )
    enrollment: EnrollmentRules = Field(default_factory=EnrollmentRules)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def resolve_reference_date(self) -> date:
        if self.reference_date is not None:
            return self.reference_date
        today = date.today()
        logger.debug(f"No reference_date configured; using today ({today})")
        return today
