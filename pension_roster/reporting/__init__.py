from .ranking import rank_by_salary
from .report import RosterReport, build_report, format_report

__all__ = ["RosterReport", "build_report", "format_report", "rank_by_salary"]
