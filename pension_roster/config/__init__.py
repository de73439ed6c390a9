from .loaders import ConfigLoadError, load_report_config, load_yaml_config, parse_report_config
from .models import EnrollmentRules, LoggingConfig, OutputConfig, ReportConfig

__all__ = [
    "ConfigLoadError",
    "EnrollmentRules",
    "LoggingConfig",
    "OutputConfig",
    "ReportConfig",
    "load_report_config",
    "load_yaml_config",
    "parse_report_config",
]
