from datetime import date
from pathlib import Path

import pytest
import yaml

from pension_roster.config.loaders import ConfigLoadError, load_report_config, parse_report_config

pytestmark = pytest.mark.config


def test_defaults_without_file():
    cfg = load_report_config(None)
    assert cfg.reference_date is None
    assert cfg.census_path is None
    assert cfg.enrollment.min_service_years == 3
    assert cfg.output.indent == 2
    assert cfg.output.output_dir is None
    assert cfg.logging.log_dir is None


def test_load_full_file(tmp_path):
    f = tmp_path / "roster.yaml"
    f.write_text(
        yaml.safe_dump(
            {
                "reference_date": date(2025, 1, 17),
                "census_path": "data/roster.csv",
                "enrollment": {"min_service_years": 2},
                "output": {"indent": 4, "output_dir": "out"},
                "logging": {"log_dir": "logs", "debug": True},
            }
        )
    )
    cfg = load_report_config(f)
    assert cfg.reference_date == date(2025, 1, 17)
    assert cfg.resolve_reference_date() == date(2025, 1, 17)
    assert cfg.census_path == Path("data/roster.csv")
    assert cfg.enrollment.min_service_years == 2
    assert cfg.output.indent == 4
    assert cfg.output.output_dir == Path("out")
    assert cfg.logging.debug is True


def test_reference_date_as_string():
    cfg = parse_report_config({"reference_date": "2025-11-05"})
    assert cfg.reference_date == date(2025, 11, 5)


def test_unset_reference_date_resolves_to_today():
    assert parse_report_config({}).resolve_reference_date() == date.today()


def test_empty_file_gives_defaults(tmp_path):
    f = tmp_path / "empty.yaml"
    f.write_text("")
    assert load_report_config(f).enrollment.min_service_years == 3


@pytest.mark.parametrize(
    "data",
    [
        {"unknown_key": 1},
        {"enrollment": {"min_service_years": -1}},
        {"output": {"indent": "wide"}},
        {"reference_date": "not-a-date"},
    ],
)
def test_invalid_config_rejected(data):
    with pytest.raises(ConfigLoadError):
        parse_report_config(data)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError, match="not found"):
        load_report_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path):
    f = tmp_path / "list.yaml"
    f.write_text("- a\n- b\n")
    with pytest.raises(ConfigLoadError):
        load_report_config(f)


def test_malformed_yaml(tmp_path):
    f = tmp_path / "bad.yaml"
    f.write_text("a: [unclosed\n")
    with pytest.raises(ConfigLoadError):
        load_report_config(f)
