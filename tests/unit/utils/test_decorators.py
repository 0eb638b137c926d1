#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the dependency-check decorator and debug timer."""

import logging

import pytest

from md2blocks.exceptions import DependencyError, Md2BlocksError
from md2blocks.utils.decorators import debug_timer, requires_dependencies
from md2blocks.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Test requires_dependencies."""

    def test_installed_dependency_runs_function(self):
        @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        def parse(value):
            return value * 2

        assert parse(21) == 42

    def test_missing_dependency_raises(self):
        @requires_dependencies("widgets", [("no-such-dist", "no_such_module_md2blocks", "")])
        def parse():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            parse()

        error = exc_info.value
        assert error.converter_name == "widgets"
        assert error.missing_packages == [("no-such-dist", "")]
        assert "widgets requires the following packages: 'no-such-dist'" in str(error)
        assert "pip install --upgrade no-such-dist" in str(error)
        assert isinstance(error.original_import_error, ImportError)
        assert isinstance(error, Md2BlocksError)

    def test_version_mismatch_raises(self):
        @requires_dependencies("markdown", [("mistune", "mistune", ">=999.0")])
        def parse():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            parse()

        assert exc_info.value.version_mismatches[0][:2] == ("mistune", ">=999.0")
        assert "version mismatches" in str(exc_info.value)

    def test_preserves_function_metadata(self):
        @requires_dependencies("markdown", [])
        def parse():
            """Parse things."""

        assert parse.__name__ == "parse"
        assert parse.__doc__ == "Parse things."


@pytest.mark.unit
class TestPackageVersions:
    """Test installed-version lookups."""

    def test_installed_package(self):
        assert get_package_version("mistune") is not None

    def test_missing_package(self):
        assert get_package_version("no-such-dist-md2blocks") is None
        assert check_version_requirement("no-such-dist-md2blocks", ">=1") == (False, None)

    def test_requirement_met(self):
        ok, installed = check_version_requirement("beautifulsoup4", ">=4.0")
        assert ok is True
        assert installed


@pytest.mark.unit
class TestDebugTimer:
    """Test debug_timer logging."""

    def test_logs_at_debug(self, caplog):
        logger = logging.getLogger("md2blocks.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="md2blocks.tests.timer"):
            with debug_timer(logger, "Rendering (blocks)"):
                pass
        assert any("Rendering (blocks) completed in" in record.message for record in caplog.records)

    def test_silent_above_debug(self, caplog):
        logger = logging.getLogger("md2blocks.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="md2blocks.tests.timer_quiet"):
            with debug_timer(logger, "Parsing (markdown)"):
                pass
        assert not caplog.records
