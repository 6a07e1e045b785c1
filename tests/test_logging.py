"""
Tests for logging setup and the real console output of the demo
"""
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from design_patterns.utils.logging import CONSOLE_FORMAT, VERBOSE_FORMAT, setup_logging

from .test_main import ADAPTER_LINES, FACTORY_LINES, ITERATOR_LINES

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def configure_logging():
    """Run setup_logging as if the root logger had no handlers yet"""
    root = logging.getLogger()
    saved_level = root.level
    added = []

    def configure(**kwargs):
        existing = root.handlers[:]
        root.handlers = []
        try:
            setup_logging(**kwargs)
        finally:
            added.extend(root.handlers)
            root.handlers = existing + root.handlers
        return added

    yield configure
    for handler in added:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(saved_level)


class TestSetupLogging:
    """Test setup_logging against a root logger without handlers"""

    def test_console_format_is_bare_message(self, configure_logging, capsys):
        """Test that console output is only the message text"""
        configure_logging()
        logging.getLogger("design_patterns.test").info("Baking Margherita Pizza")

        assert capsys.readouterr().out == "Baking Margherita Pizza\n"
        assert logging.getLogger().level == logging.INFO

    def test_level_filters_debug(self, configure_logging, capsys):
        """Test that debug diagnostics stay out of INFO output"""
        configure_logging(level=logging.INFO)
        logging.getLogger("design_patterns.test").debug("Factory info: {}")

        assert capsys.readouterr().out == ""

    def test_verbose_format(self, configure_logging, capsys):
        """Test that the verbose format carries logger name and level"""
        configure_logging(fmt=VERBOSE_FORMAT)
        logging.getLogger("design_patterns.test").info("Boxing Pepperoni Pizza")

        out = capsys.readouterr().out
        assert " - design_patterns.test - INFO - Boxing Pepperoni Pizza" in out

    def test_log_file(self, configure_logging, capsys, tmp_path):
        """Test that a log file receives the same lines as the console"""
        log_file = tmp_path / "demo.log"
        handlers = configure_logging(log_file=str(log_file), fmt=CONSOLE_FORMAT)
        logging.getLogger("design_patterns.test").info("Paid $100 via PayPal")
        for handler in handlers:
            handler.flush()

        assert capsys.readouterr().out == "Paid $100 via PayPal\n"
        assert log_file.read_text() == "Paid $100 via PayPal\n"


class TestConsoleOutput:
    """Test the demo's stdout as a separate process"""

    def run_module(self, *args):
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
        return subprocess.run(
            [sys.executable, "-m", "design_patterns", *args],
            cwd=str(PROJECT_ROOT),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            universal_newlines=True,
            timeout=60,
        )

    def test_default_run_prints_exact_lines(self):
        """Test that python -m design_patterns prints exactly the demo lines"""
        result = self.run_module()

        assert result.returncode == 0
        assert result.stdout.splitlines() == FACTORY_LINES + ADAPTER_LINES + ITERATOR_LINES
        assert result.stderr == ""

    def test_single_demo_run(self):
        """Test that --demo limits stdout to the selected demo"""
        result = self.run_module("--demo", "adapter")

        assert result.returncode == 0
        assert result.stdout.splitlines() == ADAPTER_LINES

    def test_unknown_demo_exit_code(self):
        """Test that an unknown demo exits with a usage error"""
        result = self.run_module("--demo", "observer")

        assert result.returncode == 2
        assert result.stdout == ""
        assert "invalid choice" in result.stderr
