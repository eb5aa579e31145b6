"""
Pytest configuration for textpager
"""

import pytest
import logging
import sys
from pathlib import Path

# Make the package importable without an installed copy
package_root = Path(__file__).parent.parent / "packages" / "textpager_core"
sys.path.insert(0, str(package_root))

from textpager.engine.geometry import PageGeometry  # noqa: E402


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Only show warnings and errors during tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def geometry():
    """Default A4 geometry with 20mm margins."""
    return PageGeometry()


@pytest.fixture
def small_geometry():
    """Small page fitting six body lines per page."""
    return PageGeometry(page_width_mm=100.0, page_height_mm=60.0, margin_mm=10.0)


@pytest.fixture
def assessment_text():
    """Typical risk assessment text as extracted from the rendered markdown."""
    return "\n".join([
        "### Executive Summary",
        "",
        "The agreement carries moderate overall risk. Two clauses need renegotiation "
        "before signature, and one indemnity provision should be capped.",
        "",
        "1. Liability",
        "- Liability is uncapped for indirect and consequential damages.",
        "- Carve-outs for gross negligence are missing.",
        "",
        "2. Termination",
        "• Either party may terminate on 30 days notice.",
        "* No termination fee applies.",
        "",
        "### Recommendations",
        "Negotiate a liability cap equal to twelve months of fees.",
    ])


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for output files."""
    return tmp_path
