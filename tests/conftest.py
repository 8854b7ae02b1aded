# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Ensure the repo root is in sys.path for imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def clean_resume():
    # No pattern in any rule set matches this text
    return """
    Alex Morgan
    Seattle, WA | alex.morgan@example.com

    Experience
    - Led migration of billing services to a new platform
    - Managed a group of four engineers
    - Reduced build times from 40 to 12 minutes
    """


@pytest.fixture
def flagged_resume():
    return """
    Jamie Rivera
    Date of Birth: March 3, 1990
    Home (555) 123-4567, Cell 555.987.6543
    SSN: 123-45-6789

    - Native English speaker with a recent graduate mindset
    - Single-handedly boosted sales by 500%
    - Was responsible for onboarding
    """
