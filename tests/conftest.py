"""Shared pytest configuration for the OrderedTree test suite."""

import sys
from pathlib import Path

from hypothesis import settings

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

settings.register_profile("thorough", settings(max_examples=1000, deadline=None))
