"""
Test runner for Knowledge Analysis BDD scenarios.

This file is the entry point for pytest-bdd to discover and run
the Gherkin scenarios under features/.

Run with:
    pytest tests/test_scenarios.py -v
"""

from pytest_bdd import scenarios

# Import step definitions - this registers all steps
from step_defs.analysis_steps import *

scenarios(
    "features/relation_analysis.feature",
    "features/learning_path.feature",
)
