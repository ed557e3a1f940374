import os
import sys

# Automatically add the project's src directory to sys.path
# This allows tests to import 'mcoptions' without an editable install
# (e.g., python -m pytest tests)

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.abspath(os.path.join(TESTS_DIR, "..", "src"))

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
