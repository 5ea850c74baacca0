"""Entry point functions for resx-trans command line tools."""

import os
import sys

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)

description = "Translates a resource file into one or more languages, keeping existing translations"

def resx_trans():
    """Entry point for resx-trans command."""
    from scripts.trans_common import TranslateResources

    try:
        results = TranslateResources(description, "resx-trans")

    except Exception as e:
        print("Error:", e)
        raise

    if any(not result.succeeded for result in results):
        sys.exit(1)
