from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    # Keep `import stripe_listener` and `import fakes` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    unit_dir = repo_root / "tests" / "unit"
    for path in (str(repo_root), str(unit_dir)):
        if path not in sys.path:
            sys.path.insert(0, path)
