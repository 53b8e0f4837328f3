# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: puts src/ on sys.path so the tests run without installing.

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))
