"""Guardrails to keep kernel free of side effects and OS-specific dependencies.

Filesystem access belongs in jsworkspace._internal; kernel modules only
validate and transform data that has already been read.
"""

import re
from pathlib import Path


FORBIDDEN_PATTERNS = {
    "argparse": re.compile(r"\bargparse\b"),
    "pathlib.Path": re.compile(r"\bpathlib\.Path\b"),
    "open(": re.compile(r"(?<![A-Za-z0-9_])open\s*\("),
    "print(": re.compile(r"(?<![A-Za-z0-9_])print\s*\("),
    "os.path": re.compile(r"\bos\.path\b"),
    "os.name": re.compile(r"\bos\.name\b"),
    ".read_text(": re.compile(r"\.read_text\s*\("),
    ".iterdir(": re.compile(r"\.iterdir\s*\("),
    ".rglob(": re.compile(r"\.rglob\s*\("),
    ".is_file(": re.compile(r"\.is_file\s*\("),
    "_internal": re.compile(r"\b_internal\b"),
}


def test_kernel_has_no_forbidden_tokens():
    kernel_dir = Path(__file__).resolve().parents[1] / "src" / "jsworkspace" / "kernel"
    offenders = []

    for path in kernel_dir.glob("*.py"):
        contents = path.read_text(encoding="utf-8")
        for token, pattern in FORBIDDEN_PATTERNS.items():
            if pattern.search(contents):
                offenders.append(f"{path.name}: {token}")

    assert not offenders, "Forbidden kernel tokens found: " + ", ".join(offenders)
