"""Verify hash-mode identifiers are identical across repeated processes."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]

DERIVE_ARGS = [
    "derive",
    "--base-iri",
    "https://example.com/ids/",
    "--shell",
    "Motor1",
    "--asset",
    "Motor1",
    "--submodel",
    "Motor1:Nameplate",
    "--submodel",
    "Motor1:TechnicalData",
    "--concept",
    "MaxRotationSpeed",
    "--json",
]


def _scheme_args() -> list[str]:
    scheme = os.getenv("AASIDGEN_SCHEME", "").strip()
    return ["--scheme", scheme] if scheme else []


def main() -> None:
    outputs: list[bytes] = []

    for hash_seed in ("0", "1", "random"):
        env = dict(os.environ)
        env["PYTHONHASHSEED"] = hash_seed
        env["PYTHONPATH"] = str(ROOT)
        result = subprocess.run(
            [sys.executable, "-m", "aasidgen.cli", *DERIVE_ARGS, *_scheme_args()],
            cwd=str(ROOT),
            env=env,
            capture_output=True,
            check=False,
        )
        if result.returncode != 0:
            raise RuntimeError(result.stderr.decode("utf-8", errors="replace") or result.stdout.decode("utf-8"))
        outputs.append(result.stdout)

    if not (outputs[0] == outputs[1] == outputs[2]):
        print("Determinism check failed: identifiers differ across runs.")
        raise SystemExit(1)

    print("Determinism check passed: identifiers identical across 3 runs.")


if __name__ == "__main__":
    main()
