from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

from .analysis import GeneticAnalysisError, analyze_genetic_csv


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) < 2 or "--help" in argv:
        print("Usage: python -m dietbuddy.services.genetics <path-to.csv>")
        return 0

    path = Path(argv[1])
    if not path.exists():
        print(f"File not found: {path}")
        return 2

    try:
        result = analyze_genetic_csv(path.read_bytes(), path.name)
    except GeneticAnalysisError as e:
        print(f"Error: {e}")
        return 2

    print(json.dumps(result.model_dump(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
