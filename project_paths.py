from pathlib import Path

STATEMENTS_SUBDIR = "statements"
OUTPUT_SUBDIR = "output"
DEFAULT_CSV_NAME = "transactions.csv"


def statements_dir(finances_dir: Path, source: str) -> Path:
    return Path(finances_dir) / STATEMENTS_SUBDIR / source


def output_dir(finances_dir: Path) -> Path:
    return Path(finances_dir) / OUTPUT_SUBDIR
