import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any


class ArgumentParser(argparse.ArgumentParser):
    """argparse with exit status 1 (not 2) on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(name)s %(message)s",
    )


def write_json(path: str | Path, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def input_missing(path: Path) -> bool:
    if not path.is_file():
        print(f"Input file not found: {path}", file=sys.stderr)
        return True
    return False
