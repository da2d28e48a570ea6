"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

FLAGS_IN_QUIZ: int = 10
CHOICES_PER_ROUND: int = 4
NEXT_FLAG_DELAY_MS: int = 2000

DEFAULT_CATALOG_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "countries.json"
