from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


@dataclass(frozen=True)
class CatalogConfig:
    catalog_path: Path = Path(os.getenv("RECIPE_CATALOG_PATH", str(_DEFAULT_CATALOG_PATH)))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
