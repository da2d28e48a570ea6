"""Loading the bundled list of countries and their flag images.

File format (JSON):

    {
      "countries": [
        {"name": "France", "file_name": "flags/france.svg"},
        {"name": "Italy", "file_name": "flags/italy.svg"}
      ]
    }

``file_name`` is resolved relative to the directory holding the listing;
``fileName`` is accepted as an alias. Names must be unique because every other
part of the quiz identifies a country by its name.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from flag_quiz.core.errors import LoadError
from flag_quiz.core.models import Country

logger = logging.getLogger(__name__)


class _CountryRecord(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1)
    file_name: str = Field(min_length=1, validation_alias=AliasChoices("file_name", "fileName"))


class _CatalogDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    countries: list[_CountryRecord]


class CountryCatalog:
    """Read-only collection of every country the quiz can draw from."""

    def __init__(self, countries: list[Country], asset_root: Path) -> None:
        if not countries:
            raise LoadError("Country catalog is empty.")
        self._countries = tuple(countries)
        self._asset_root = asset_root

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def asset_root(self) -> Path:
        return self._asset_root

    def resolve_asset_path(self, flag_asset_ref: str) -> Path:
        """Return the on-disk location of a flag image reference."""
        return self._asset_root / flag_asset_ref

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __contains__(self, country: object) -> bool:
        return country in self._countries


def load_catalog(file_path: Path) -> CountryCatalog:
    """Read and validate a country listing, raising ``LoadError`` on any problem."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(f"Could not read country listing {file_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LoadError(f"Country listing {file_path} is not valid UTF-8: {exc}") from exc

    try:
        document = _CatalogDocument.model_validate_json(text)
    except ValidationError as exc:
        raise LoadError(f"Country listing {file_path} is malformed: {exc}") from exc

    countries: list[Country] = []
    seen: set[str] = set()
    for record in document.countries:
        if record.name in seen:
            raise LoadError(f"Country '{record.name}' is listed more than once.")
        seen.add(record.name)
        countries.append(Country(name=record.name, flag_asset_ref=record.file_name))

    if not countries:
        raise LoadError(f"Country listing {file_path} does not contain any countries.")

    logger.info("Loaded %d countries from %s", len(countries), file_path)
    return CountryCatalog(countries, asset_root=file_path.resolve().parent)
