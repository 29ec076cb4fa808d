import json
import logging
from collections.abc import Iterator, Mapping
from importlib import resources
from typing import Optional

logger = logging.getLogger(__name__)

RTL_LOCALES = frozenset({"ar"})


class Localizer(Mapping[str, Mapping[str, str]]):
    """Locale code -> translation table.

    Lookups fall back from a regional code to its base language, then to
    the default locale, then to the key itself.
    """

    def __init__(
        self, tables: Mapping[str, Mapping[str, str]], default_locale: str = "en"
    ) -> None:
        if default_locale not in tables:
            raise ValueError(f"No translation table for default locale {default_locale!r}")
        self._tables = {code.lower(): dict(table) for code, table in tables.items()}
        self.default_locale = default_locale.lower()

    @classmethod
    def from_package(cls, default_locale: str = "en") -> "Localizer":
        tables: dict[str, dict[str, str]] = {}
        for entry in resources.files("link_preview").joinpath("locales").iterdir():
            if not entry.name.endswith(".json"):
                continue
            tables[entry.name[: -len(".json")]] = json.loads(
                entry.read_text(encoding="utf-8")
            )
        logger.debug("Loaded locales: %s", ", ".join(sorted(tables)))
        return cls(tables, default_locale)

    def __getitem__(self, locale: str) -> Mapping[str, str]:
        return self._tables[locale.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    @property
    def locales(self) -> list[str]:
        return sorted(self._tables)

    def resolve(self, locale: Optional[str]) -> Optional[str]:
        """Return the supported code for ``locale``, or None if unsupported."""
        if not locale:
            return self.default_locale
        code = locale.replace("_", "-").lower()
        if code in self._tables:
            return code
        base = code.split("-", 1)[0]
        return base if base in self._tables else None

    def translate(self, key: str, locale: Optional[str] = None) -> str:
        code = self.resolve(locale) or self.default_locale
        for candidate in (code, self.default_locale):
            value = self._tables[candidate].get(key)
            if value:
                return value
        return key

    def strings(self, locale: Optional[str] = None) -> dict[str, str]:
        """Full table for ``locale`` with default-locale entries filled in."""
        code = self.resolve(locale) or self.default_locale
        merged = dict(self._tables[self.default_locale])
        merged.update(self._tables[code])
        return merged

    def is_rtl(self, locale: Optional[str]) -> bool:
        return (self.resolve(locale) or self.default_locale) in RTL_LOCALES
