from enum import StrEnum

from lsystems.generation.errors import UnknownFamilyError


class Family(StrEnum):
    ORIGINAL = "original"
    BARNSLEY = "barnsley"
    FRACTAL_PLANT = "fractal_plant"
    LICHTENBERG = "lichtenberg"
    CRACKED_EARTH = "cracked_earth"
    PORPITA = "porpita"

    @property
    def display_name(self) -> str:
        return _TITLES[self]

    @classmethod
    def parse(cls, tag: "str | Family") -> "Family":
        """Resolve a value, enum name or one-letter selector code to a family.

        Anything else is a caller error and raises :class:`UnknownFamilyError`.
        """
        if isinstance(tag, Family):
            return tag
        if not isinstance(tag, str):
            raise UnknownFamilyError(f"Unknown L-system family {tag!r}")

        normalized = tag.strip()
        if normalized in _SELECTOR_CODES:
            return _SELECTOR_CODES[normalized]
        normalized = normalized.lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(normalized)
        except ValueError:
            pass
        try:
            return cls[normalized.upper()]
        except KeyError as exc:
            raise UnknownFamilyError(f"Unknown L-system family {tag!r}") from exc


_TITLES: dict[Family, str] = {
    Family.ORIGINAL: "Original Lindenmayer",
    Family.BARNSLEY: "Barnsley Fern-ish",
    Family.FRACTAL_PLANT: "Fractal Plant",
    Family.LICHTENBERG: "Lichtenberg Figure",
    Family.CRACKED_EARTH: "Cracked Earth",
    Family.PORPITA: "Porpita porpita",
}

# One-letter codes used by the toolbar selector.
_SELECTOR_CODES: dict[str, Family] = {
    "A": Family.ORIGINAL,
    "B": Family.BARNSLEY,
    "F": Family.FRACTAL_PLANT,
    "L": Family.LICHTENBERG,
    "C": Family.CRACKED_EARTH,
    "P": Family.PORPITA,
}
