"""Fixed English-concept to Tamil-lemma suggestions."""

from collections.abc import Mapping

DEFAULT_CONCEPTS: dict[str, tuple[str, ...]] = {
    "virtue": ("அறம்",),
    "wealth": ("பொருள்", "செல்வம்"),
    "love": ("அன்பு", "காதல்", "இன்பம்"),
    "mother": ("அம்மா", "தாய்"),
    "father": ("அப்பா", "தந்தை"),
    "water": ("நீர்", "தண்ணீர்"),
    "fire": ("தீ", "நெருப்பு"),
    "earth": ("நிலம்", "பூமி"),
    "sky": ("வானம்",),
    "sea": ("கடல்",),
    "mountain": ("மலை",),
    "rain": ("மழை",),
    "sun": ("ஞாயிறு", "சூரியன்"),
    "moon": ("திங்கள்", "நிலா"),
    "tree": ("மரம்",),
    "flower": ("மலர்", "பூ"),
    "house": ("வீடு", "இல்லம்"),
    "word": ("சொல்",),
    "dictionary": ("அகராதி",),
    "knowledge": ("அறிவு",),
    "learning": ("கல்வி",),
    "language": ("மொழி",),
    "friend": ("நண்பன்", "தோழன்"),
    "king": ("அரசன்", "மன்னன்"),
    "heart": ("இதயம்", "உள்ளம்"),
}


class StaticConceptSuggester:
    """Suggest Tamil lemmas for known English concept words.

    Matching is case-insensitive on the whole query.

    Args:
        concepts: English word to Tamil candidates; defaults to a small
            built-in table.
    """

    def __init__(self, concepts: Mapping[str, tuple[str, ...] | list[str]] | None = None) -> None:
        source = DEFAULT_CONCEPTS if concepts is None else concepts
        self._concepts = {key.casefold(): tuple(values) for key, values in source.items()}

    async def suggest(self, text: str) -> list[str]:
        return list(self._concepts.get(text.strip().casefold(), ()))
