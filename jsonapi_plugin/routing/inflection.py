"""English noun inflection for resource names.

Irregular and uncountable nouns come from fixed tables; everything else
goes through suffix rules that always produce an answer, falling back to
adding (or dropping) a trailing ``s``. Compound names such as
``blog_post`` or ``line-item`` inflect their last word only.

The tables are read-only and shared by all callers.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from jsonapi_plugin.exceptions import UnresolvedInflectionError

IRREGULAR_PLURALS = MappingProxyType(
    {
        "person": "people",
        "man": "men",
        "woman": "women",
        "child": "children",
        "tooth": "teeth",
        "foot": "feet",
        "goose": "geese",
        "mouse": "mice",
        "louse": "lice",
        "ox": "oxen",
        "datum": "data",
        "medium": "media",
        "criterion": "criteria",
        "phenomenon": "phenomena",
        "curriculum": "curricula",
        "memorandum": "memoranda",
        "bacterium": "bacteria",
        "analysis": "analyses",
        "crisis": "crises",
        "thesis": "theses",
        "diagnosis": "diagnoses",
        "hypothesis": "hypotheses",
        "parenthesis": "parentheses",
        "synopsis": "synopses",
        "axis": "axes",
        "index": "indices",
        "matrix": "matrices",
        "vertex": "vertices",
        "appendix": "appendices",
        "cactus": "cacti",
        "fungus": "fungi",
        "nucleus": "nuclei",
        "radius": "radii",
        "stimulus": "stimuli",
        "syllabus": "syllabi",
        "alumnus": "alumni",
        "quiz": "quizzes",
        "hero": "heroes",
        "potato": "potatoes",
        "tomato": "tomatoes",
        "echo": "echoes",
        "veto": "vetoes",
        "torpedo": "torpedoes",
        "wolf": "wolves",
        "leaf": "leaves",
        "knife": "knives",
        "life": "lives",
        "wife": "wives",
        "half": "halves",
        "shelf": "shelves",
        "calf": "calves",
        "elf": "elves",
        "loaf": "loaves",
        "thief": "thieves",
        "scarf": "scarves",
        "bus": "buses",
        "status": "statuses",
        "virus": "viruses",
        "campus": "campuses",
        "bonus": "bonuses",
        "census": "censuses",
        "gas": "gases",
        "alias": "aliases",
        "atlas": "atlases",
        "bias": "biases",
        "canvas": "canvases",
        "lens": "lenses",
        "movie": "movies",
        "cookie": "cookies",
        "pie": "pies",
        "tie": "ties",
        "zombie": "zombies",
        "rookie": "rookies",
        "calorie": "calories",
        "cache": "caches",
        "niche": "niches",
        "headache": "headaches",
        "avalanche": "avalanches",
    }
)

IRREGULAR_SINGULARS = MappingProxyType(
    {plural: singular for singular, plural in IRREGULAR_PLURALS.items()}
)

UNCOUNTABLE = frozenset(
    {
        "advice",
        "aircraft",
        "audio",
        "deer",
        "equipment",
        "feedback",
        "fish",
        "furniture",
        "information",
        "knowledge",
        "luggage",
        "metadata",
        "money",
        "moose",
        "news",
        "offspring",
        "police",
        "rice",
        "series",
        "sheep",
        "software",
        "species",
        "traffic",
    }
)

_VOWELS = frozenset("aeiou")
_PLURAL_ENDINGS = ("ies", "sses", "ches", "shes", "xes", "zzes")
_COMPOUND_RE = re.compile(r"^(?P<head>.*[_\-\s])?(?P<last>[^_\-\s]+)$")


def _split(noun: str) -> tuple[str, str]:
    if not isinstance(noun, str) or not noun.strip():
        raise UnresolvedInflectionError(f"Cannot inflect {noun!r}: not a noun.")
    match = _COMPOUND_RE.match(noun.strip())
    if match is None:
        raise UnresolvedInflectionError(f"Cannot inflect {noun!r}: not a noun.")
    return match.group("head") or "", match.group("last")


def _match_case(source: str, word: str) -> str:
    if source.isupper() and len(source) > 1:
        return word.upper()
    if source[0].isupper():
        return word[0].upper() + word[1:]
    return word


def _pluralize_word(word: str) -> str:
    if word in UNCOUNTABLE or word in IRREGULAR_SINGULARS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if len(word) > 1 and word.endswith("y") and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if len(word) > 3 and word.endswith("is"):
        return word[:-2] + "es"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def _singularize_word(word: str) -> str:
    if word in UNCOUNTABLE or word in IRREGULAR_PLURALS:
        return word
    if word in IRREGULAR_SINGULARS:
        return IRREGULAR_SINGULARS[word]
    if len(word) > 3 and word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith(("sses", "shes", "ches", "xes", "zzes")):
        return word[:-2]
    if word.endswith(("ss", "us", "is")):
        return word
    if word.endswith("s") and len(word) > 1:
        return word[:-1]
    return word


def pluralize(noun: str) -> str:
    """Return the plural form of ``noun`` (``"post"`` -> ``"posts"``)."""
    head, last = _split(noun)
    return head + _match_case(last, _pluralize_word(last.lower()))


def singularize(noun: str) -> str:
    """Return the singular form of ``noun`` (``"people"`` -> ``"person"``)."""
    head, last = _split(noun)
    return head + _match_case(last, _singularize_word(last.lower()))


def noun_forms(noun: str) -> tuple[str, str]:
    """Return ``(singular, plural)`` for a singular noun.

    The noun is taken as singular unless it is a known irregular plural
    (``"people"``) or ends in a suffix only plurals carry (``"categories"``),
    so ``"alias"`` and ``"status"`` keep their trailing ``s``.
    """
    head, last = _split(noun)
    word = last.lower()
    singular = head + last
    if word in IRREGULAR_SINGULARS or word.endswith(_PLURAL_ENDINGS):
        singular = singularize(noun)
    return singular, pluralize(singular)
