"""
Content Classifier - Guess the serialized-data dialect of a chunk of text
"""

from __future__ import annotations

from typing import Callable, Optional

from models.content import ContentKind, DetectedType

# extension -> (kind, confidence)
EXTENSION_KINDS: dict[str, tuple[ContentKind, float]] = {
    "json": (ContentKind.JSON, 0.95),
    "csv": (ContentKind.CSV, 0.95),
    "xml": (ContentKind.XML, 0.9),
    "html": (ContentKind.XML, 0.9),
    "yaml": (ContentKind.YAML, 0.95),
    "yml": (ContentKind.YAML, 0.95),
    "env": (ContentKind.PROPERTIES, 0.9),
    "properties": (ContentKind.PROPERTIES, 0.9),
}

FALLBACK_CONFIDENCE = 0.5


def _lines(text: str) -> list[str]:
    return text.split("\n")


def _looks_like_json(text: str) -> bool:
    return text.startswith(("{", "[")) and '"' in text


def _looks_like_csv(text: str) -> bool:
    if "," not in text or "\n" not in text:
        return False
    return "," in _lines(text)[0]


def _starts_yaml_document(text: str) -> bool:
    return text.startswith("---")


def _looks_like_yaml_mapping(text: str) -> bool:
    if "\n" not in text or ": " not in text or text.startswith(("{", "[")):
        return False
    for line in _lines(text)[:3]:
        stripped = line.strip()
        if (
            stripped
            and not stripped.startswith("#")
            and ": " in stripped
            and not stripped.startswith("{")
        ):
            return True
    return False


def _is_property_line(line: str) -> bool:
    stripped = line.strip()
    return (
        not stripped
        or stripped.startswith("#")
        or ("=" in stripped and not stripped.startswith("="))
    )


def _looks_like_properties(text: str) -> bool:
    if "=" not in text or text.startswith("{"):
        return False
    lines = _lines(text)
    return all(_is_property_line(line) for line in lines) and any(
        "=" in line for line in lines
    )


# Evaluated top to bottom, first match wins
HEURISTIC_RULES: tuple[tuple[Callable[[str], bool], ContentKind, float], ...] = (
    (_looks_like_json, ContentKind.JSON, 0.85),
    (_looks_like_csv, ContentKind.CSV, 0.7),
    (_starts_yaml_document, ContentKind.YAML, 0.75),
    (_looks_like_yaml_mapping, ContentKind.YAML, 0.65),
    (_looks_like_properties, ContentKind.PROPERTIES, 0.65),
)


def extension_from_path(path: str) -> str:
    """Lowercased extension of the file name in path ("" when there is none)"""
    name = path[max(path.rfind("/"), path.rfind("\\")) + 1 :]
    dot = name.rfind(".")
    return "" if dot == -1 else name[dot + 1 :].lower()


def classify_heuristic(text: str) -> DetectedType:
    """Classify text by content alone"""
    trimmed = text.strip()
    for predicate, kind, confidence in HEURISTIC_RULES:
        if predicate(trimmed):
            return DetectedType(kind=kind, confidence=confidence)
    return DetectedType(kind=ContentKind.TEXT, confidence=FALLBACK_CONFIDENCE)


def classify(text: str, extension: Optional[str] = None) -> DetectedType:
    """
    Classify a whole buffer.

    A recognized extension hint wins outright with its fixed confidence;
    otherwise the heuristic cascade decides.
    """
    if extension:
        mapped = EXTENSION_KINDS.get(extension.lower())
        if mapped:
            return DetectedType(kind=mapped[0], confidence=mapped[1])
    return classify_heuristic(text)


def classify_line(line: str, line_index: int, extension: Optional[str] = None) -> ContentKind:
    """Classify one line; the extension hint only applies to line 0"""
    trimmed = line.strip()
    if not trimmed:
        return ContentKind.TEXT
    if line_index == 0:
        return classify(trimmed, extension).kind
    return classify_heuristic(trimmed).kind
