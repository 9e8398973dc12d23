"""
Formatters - Dialect pretty-printers and the segment-wise formatting pipeline
"""

from __future__ import annotations

import csv
import io
import json
import re
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError
from typing import Callable, Iterable, Mapping, Optional

import yaml

from models.content import ContentKind, Segment
from services.segmenter import split_lines

Formatter = Callable[[str], str]


class FormatError(ValueError):
    """Raised when a dialect formatter cannot parse its input"""


def _reject_constant(name: str):
    raise FormatError(f"{name} is not valid JSON")


def format_json(content: str) -> str:
    """Pretty-print JSON with two-space indentation, keeping key order"""
    try:
        value = json.loads(content, parse_constant=_reject_constant)
    except (json.JSONDecodeError, RecursionError) as e:
        raise FormatError(str(e)) from e
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_csv(content: str) -> str:
    """Align CSV columns: cells padded to column width, joined by two spaces"""
    try:
        rows = list(csv.reader(io.StringIO(content), strict=True))
    except csv.Error as e:
        raise FormatError(str(e)) from e

    rows = [row for row in rows if row]
    if not rows:
        return ""

    expected = len(rows[0])
    for number, row in enumerate(rows[1:], start=2):
        if len(row) != expected:
            raise FormatError(
                f"record {number} has {len(row)} fields, but the previous record has {expected} fields"
            )
    widths = [max(len(row[col]) for row in rows) for col in range(expected)]
    return "\n".join(
        "  ".join(cell.ljust(widths[col]) for col, cell in enumerate(row)) for row in rows
    )


_XML_DECLARATION_PATTERN = re.compile(r"<\?xml[^>]*\?>", re.IGNORECASE)


def _strip_blank_text(node: Node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE:
            stripped = child.data.strip()
            if stripped:
                child.data = stripped
            else:
                node.removeChild(child)
        elif child.nodeType == Node.ELEMENT_NODE:
            _strip_blank_text(child)


def format_xml(content: str) -> str:
    """
    Re-indent XML two spaces per level, dropping surrounding whitespace in text.

    Prefixes, attributes, the DOCTYPE and comments or processing
    instructions around the root element are written back as parsed.
    """
    working = content.strip()
    declaration = ""
    match = _XML_DECLARATION_PATTERN.match(working)
    if match:
        declaration = match.group(0)
        working = working[match.end() :].lstrip()

    try:
        document = minidom.parseString(working)
    except ExpatError as e:
        raise FormatError(str(e)) from e

    _strip_blank_text(document.documentElement)
    out = io.StringIO()
    if declaration:
        out.write(f"{declaration}\n")
    for node in document.childNodes:
        node.writexml(out, "", "  ", "\n")
    return out.getvalue().rstrip("\n")


def format_yaml(content: str) -> str:
    """Round-trip YAML through a generic value tree"""
    try:
        value = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        raise FormatError(str(e)) from e
    dumped = yaml.safe_dump(
        value, sort_keys=False, default_flow_style=False, allow_unicode=True
    )
    # bare scalars get an explicit document end marker
    if dumped.endswith("\n...\n"):
        dumped = dumped[: -len("...\n")]
    return dumped


def format_properties(content: str) -> str:
    """Trim lines, drop blank ones and sort the rest (comments included)"""
    lines = [line.strip() for line in split_lines(content)]
    return "\n".join(sorted(line for line in lines if line))


def format_verbatim(content: str) -> str:
    return content


FORMATTERS: Mapping[ContentKind, Formatter] = {
    ContentKind.JSON: format_json,
    ContentKind.CSV: format_csv,
    ContentKind.XML: format_xml,
    ContentKind.YAML: format_yaml,
    ContentKind.PROPERTIES: format_properties,
    ContentKind.TEXT: format_verbatim,
}

_KIND_ALIASES = {
    "html": ContentKind.XML,
    "env": ContentKind.PROPERTIES,
}


def resolve_kind(kind: str) -> Optional[ContentKind]:
    """Map a segment kind string to a dialect; None for unknown kinds"""
    if kind in _KIND_ALIASES:
        return _KIND_ALIASES[kind]
    try:
        return ContentKind(kind)
    except ValueError:
        return None


def formatter_for(kind: str) -> Formatter:
    resolved = resolve_kind(kind)
    if resolved is None:
        return format_verbatim
    return FORMATTERS[resolved]


def with_fallback(formatter: Formatter) -> Formatter:
    """Wrap formatter so a failed parse yields the original text"""

    def _format(content: str) -> str:
        try:
            return formatter(content)
        except (FormatError, RecursionError):
            return content

    return _format


def format_segments(content: str, segments: Iterable[Segment]) -> str:
    """
    Canonicalize each segment with its dialect formatter and rejoin them.

    Never fails: a segment that does not parse is emitted unchanged, an
    empty segment list formats the whole buffer as JSON (falling back to
    the buffer itself), and segment bounds are clamped to the buffer.
    Blank lines that fall between segments are not emitted.
    """
    lines = split_lines(content)
    if not lines:
        return content

    segments = list(segments)
    if not segments:
        return with_fallback(format_json)(content)

    out = []
    for segment in segments:
        start = max(segment.start_line - 1, 0)
        end = min(segment.end_line, len(lines))
        if start >= end:
            continue
        segment_text = "\n".join(lines[start:end])
        out.append(with_fallback(formatter_for(segment.kind))(segment_text))

    return "\n".join(out)
