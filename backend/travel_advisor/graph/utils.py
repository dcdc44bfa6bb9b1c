import json
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

# One leading list marker: "1.", "-", "•", "*", "[1]" ...
_LIST_MARKER = re.compile(r"^\s*(?:\d+\.(?!\d)|\[\d+\]|[-*•·●▪–—])\s*")
_MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)")
_URL = re.compile(r"https?://[^\s)\]>]+")
_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)
# Markdown around a label: closing emphasis right after it ("**Pros:**"),
# and heading/emphasis openers of the next label left on the last line ("### ", "**")
_LABEL_CLOSER = re.compile(r"^[*_]+")
_NEXT_LABEL_OPENER = re.compile(r"(?:^|\n)[ \t]*[#*_][#*_ \t]*$")


def extract_section(text: str, start_marker: str, end_markers: Sequence[str] = ()) -> Optional[str]:
    """
    Return the trimmed text between ``start_marker`` and the first of
    ``end_markers`` found after it, or None when the start marker is absent.

    End markers are tried in order, so pass the labels of the following
    sections nearest-first. With no end marker present the section runs to
    the end of the text.
    """
    if not text:
        return None
    start = text.find(start_marker)
    if start == -1:
        return None
    begin = start + len(start_marker)

    end = len(text)
    for marker in end_markers:
        idx = text.find(marker, begin)
        if idx != -1:
            end = idx
            break
    body = _LABEL_CLOSER.sub("", text[begin:end], count=1).strip()
    return _NEXT_LABEL_OPENER.sub("", body).strip()


def strip_list_marker(line: str) -> str:
    return _LIST_MARKER.sub("", line, count=1).strip()


def split_list_items(raw: Optional[str]) -> List[str]:
    """Split a section body into list items, in order, dropping blank lines."""
    if not raw:
        return []
    items = []
    for line in raw.splitlines():
        if not line.strip():
            continue
        item = strip_list_marker(line)
        if item:
            items.append(item)
    return items


def split_name_and_link(item: str) -> Tuple[str, str]:
    """Separate a recommendation line into (name, link); link is "" when absent."""
    md = _MARKDOWN_LINK.search(item)
    if md:
        rest = (item[:md.start()] + md.group(1) + item[md.end():]).strip()
        return rest or md.group(1), md.group(2)

    url = _URL.search(item)
    if not url:
        return item, ""
    link = url.group(0).rstrip(".,;")
    name = (item[:url.start()] + item[url.end():]).strip(" \t-–—:|()[]<>.,;")
    return name or link, link


def find_json_object(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Locate a JSON object in a completion body. Accepts bare JSON, JSON in a
    code fence, or JSON surrounded by prose. Returns None when nothing parses.
    """
    if not text:
        return None
    candidate = text.strip()

    fenced = _CODE_FENCE.match(candidate)
    if fenced:
        candidate = fenced.group(1)

    for body in (candidate, _outer_braces(candidate)):
        if not body:
            continue
        try:
            parsed = json.loads(body)
        except ValueError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None


def _outer_braces(text: str) -> Optional[str]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start:end + 1]
