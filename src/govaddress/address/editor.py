"""Line editing for scraped address text.

Scraped pages hand us one string per text node. Addresses arrive split in
odd places (a zip on its own node, a zip broken across two nodes), joined
in others (city, state and zip on one node), and littered with
punctuation. Each step below is a pure function from a line sequence to a
line sequence; LineEditor runs them in a fixed order.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence, Tuple

from govaddress.address.patterns import TRAILING_ZIP_RE, ZIP_ONLY_RE, ends_with_zip, is_zip
from govaddress.data.constants import STATE_PATTERN, is_state, normalize_state

logger = logging.getLogger(__name__)

LineStep = Callable[[List[str]], List[str]]

# Spaces that survive str.split() or render as nothing
_INVISIBLE_CHARS = {
    "\u00a0": " ",  # no-break space
    "\u2007": " ",  # figure space
    "\u202f": " ",  # narrow no-break space
    "\u200b": "",  # zero width space
    "\u200c": "",
    "\u200d": "",
    "\ufeff": "",
}

_DELIMITER_RE = re.compile(r"[|,]")
_SHORT_DIGITS_RE = re.compile(r"[0-9]{1,4}")

# "... GA 304" waiting for "74"
_DISJOINT_HEAD_RE = re.compile(rf"{STATE_PATTERN.pattern}\s+([0-9]{{1,4}})$")

_HOUSE_BUILDING_RE = re.compile(
    r"\b(CANNON|LONGWORTH|RAYBURN)\s+"
    r"(?:HOUSE\s+OFFICE\s+(?:BUILDING|BLDG)|HOUSE\s+OFFICE|HOUSE\s+(?:BUILDING|BLDG)"
    r"|OFFICE\s+(?:BUILDING|BLDG)|BUILDING|BLDG|HOB)\b"
)
_SENATE_BUILDING_RE = re.compile(
    r"\b(HART|DIRKSEN|RUSSELL)\s+"
    r"(?:SENATE\s+OFFICE\s+(?:BUILDING|BLDG)|SENATE\s+OFFICE|SENATE\s+(?:BUILDING|BLDG)"
    r"|OFFICE\s+(?:BUILDING|BLDG)|BUILDING|BLDG|SOB)\b"
)
_BUILDING_PATTERNS: Tuple[Tuple["re.Pattern[str]", str], ...] = (
    (_HOUSE_BUILDING_RE, "HOB"),
    (_SENATE_BUILDING_RE, "SOB"),
)

# "1107 LONGWORTH HOUSE", "OFFICE BUILDING"
_SPLIT_HOUSE_HEAD_RE = re.compile(r"\b(?:CANNON|LONGWORTH|RAYBURN)\s+HOUSE$")
_SPLIT_HOUSE_TAIL_RE = re.compile(r"OFFICE\s+(?:BUILDING|BLDG)")

# Room numbers: "2312", "SR-124", "SH-530", "127A"
_ROOM_BEFORE_RE = re.compile(r"(?:\bS[DHR]-?)?(\d+[A-Z]?)\b")
_ROOM_AFTER_RE = re.compile(r"(?:(?:ROOM|RM|SUITE|STE)\s*#?\s*)?(?:S[DHR]-?)?(\d+[A-Z]?)\b(?!-\d)")
# A zip joined onto a building line is never a room
_LEADING_ZIP_RE = re.compile(r"\d{5}(?:-?\d{4})?(?:\s|$)")
_ROOM_LINE_RE = re.compile(r"(?:ROOM|RM|SUITE|STE)\s*#?\s*(?:S[DHR]-?)?(\d+[A-Z]?)")

_PHONE_RE = re.compile(
    r"(?<!\d)(?:\+?1[-.\s]?)?(?:\(\d{3}\)|\d{3})[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)"
)
_FLOAT_RE = re.compile(r"-?\d+\.\d+")
_TIME_RE = re.compile(r"\b\d{1,2}(?::\d{2})?\s*[AP]\.?M\b\.?", re.IGNORECASE)
_MARKUP_RE = re.compile(
    r"IFRAME|\bFUNCTION\b|\bFORM\b|!IMPORTANT;|PHONE:|FAX:|OFFICE OF|[<>{}]",
    re.IGNORECASE,
)


def is_noise(line: str) -> bool:
    """
    Check if a scraped line is obviously not part of an address.

    Catches script and markup residue, phone and fax numbers, map
    coordinates, office-hours ranges and "OFFICE OF" headings.
    """
    text = line.strip()
    if not text:
        return True
    return bool(
        _MARKUP_RE.search(text)
        or _PHONE_RE.search(text)
        or _FLOAT_RE.fullmatch(text)
        or _TIME_RE.search(text)
    )


def filter_noise(lines: Sequence[str]) -> List[str]:
    """Drop noise lines, keeping order."""
    return [line for line in lines if not is_noise(line)]


def count_zip_lines(lines: Sequence[str]) -> int:
    """Count lines that are exactly a zip code."""
    return sum(1 for line in lines if is_zip(line))


def normalize_text(lines: List[str]) -> List[str]:
    """
    Normalize characters within each line.

    Upper-cases, explodes embedded newlines, strips invisible spaces,
    rewrites "½" as "1/2", removes periods ("D.C." -> "DC"), strips a leading
    "#", collapses whitespace, trims trailing commas and drops empty lines.
    """
    result = []
    for raw in lines:
        text = raw
        for char, replacement in _INVISIBLE_CHARS.items():
            text = text.replace(char, replacement)
        text = re.sub(r"(?<=\d)\u00bd", " 1/2", text).replace("\u00bd", "1/2")
        text = text.replace(".", "").upper()
        for part in text.splitlines():
            part = " ".join(part.split()).lstrip("#").strip().rstrip(",").strip()
            if part:
                result.append(part)
    return result


def split_delimiters(lines: List[str]) -> List[str]:
    """
    Split lines on pipes and commas.

    "WELLS FARGO PLAZA | 221 N KANSAS STREET" -> "WELLS FARGO PLAZA", "221 N KANSAS STREET"
    """
    result = []
    for line in lines:
        for part in _DELIMITER_RE.split(line):
            part = part.strip()
            if part:
                result.append(part)
    return result


def _format_zip(match: "re.Match[str]") -> str:
    zip5, zip4 = match.group(1), match.group(2)
    return f"{zip5}-{zip4}" if zip4 else zip5


def concat_zip(lines: List[str]) -> List[str]:
    """
    Append an isolated zip line to the line before it.

    "SYRACUSE NY", "13202" -> "SYRACUSE NY 13202". Left alone when the line
    before is already a state ("NY", "13202") or already ends in a zip.
    """
    result: List[str] = []
    for line in lines:
        match = ZIP_ONLY_RE.fullmatch(line)
        if match is None:
            result.append(line)
            continue
        zip_code = _format_zip(match)
        if result and not is_state(result[-1]) and not ends_with_zip(result[-1]):
            result[-1] = f"{result[-1]} {zip_code}"
        else:
            result.append(zip_code)
    return result


def repair_disjoint_zip(lines: List[str]) -> List[str]:
    """
    Rejoin a zip code broken across two lines.

    "VIDALIA GA 304", "74" -> "VIDALIA GA 30474"
    """
    result: List[str] = []
    for line in lines:
        if result and _SHORT_DIGITS_RE.fullmatch(line):
            head = _DISJOINT_HEAD_RE.search(result[-1])
            if head and len(head.group(1)) + len(line) == 5:
                result[-1] += line
                continue
        result.append(line)
    return result


def _split_city_state_zip_line(line: str) -> List[str]:
    zip_match = TRAILING_ZIP_RE.search(line)
    if zip_match is None or zip_match.start(1) == 0:
        return [line]

    rest = line[: zip_match.start(1)].strip()
    # Last match wins: "WASHINGTON DC" is the city Washington in DC.
    states = list(STATE_PATTERN.finditer(rest))
    if not states or states[-1].end() != len(rest):
        return [line]

    state = states[-1]
    before = rest[: state.start()].strip()
    parts = [before] if before else []
    parts.append(normalize_state(state.group(0)) or state.group(0))
    parts.append(zip_match.group(1))
    return parts


def split_city_state_zip(lines: List[str]) -> List[str]:
    """
    Split a combined city/state/zip line into separate lines.

    "SYRACUSE NY 13202" -> "SYRACUSE", "NY", "13202"
    "MOUNT VERNON WASHINGTON 98273" -> "MOUNT VERNON", "WA", "98273"

    Lines without a recognizable state before the zip are left untouched.
    """
    result = []
    for line in lines:
        result.extend(_split_city_state_zip_line(line))
    return result


def _join_split_house_lines(lines: List[str]) -> List[str]:
    result: List[str] = []
    for line in lines:
        if result and _SPLIT_HOUSE_HEAD_RE.search(result[-1]) and _SPLIT_HOUSE_TAIL_RE.fullmatch(line):
            result[-1] = f"{result[-1]} {line}"
        else:
            result.append(line)
    return result


def _match_building(line: str) -> Optional[Tuple["re.Match[str]", str]]:
    for pattern, suffix in _BUILDING_PATTERNS:
        match = pattern.search(line)
        if match:
            return match, suffix
    return None


def abbreviate_office_buildings(lines: List[str]) -> List[str]:
    """
    Rewrite Capitol Hill office buildings to their short form.

    "2312 RAYBURN HOUSE OFFICE BUILDING" -> "2312 RAYBURN HOB"
    "HART SENATE OFFICE BLDG", "RM 530" -> "530 HART SOB"
    "SR-124 RUSSELL SENATE OFFICE BUILDING" -> "124 RUSSELL SOB"
    """
    lines = _join_split_house_lines(lines)
    result: List[str] = []
    idx = 0
    while idx < len(lines):
        line = lines[idx]
        found = _match_building(line)
        if found is None:
            result.append(line)
            idx += 1
            continue

        match, suffix = found
        prefix = line[: match.start()]
        tail = line[match.end() :].strip()

        room = None
        room_before = _ROOM_BEFORE_RE.search(prefix)
        if room_before:
            room = room_before.group(1)
        room_after = None if _LEADING_ZIP_RE.match(tail) else _ROOM_AFTER_RE.match(tail)
        if room_after:
            room = room or room_after.group(1)
            tail = tail[room_after.end() :].strip()

        consumed = 1
        if room is None and idx + 1 < len(lines):
            room_line = _ROOM_LINE_RE.fullmatch(lines[idx + 1])
            if room_line:
                room = room_line.group(1)
                consumed = 2

        name = match.group(1)
        result.append(f"{room} {name} {suffix}" if room else f"{name} {suffix}")
        if tail:
            result.append(tail)
        idx += consumed
    return result


def trim_after_last_zip(lines: List[str]) -> List[str]:
    """Drop trailing navigation and footer text after the last zip code."""
    for idx in range(len(lines) - 1, -1, -1):
        if ends_with_zip(lines[idx]):
            return lines[: idx + 1]
    return list(lines)


class LineEditor:
    """
    Normalize scraped lines into a shape the extractor can anchor on.

    Steps run in a fixed order. Running the editor on its own output
    changes nothing.
    """

    STEPS: Tuple[LineStep, ...] = (
        normalize_text,
        split_delimiters,
        concat_zip,
        repair_disjoint_zip,
        split_city_state_zip,
        abbreviate_office_buildings,
        trim_after_last_zip,
    )

    def edit(self, lines: Sequence[str]) -> List[str]:
        """
        Run every editing step over a line sequence.

        Args:
            lines: Raw lines for one page

        Returns:
            New list of normalized lines
        """
        result = list(lines)
        for step in self.STEPS:
            result = step(result)
        logger.debug("Edited lines: %s", result)
        return result
