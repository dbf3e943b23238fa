"""Who Log Parser

Turns a pasted in-game ``/who`` capture into structured sightings.

A candidate line looks like::

    [Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>
    [Thu May 25 22:10:50 2023] [ANONYMOUS] Somebody  <Ex Astra>

Extraction is best effort: a bad timestamp falls back to the current time,
a bad level becomes None, and only a line without a usable name is dropped.
"""

import re
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel

WHO_TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y"
ANONYMOUS = "ANONYMOUS"

_STATUS_TAGS = (" AFK ", " LFG", " <LINKDEAD>")

_timestamp_re = re.compile(r"^\[([^\]]*)\]")
_bracket_re = re.compile(r"\[([^\]]*)\]")
_name_re = re.compile(r"(?<=\] )[^\[<(]+")
_guild_re = re.compile(r"<([^>]*)>")


class Sighting(BaseModel):
    """One player seen in the who log"""

    timestamp: datetime
    level: Optional[int] = None
    class_name: Optional[str] = None
    name: str
    guild: Optional[str] = None


def parse_timestamp(raw: str) -> datetime:
    try:
        parsed = datetime.strptime(raw.strip(), WHO_TIMESTAMP_FORMAT)
    except ValueError:
        return datetime.now(timezone.utc)
    return parsed.replace(tzinfo=timezone.utc)


def _parse_level_class(raw: str):
    parts = raw.split()
    if not parts or parts[0] == ANONYMOUS:
        return None, None
    level = int(parts[0]) if parts[0].isdigit() else None
    class_name = " ".join(parts[1:]) or None
    return level, class_name


def _is_candidate(line: str) -> bool:
    has_guild_tag = "<" in line and ">" in line
    return has_guild_tag or ANONYMOUS in line


def parse_line(line: str) -> Optional[Sighting]:
    """Parse a single who line, returning None when it carries no usable player"""
    line = line.strip()
    if not line:
        return None

    # Linkdead players still count, their <LINKDEAD> tag just is not a guild
    if not _is_candidate(line):
        return None
    for tag in _STATUS_TAGS:
        line = line.replace(tag, "")

    timestamp_match = _timestamp_re.match(line)
    if not timestamp_match:
        return None
    timestamp = parse_timestamp(timestamp_match.group(1))

    # The level/class bracket is the first one after the timestamp
    level, class_name = None, None
    level_class_match = _bracket_re.search(line, timestamp_match.end())
    if level_class_match:
        level, class_name = _parse_level_class(level_class_match.group(1))

    name = None
    for name_match in _name_re.finditer(line):
        candidate = name_match.group(0).strip()
        if candidate:
            name = candidate
            break
    if not name:
        return None

    guild_match = _guild_re.search(line)
    guild = guild_match.group(1) if guild_match else None

    return Sighting(
        timestamp=timestamp,
        level=level,
        class_name=class_name,
        name=name,
        guild=guild,
    )


def parse_who_log(text: str) -> List[Sighting]:
    """
    Parse a multi-line who log

    Returns sightings in input order; duplicates are preserved so the
    reconciler can apply its own first-sighting-wins rule.
    """
    sightings: List[Sighting] = []
    for raw_line in (text or "").splitlines():
        sighting = parse_line(raw_line)
        if sighting is not None:
            sightings.append(sighting)
    return sightings
