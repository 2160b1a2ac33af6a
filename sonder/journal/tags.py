#!/usr/bin/env python3
"""
tags.py
-------
Tag suggestions for the log editor.

Tags are free text and users type them inconsistently ("Coffee",
" coffee", "Café"). All comparisons go through normalized_tag_key, while
the emitted tags keep the casing of whichever occurrence was seen first.

Functions:
    normalized_tag_key: Lookup key for tag equivalence
    recent_tags_by_usage: A user's distinct tags, most recently used first
    prioritized_tag_suggestions: Recent + fallback tags minus selected ones
    top_tags: Most frequently used tags across logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import unicodedata
from typing import Dict, Iterable, List, Set

# --- Local imports ---
from sonder.models import Log


def normalized_tag_key(tag: str) -> str:
    """
    Canonical key for tag comparisons.

    Trimmed, case-insensitive and diacritic-insensitive, so that
    "Café ", "cafe" and "CAFE" share a key.

    Args:
        tag: Raw tag text

    Returns:
        Normalized key (empty for blank tags)
    """
    decomposed = unicodedata.normalize("NFKD", tag.strip())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def recent_tags_by_usage(logs: Iterable[Log], user_id: str) -> List[str]:
    """
    List a user's distinct tags, most recently used first.

    Logs of other users are ignored. Logs are visited newest first by
    creation time; blank tags are dropped and the first casing seen for
    each key wins.

    Args:
        logs: Logs of any users, in any order
        user_id: User whose history to use

    Returns:
        Trimmed tags, each key once
    """
    own_logs = sorted(
        (log for log in logs if log.user_id == user_id),
        key=lambda log: log.created_at,
        reverse=True,
    )

    seen: Set[str] = set()
    ordered: List[str] = []
    for log in own_logs:
        for raw_tag in log.tags:
            tag = raw_tag.strip()
            key = normalized_tag_key(tag)
            if not key or key in seen:
                continue
            seen.add(key)
            ordered.append(tag)
    return ordered


def prioritized_tag_suggestions(
    recent_tags: Iterable[str],
    fallback_tags: Iterable[str],
    selected_tags: Iterable[str],
    limit: int,
) -> List[str]:
    """
    Merge recent and fallback tags into a suggestion list.

    Recent tags come first in their given order, then fallback tags not
    already present. Tags matching an already selected tag are left out.
    Duplicates are dropped by key, keeping the first casing.

    Args:
        recent_tags: Tags the user used recently, most recent first
        fallback_tags: Generic suggestions used to fill the list
        selected_tags: Tags already on the log
        limit: Maximum number of suggestions

    Returns:
        At most ``limit`` suggestions (empty when limit <= 0)
    """
    if limit <= 0:
        return []

    seen: Set[str] = {normalized_tag_key(tag) for tag in selected_tags}
    ordered: List[str] = []

    for source in (recent_tags, fallback_tags):
        for raw_tag in source:
            tag = raw_tag.strip()
            key = normalized_tag_key(tag)
            if not key or key in seen:
                continue
            seen.add(key)
            ordered.append(tag)
            if len(ordered) == limit:
                return ordered

    return ordered


def top_tags(logs: Iterable[Log], count: int = 4) -> List[str]:
    """
    Most frequently used tags across logs.

    Ties keep the order in which tags first appeared.

    Args:
        logs: Logs to count over
        count: Number of tags to return

    Returns:
        Up to ``count`` tags, most frequent first
    """
    if count <= 0:
        return []

    frequency: Dict[str, int] = {}
    display: Dict[str, str] = {}
    for log in logs:
        for raw_tag in log.tags:
            tag = raw_tag.strip()
            key = normalized_tag_key(tag)
            if not key:
                continue
            display.setdefault(key, tag)
            frequency[key] = frequency.get(key, 0) + 1

    ranked = sorted(frequency, key=lambda key: frequency[key], reverse=True)
    return [display[key] for key in ranked[:count]]
