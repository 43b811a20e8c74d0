"""
Heuristic spam checks for contact form messages.

Each check is an independent predicate over the sanitized message and the
active settings. A message is treated as spam when any of them matches.
"""

import re
from typing import Callable, List

from contactform.core.config import Settings

URL_PATTERN = re.compile(r"https?://(?=\S)", re.IGNORECASE)


def _alternation(terms: List[str]) -> str:
    return "|".join(re.escape(term) for term in terms)


def contains_spam_keyword(message: str, settings: Settings) -> bool:
    """Whole-word match on any configured keyword, ignoring case."""
    if not settings.spam_keywords:
        return False
    pattern = rf"\b({_alternation(settings.spam_keywords)})\b"
    return re.search(pattern, message, re.IGNORECASE | re.ASCII) is not None


def contains_spam_phrase(message: str, settings: Settings) -> bool:
    """Whole-phrase match on any configured phrase, ignoring case."""
    if not settings.spam_phrases:
        return False
    pattern = rf"\b({_alternation(settings.spam_phrases)})\b"
    return re.search(pattern, message, re.IGNORECASE | re.ASCII) is not None


def has_excessive_urls(message: str, settings: Settings) -> bool:
    return len(URL_PATTERN.findall(message)) >= settings.max_url_count


def has_repeated_characters(message: str, settings: Settings) -> bool:
    """True when one character appears `repeated_char_threshold` times in a row."""
    repeats = max(settings.repeated_char_threshold - 1, 0)
    return re.search(rf"(.)\1{{{repeats},}}", message) is not None


SPAM_CHECKS: List[Callable[[str, Settings], bool]] = [
    contains_spam_keyword,
    contains_spam_phrase,
    has_excessive_urls,
    has_repeated_characters,
]


def is_suspected_spam(message: str, settings: Settings) -> bool:
    return any(check(message, settings) for check in SPAM_CHECKS)
