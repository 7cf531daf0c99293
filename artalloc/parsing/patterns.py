"""Regex patterns for recognising article ids, page counts and dates."""

import re

# "CDC101217 [24]", "EA147928[ 29 ]"
ARTICLE_WITH_PAGES_PATTERN = re.compile(r"^([^\s\[\]]+)\s*\[\s*(\d+)\s*\]")

# First token of a line, stopping at whitespace or a bracket
ARTICLE_ID_TOKEN_PATTERN = re.compile(r"^([^\s\[\]]+)")

# 2+ letters, optional alphanumerics, ending with a digit: CDC101217, EA147928
ARTICLE_ID_PATTERN = re.compile(r"^[A-Z]{2,}[A-Z0-9]*\d$")

PAGE_COUNT_PATTERN = re.compile(r"^\d+$")

DATE_PATTERN_SLASH = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")
DATE_PATTERN_DASH = re.compile(r"^\d{1,2}-\d{1,2}-\d{4}$")

MAX_PAGE_COUNT = 10000


def is_date_token(token: str) -> bool:
    """Check whether a token looks like D/M/YYYY or D-M-YYYY."""
    return bool(DATE_PATTERN_SLASH.match(token) or DATE_PATTERN_DASH.match(token))
