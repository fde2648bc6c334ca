"""Keyword extraction from normalized resume and job text.

Two sources feed the keyword list, in this order:
1. Category patterns (programming languages, technologies, soft skills and
   job titles), each in order of first appearance
2. Generic terms: every word of at least min_word_length characters that is
   not a stop word, in order of first appearance

The merged list is de-duplicated and truncated, so identical input always
yields identical output.
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern

from talentmatch.config.models import KeywordConfig

PROGRAMMING_LANGUAGES = "programming_languages"
TECHNOLOGIES = "technologies"
SOFT_SKILLS = "soft_skills"
JOB_TITLES = "job_titles"

TECHNICAL_CATEGORIES = (PROGRAMMING_LANGUAGES, TECHNOLOGIES)


def _category_pattern(alternatives: str) -> Pattern:
    # '+' and '#' count as word characters so "c++" and "c#" match whole
    return re.compile(rf"(?<![\w+#])(?:{alternatives})(?![\w+#])", re.IGNORECASE)


KEYWORD_CATEGORIES: Dict[str, Pattern] = {
    PROGRAMMING_LANGUAGES: _category_pattern(
        r"javascript|typescript|python|java|c\+\+|c#|php|ruby|go|rust|swift|kotlin"
    ),
    TECHNOLOGIES: _category_pattern(
        r"react|angular|vue|node\.?js|express|mongodb|postgresql|mysql|redis"
        r"|docker|kubernetes|aws|azure|gcp"
    ),
    SOFT_SKILLS: _category_pattern(
        r"leadership|management|communication|teamwork|problem[\s-]?solving"
        r"|analytical|creative"
    ),
    JOB_TITLES: _category_pattern(
        r"developer|engineer|manager|analyst|designer|architect|consultant|specialist"
    ),
}

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "nor", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "not", "can", "could", "will",
    "would", "shall", "should", "may", "might", "must", "this", "that",
    "these", "those", "from", "into", "onto", "over", "under", "about",
    "above", "below", "between", "through", "during", "before", "after",
    "than", "then", "there", "here", "they", "them", "their", "theirs",
    "you", "your", "yours", "our", "ours", "his", "her", "hers", "its",
    "she", "him", "who", "whom", "whose", "which", "what", "when", "where",
    "why", "how", "all", "any", "both", "each", "few", "more", "most",
    "other", "some", "such", "only", "own", "same", "too", "very", "also",
    "just", "off", "out", "per", "via", "upon", "while", "within", "without",
    "etc",
})


def categorize(keyword: str) -> Optional[str]:
    """Return the category a keyword belongs to, or None for generic terms."""
    for category, pattern in KEYWORD_CATEGORIES.items():
        if pattern.fullmatch(keyword):
            return category
    return None


def filter_category(keywords: Iterable[str], categories: Iterable[str]) -> List[str]:
    """Keep the keywords that fall into any of the given categories."""
    wanted = set(categories)
    return [k for k in keywords if categorize(k) in wanted]


class KeywordExtractor:
    """Derives a bounded, ordered set of salient terms from text."""

    def __init__(self, config: Optional[KeywordConfig] = None):
        self.config = config or KeywordConfig()
        self.stop_words = STOP_WORDS | frozenset(self.config.extra_stop_words)
        self._generic_term = re.compile(rf"\b\w{{{self.config.min_word_length},}}\b")

    def extract_keywords(self, text: str) -> List[str]:
        """Extract up to max_keywords lower-cased, unique keywords.

        Args:
            text: Normalized text

        Returns:
            Keywords in deterministic order: category matches first, then
            generic terms, each in order of first appearance
        """
        if not text:
            return []

        keywords: Dict[str, None] = {}

        for pattern in KEYWORD_CATEGORIES.values():
            for match in pattern.finditer(text):
                keywords.setdefault(match.group(0).lower(), None)

        for word in self._generic_term.findall(text.lower()):
            if word not in self.stop_words:
                keywords.setdefault(word, None)

        return list(keywords)[: self.config.max_keywords]
