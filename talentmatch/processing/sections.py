"""Heuristic resume section detection.

Each section is located independently: the first header synonym found starts
the span, which runs until the next line mentioning another section's header
word, or the end of the document. Spans may overlap when synonyms collide
(e.g. "technical" inside an experience bullet); the parser is a best-effort
signal and never fails.
"""

import re
from typing import Dict, Pattern

from talentmatch.domain.models import SectionName

# Words that open a section
HEADER_SYNONYMS: Dict[SectionName, tuple] = {
    SectionName.CONTACT: ("contact", "phone", "email", "address", "linkedin"),
    SectionName.SUMMARY: ("summary", "objective", "profile"),
    SectionName.EXPERIENCE: ("experience", "work", "employment", "career"),
    SectionName.EDUCATION: ("education", "academic", "degree", "university", "college"),
    SectionName.SKILLS: ("skills", "competencies", "technical", "technologies"),
}

# Words that close other sections when they appear on a later line
BOUNDARY_WORDS: Dict[SectionName, tuple] = {
    SectionName.CONTACT: ("contact",),
    SectionName.SUMMARY: ("summary", "objective"),
    SectionName.EXPERIENCE: ("experience",),
    SectionName.EDUCATION: ("education",),
    SectionName.SKILLS: ("skills",),
}


def _build_pattern(section: SectionName) -> Pattern:
    starts = "|".join(HEADER_SYNONYMS[section])
    stops = "|".join(
        word
        for other, words in BOUNDARY_WORDS.items()
        if other is not section
        for word in words
    )
    return re.compile(
        rf"\b(?:{starts})\b[\s\S]*?(?=\n[^\n]*?\b(?:{stops})\b|\Z)",
        re.IGNORECASE,
    )


SECTION_PATTERNS: Dict[SectionName, Pattern] = {
    section: _build_pattern(section) for section in SectionName
}


class SectionParser:
    """Splits normalized resume text into named sections."""

    def extract_sections(self, text: str) -> Dict[str, str]:
        """Find each known section in the text.

        Args:
            text: Normalized resume text

        Returns:
            Mapping of section name to its text. A key is present only if
            that section's header pattern matched.
        """
        sections: Dict[str, str] = {}
        if not text:
            return sections

        for section, pattern in SECTION_PATTERNS.items():
            match = pattern.search(text)
            if match:
                body = match.group(0).strip()
                if body:
                    sections[section.value] = body

        return sections
