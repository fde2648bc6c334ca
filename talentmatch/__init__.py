"""TalentMatch: resume to job description matching engine."""

__version__ = "1.0.0"
