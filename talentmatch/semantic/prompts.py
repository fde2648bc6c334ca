"""Prompt templates sent to generative semantic providers."""

MATCH_ANALYSIS_PROMPT = """As an expert HR professional, analyze the following resume against the job description and provide a detailed match analysis.

JOB DESCRIPTION:
{job_text}

RESUME:
{resume_text}

Return only valid JSON, no other text, in exactly this shape:
{{
  "matchScore": 85,
  "strengths": ["React experience", "Node.js skills", "AWS knowledge"],
  "gaps": ["Lacks Docker experience", "No PostgreSQL mentioned"],
  "assessment": "Strong candidate with relevant experience..."
}}

matchScore is an integer from 0 to 100. Keep each strength and gap under ten words.
"""

CONNECTION_TEST_PROMPT = "Hello, are you working? Reply with one short sentence."


def build_match_prompt(resume_text: str, job_text: str) -> str:
    """Fill the match analysis prompt."""
    return MATCH_ANALYSIS_PROMPT.format(resume_text=resume_text, job_text=job_text)
