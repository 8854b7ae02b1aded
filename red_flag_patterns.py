# red_flag_patterns.py
# Detection rule tables for the resume red-flag analyzer
#
# Every rule is a data record: pattern + category + severity + fixed texts.
# Per-rule reporting limits (minimum matches, maximum reported matches,
# combined reporting, digit masking) live on the record, so the analyzer
# processes all rules the same way.

from dataclasses import dataclass
from typing import Dict, List, Optional
import re

# =========================
# ===== VERSION STAMP =====
# =========================

VERSIONS = {
    "rules": "red_flag_rules_v1.0",
    "weights": "W_0.40_0.35_0.25",
    "penalties": "P_15_12_8_cap20",
}


@dataclass(frozen=True)
class DetectionRule:
    """One detection rule. A scan turns its matches into Issues."""
    name: str
    pattern: re.Pattern
    category: str          # pii | bias | exaggeration | clarity
    severity: str          # high | medium | low
    reason: str
    suggestion: str
    min_matches: int = 1   # fewer matches than this -> nothing reported
    max_reported: Optional[int] = None
    combine_matches: bool = False  # one Issue for all matches, joined by ", "
    mask_digits: bool = False


FLAGS = re.IGNORECASE

# ==============================================
# PII PATTERNS
# ==============================================

STREET_SUFFIXES = (
    r"street|st|avenue|ave|road|rd|lane|ln|drive|dr|court|ct|circle|cir|"
    r"boulevard|blvd|way|place|pl"
)
MONTHS = (
    r"january|february|march|april|may|june|july|august|september|"
    r"october|november|december"
)

FULL_ADDRESS_PATTERN = re.compile(
    r"\d+\s+[\w\s]+(?:" + STREET_SUFFIXES + r")[\s,]+(?:apt|apartment|unit|#)?\s*\d*"
    r"[\s,]+[\w\s]+,?\s*[A-Z]{2}\s*\d{5}",
    FLAGS,
)
PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
SSN_PATTERN = re.compile(r"\d{3}[-\s]?\d{2}[-\s]?\d{4}")
DATE_OF_BIRTH_PATTERN = re.compile(
    r"(?:date of birth|dob|born)[\s:]*(?:" + MONTHS + r"|\d{1,2})[,\s]+\d{1,2}[,\s]+\d{4}",
    FLAGS,
)

# Email is expected contact info. Defined for callers, not reported by any rule.
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

PII_RULES: List[DetectionRule] = [
    DetectionRule(
        name="full_address",
        pattern=FULL_ADDRESS_PATTERN,
        category="pii",
        severity="high",
        reason="Full home address detected. This is sensitive PII that should not be included in resumes.",
        suggestion="Replace with city and state only (e.g., 'San Francisco, CA')",
    ),
    DetectionRule(
        name="multiple_phone_numbers",
        pattern=PHONE_PATTERN,
        category="pii",
        severity="medium",
        reason="Multiple phone numbers detected. Consider keeping only one professional contact number.",
        suggestion="Include one mobile or professional contact number only.",
        min_matches=2,
        combine_matches=True,
    ),
    DetectionRule(
        name="ssn",
        pattern=SSN_PATTERN,
        category="pii",
        severity="high",
        reason="Social Security Number or similar ID detected. Never include this in a resume.",
        suggestion="Remove all SSN or identification numbers from your resume.",
        mask_digits=True,
    ),
    DetectionRule(
        name="date_of_birth",
        pattern=DATE_OF_BIRTH_PATTERN,
        category="pii",
        severity="medium",
        reason="Date of birth is PII and can lead to age discrimination.",
        suggestion="Remove date of birth entirely from resume.",
    ),
]

# ==============================================
# BIASED LANGUAGE PATTERNS
# ==============================================

BIAS_PATTERNS = [
    (r"native\s+(?:english|speaker)", "language discrimination"),
    (r"young\s+(?:team|professional|candidate)", "age bias"),
    (r"experienced\s+(?:only|professionals)", "age bias"),
    (r"recent\s+graduate", "age bias"),
    (r"guys?\s+(?:team|culture)", "gender bias"),
    (r"(?:he|him|his)\s+(?:team|group|department)", "gender bias"),
    (r"aggressive|assertive|dominant", "gendered language"),
]

BIAS_SUGGESTIONS: Dict[str, str] = {
    "language discrimination": "Replace with 'Excellent written and verbal communication skills'",
    "age bias": "Focus on skills and achievements rather than age-related terms",
    "gender bias": "Use gender-neutral language like 'team members' or 'colleagues'",
}
DEFAULT_BIAS_SUGGESTION = "Use neutral, inclusive language that focuses on professional qualities"


def bias_suggestion(label: str) -> str:
    return BIAS_SUGGESTIONS.get(label, DEFAULT_BIAS_SUGGESTION)


BIAS_RULES: List[DetectionRule] = [
    DetectionRule(
        name=f"{label.replace(' ', '_')}_{i}",
        pattern=re.compile(pattern, FLAGS),
        category="bias",
        severity="medium",
        reason=f"Potentially biased language detected ({label}). Could be seen as discriminatory.",
        suggestion=bias_suggestion(label),
    )
    for i, (pattern, label) in enumerate(BIAS_PATTERNS)
]

# ==============================================
# EXAGGERATION PATTERNS
# ==============================================

EXAGGERATION_PATTERNS = [
    r"single[-\s]?handedly",
    r"(?:increased|boosted|grew).*?(?:1000%|500%|10x)",
    r"world['’]?s\s+(?:best|leading|top)",
    r"expert\s+in\s+everything",
    r"responsible\s+for\s+(?:all|every|entire)",
]

EXAGGERATION_RULES: List[DetectionRule] = [
    DetectionRule(
        name=f"exaggeration_{i}",
        pattern=re.compile(pattern, FLAGS),
        category="exaggeration",
        severity="low",
        reason="Claim appears exaggerated or unverifiable without supporting context.",
        suggestion="Provide specific, verifiable metrics with context (e.g., 'Led team to achieve 35% revenue increase')",
    )
    for i, pattern in enumerate(EXAGGERATION_PATTERNS)
]

# ==============================================
# PASSIVE VOICE PATTERNS (clarity)
# ==============================================

PASSIVE_PATTERNS = [
    r"(?:was|were|is|are|been)\s+responsible\s+for",
    r"(?:was|were|is|are|been)\s+in\s+charge\s+of",
    r"(?:was|were|is|are|been)\s+tasked\s+with",
]

# Reported matches per passive-voice pattern
MAX_PASSIVE_REPORTED = 3

CLARITY_RULES: List[DetectionRule] = [
    DetectionRule(
        name=f"passive_voice_{i}",
        pattern=re.compile(pattern, FLAGS),
        category="clarity",
        severity="low",
        reason="Passive voice detected. Active language is more impactful and shows ownership.",
        suggestion="Use action verbs: 'Led', 'Managed', 'Developed', 'Implemented', etc.",
        max_reported=MAX_PASSIVE_REPORTED,
    )
    for i, pattern in enumerate(PASSIVE_PATTERNS)
]
