# red_flag_analyzer.py
# Resume red-flag analysis: PII, biased language, exaggeration, clarity
#
# Pure and deterministic:
# - single pass over the text per rule, no I/O, no caching, no shared state
# - identical input -> identical (equal) AnalysisResult
# - total over str input: empty or garbage text yields a clean result, never an error

from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional, Iterable, Tuple
import logging
import math
import re

from red_flag_patterns import (
    DetectionRule,
    PII_RULES,
    BIAS_RULES,
    EXAGGERATION_RULES,
    CLARITY_RULES,
)

logger = logging.getLogger(__name__)

# ==============================================
# SCORING CONSTANTS
# ==============================================

PRIVACY_PENALTY = 15
LANGUAGE_PENALTY = 12
CLARITY_PENALTY = 8

WEIGHTS = {"privacy": 0.4, "language": 0.35, "clarity": 0.25}

ISSUE_COUNT_PENALTY = 2
MAX_ISSUE_COUNT_PENALTY = 20

MASK_CHAR = "X"


@dataclass(frozen=True)
class Issue:
    """One detected problem instance"""
    category: str  # pii | bias | exaggeration | clarity | compliance
    severity: str  # high | medium | low
    text: str      # matched text (digits masked for SSN-shaped numbers)
    reason: str
    suggestion: str
    line_number: Optional[int] = None


@dataclass(frozen=True)
class CategoryScores:
    privacy: int
    language: int
    clarity: int


@dataclass(frozen=True)
class ComplianceChecks:
    gdpr_compliant: bool
    no_biased_language: bool
    privacy_safe: bool


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate output of one scan"""
    overall_score: int
    total_issues: int
    issues: Tuple[Issue, ...]
    category_scores: CategoryScores
    compliance_checks: ComplianceChecks


# ==============================================
# RULE EVALUATION
# ==============================================

def mask_digits(text: str) -> str:
    return re.sub(r"\d", MASK_CHAR, text)


def apply_rule(rule: DetectionRule, text: str) -> List[Issue]:
    """
    Turn every match of a rule into Issues.
    Honors the rule's reporting limits: min_matches, max_reported,
    combine_matches and mask_digits.
    """
    matches = [m.group(0) for m in rule.pattern.finditer(text)]
    if not matches or len(matches) < rule.min_matches:
        return []

    if rule.max_reported is not None:
        matches = matches[:rule.max_reported]
    if rule.mask_digits:
        matches = [mask_digits(m) for m in matches]
    if rule.combine_matches:
        matches = [", ".join(matches)]

    return [
        Issue(
            category=rule.category,
            severity=rule.severity,
            text=match,
            reason=rule.reason,
            suggestion=rule.suggestion,
        )
        for match in matches
    ]


def apply_rules(rules: Iterable[DetectionRule], text: str) -> List[Issue]:
    issues = []
    for rule in rules:
        issues.extend(apply_rule(rule, text))
    return issues


# ==============================================
# DETECTORS
# ==============================================

def detect_pii(text: str) -> List[Issue]:
    """
    Full addresses, repeated phone numbers, SSN-shaped numbers, dates of birth.
    A single phone number is expected contact info and is not reported.
    """
    return apply_rules(PII_RULES, text)


def detect_biased_language(text: str) -> List[Issue]:
    return apply_rules(BIAS_RULES, text)


def detect_exaggerations(text: str) -> List[Issue]:
    return apply_rules(EXAGGERATION_RULES, text)


def detect_clarity_issues(text: str) -> List[Issue]:
    """Passive voice; at most 3 reports per pattern."""
    return apply_rules(CLARITY_RULES, text)


DETECTORS = (detect_pii, detect_biased_language, detect_exaggerations, detect_clarity_issues)

# ==============================================
# SCORING
# ==============================================

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_category_scores(issues: List[Issue]) -> CategoryScores:
    pii_count = sum(1 for i in issues if i.category == "pii")
    bias_count = sum(1 for i in issues if i.category == "bias")
    # exaggerations are scored in the clarity bucket
    clarity_count = sum(1 for i in issues if i.category in ("clarity", "exaggeration"))

    return CategoryScores(
        privacy=max(0, 100 - pii_count * PRIVACY_PENALTY),
        language=max(0, 100 - bias_count * LANGUAGE_PENALTY),
        clarity=max(0, 100 - clarity_count * CLARITY_PENALTY),
    )


def calculate_overall_score(category_scores: CategoryScores, total_issues: int) -> int:
    """Weighted average of the category scores minus an issue-count penalty (max 20)."""
    weighted = (
        category_scores.privacy * WEIGHTS["privacy"]
        + category_scores.language * WEIGHTS["language"]
        + category_scores.clarity * WEIGHTS["clarity"]
    )
    issue_penalty = min(total_issues * ISSUE_COUNT_PENALTY, MAX_ISSUE_COUNT_PENALTY)
    return min(100, max(0, round_half_up(weighted - issue_penalty)))


def check_compliance(issues: List[Issue]) -> ComplianceChecks:
    has_high_pii = any(i.category == "pii" and i.severity == "high" for i in issues)
    has_bias = any(i.category == "bias" for i in issues)
    has_pii = any(i.category == "pii" for i in issues)

    return ComplianceChecks(
        gdpr_compliant=not has_high_pii,
        no_biased_language=not has_bias,
        privacy_safe=not has_pii,
    )


# ==============================================
# ENTRY POINTS
# ==============================================

def analyze_resume(resume_text: str) -> AnalysisResult:
    """
    Scan resume text and score it.
    Issues are ordered by detector: PII, bias, exaggeration, clarity.
    """
    issues: List[Issue] = []
    for detector in DETECTORS:
        issues.extend(detector(resume_text or ""))

    category_scores = calculate_category_scores(issues)
    overall_score = calculate_overall_score(category_scores, len(issues))

    # counts only: matched text may hold PII
    logger.debug("Analyzed %d chars: %d issues, overall score %d",
                 len(resume_text or ""), len(issues), overall_score)

    return AnalysisResult(
        overall_score=overall_score,
        total_issues=len(issues),
        issues=tuple(issues),
        category_scores=category_scores,
        compliance_checks=check_compliance(issues),
    )


def get_risk_level(analysis: AnalysisResult) -> str:
    """low | medium | high; first matching branch wins."""
    high_severity_count = sum(1 for i in analysis.issues if i.severity == "high")

    if high_severity_count >= 2 or analysis.overall_score < 50:
        return "high"
    elif high_severity_count == 1 or analysis.overall_score < 75:
        return "medium"
    return "low"


def result_to_dict(analysis: AnalysisResult) -> Dict[str, Any]:
    """Convert to dictionary for JSON response"""
    return asdict(analysis)


# Simple usage example
if __name__ == "__main__":
    sample_resume = """
    Jane Doe - Date of Birth: March 3, 1990
    Phone: (555) 123-4567 / 555-987-6543
    SSN 123-45-6789

    • Single-handedly grew revenue 500%
    • Was responsible for all vendor contracts
    • Built an aggressive sales pipeline as part of a young team
    """

    result = analyze_resume(sample_resume)

    print("\n=== SAMPLE RESUME ===")
    print(f"Overall Score: {result.overall_score}/100")
    print(f"Risk Level: {get_risk_level(result)}")
    print(f"Category Scores: {result.category_scores}")
    print(f"Compliance: {result.compliance_checks}")
    for issue in result.issues:
        print(f"  [{issue.severity.upper()}] {issue.category}: {issue.text!r}")
