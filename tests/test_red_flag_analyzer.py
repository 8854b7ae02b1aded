# tests/test_red_flag_analyzer.py
from red_flag_analyzer import (
    analyze_resume,
    detect_pii,
    detect_biased_language,
    detect_exaggerations,
    detect_clarity_issues,
    get_risk_level,
    result_to_dict,
)
from red_flag_patterns import DEFAULT_BIAS_SUGGESTION, EMAIL_PATTERN


def test_clean_resume_scores_perfect(clean_resume):
    result = analyze_resume(clean_resume)
    assert result.total_issues == 0
    assert result.issues == ()
    assert result.overall_score == 100
    assert result.compliance_checks.gdpr_compliant
    assert result.compliance_checks.no_biased_language
    assert result.compliance_checks.privacy_safe
    assert get_risk_level(result) == "low"


def test_empty_text_is_ordinary_input():
    result = analyze_resume("")
    assert result.total_issues == 0
    assert result.overall_score == 100
    assert (result.category_scores.privacy, result.category_scores.language,
            result.category_scores.clarity) == (100, 100, 100)
    assert get_risk_level(result) == "low"


def test_ssn_is_reported_masked():
    result = analyze_resume("SSN 123-45-6789")
    assert result.total_issues == 1
    issue = result.issues[0]
    assert (issue.category, issue.severity) == ("pii", "high")
    assert issue.text == "XXX-XX-XXXX"
    assert "123-45-6789" not in str(result_to_dict(result))
    assert not result.compliance_checks.gdpr_compliant


def test_single_phone_number_not_reported():
    assert detect_pii("Call 555-123-4567") == []


def test_two_phone_numbers_reported_once():
    issues = detect_pii("Call 555-123-4567 or 555-987-6543")
    assert len(issues) == 1
    assert (issues[0].category, issues[0].severity) == ("pii", "medium")
    assert issues[0].text == "555-123-4567, 555-987-6543"


def test_medium_pii_keeps_gdpr_but_not_privacy():
    result = analyze_resume("Call 555-123-4567 or 555-987-6543")
    assert result.compliance_checks.gdpr_compliant
    assert not result.compliance_checks.privacy_safe


def test_full_address():
    issues = detect_pii("123 Main Street, Springfield, IL 62704")
    assert len(issues) == 1
    assert (issues[0].category, issues[0].severity) == ("pii", "high")
    assert issues[0].text.startswith("123 Main Street")
    assert issues[0].text.endswith("IL 62704")


def test_date_of_birth():
    issues = detect_pii("DOB: 04 12 1988")
    assert len(issues) == 1
    assert issues[0].severity == "medium"
    assert issues[0].text == "DOB: 04 12 1988"


def test_email_is_matched_but_not_reported():
    text = "Contact: jane.doe@example.com"
    assert EMAIL_PATTERN.search(text)
    assert analyze_resume(text).total_issues == 0


def test_bias_issue_per_match():
    issues = detect_biased_language("aggressive, aggressive and assertive")
    assert len(issues) == 3
    assert all(i.category == "bias" and i.severity == "medium" for i in issues)
    assert all(i.suggestion == DEFAULT_BIAS_SUGGESTION for i in issues)
    assert "gendered language" in issues[0].reason


def test_bias_suggestion_by_label():
    issues = detect_biased_language("Native English speaker joining his team")
    assert [i.text for i in issues] == ["Native English", "his team"]
    assert "communication skills" in issues[0].suggestion
    assert "gender-neutral" in issues[1].suggestion


def test_exaggerations():
    text = "World’s best engineer. Increased revenue by 10x. Responsible for every launch."
    issues = detect_exaggerations(text)
    assert len(issues) == 3
    assert all(i.category == "exaggeration" and i.severity == "low" for i in issues)


def test_passive_voice_capped_at_three_per_pattern():
    text = "I was responsible for hiring. " * 5
    issues = detect_clarity_issues(text)
    assert len(issues) == 3
    assert all(i.category == "clarity" and i.severity == "low" for i in issues)


def test_cap_is_per_pattern():
    text = "Was responsible for QA. " * 4 + "Was tasked with support. " * 4
    assert len(detect_clarity_issues(text)) == 6


def test_flagged_resume(flagged_resume):
    result = analyze_resume(flagged_resume)
    assert [i.category for i in result.issues] == [
        "pii", "pii", "pii", "bias", "bias", "exaggeration", "exaggeration", "clarity",
    ]
    assert result.total_issues == len(result.issues) == 8
    assert result.issues[0].text == "(555) 123-4567, 555.987.6543"
    assert result.issues[1].text == "XXX-XX-XXXX"
    assert (result.category_scores.privacy, result.category_scores.language,
            result.category_scores.clarity) == (55, 76, 76)
    assert result.overall_score == 52
    assert get_risk_level(result) == "medium"


def test_analysis_is_deterministic(flagged_resume):
    assert analyze_resume(flagged_resume) == analyze_resume(flagged_resume)
    assert result_to_dict(analyze_resume(flagged_resume)) == result_to_dict(analyze_resume(flagged_resume))


def test_issues_never_carry_line_numbers(flagged_resume):
    assert all(i.line_number is None for i in analyze_resume(flagged_resume).issues)


def test_result_is_immutable_and_hashable(flagged_resume):
    result = analyze_resume(flagged_resume)
    assert isinstance(result.issues, tuple)
    assert result.total_issues == len(result.issues)
    assert hash(result) == hash(analyze_resume(flagged_resume))
    assert isinstance(result_to_dict(result)["issues"][0], dict)
