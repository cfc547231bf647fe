from content_review.services.report_parser import (
    DEFAULT_PACKAGING,
    extract_packaging,
    extract_risk_level,
    parse_sections,
)


def test_risk_level_extracted():
    assert extract_risk_level("### REGULATORY RISK ASSESSMENT\nRisk Level: HIGH\n") == "HIGH"


def test_risk_level_is_case_insensitive_and_normalized():
    assert extract_risk_level("overall risk level:   low") == "LOW"


def test_risk_level_defaults_to_medium():
    assert extract_risk_level("The model ignored the format entirely.") == "MEDIUM"
    assert extract_risk_level("") == "MEDIUM"


def test_packaging_excerpt_between_headings():
    analysis = (
        "### USER EXPERIENCE ISSUES\nFine.\n\n"
        "### PACKAGING CONTRADICTION CHECK\n"
        "⚠️ ISSUES FOUND: \"Best stored in glass bottles\"\n\n"
        "### REGULATORY RISK ASSESSMENT\nRisk Level: MEDIUM\n"
    )
    assert extract_packaging(analysis) == "⚠️ ISSUES FOUND: \"Best stored in glass bottles\""


def test_packaging_runs_to_end_of_text():
    analysis = "### PACKAGING CONTRADICTION CHECK\n✅ CLEAR: No glass-related issues found\n"
    assert extract_packaging(analysis) == "✅ CLEAR: No glass-related issues found"


def test_packaging_multiline_excerpt_is_kept_whole():
    analysis = (
        "### PACKAGING CONTRADICTION CHECK\n- line one\n- line two\n"
        "### IMPROVEMENT RECOMMENDATIONS\n1. Do things"
    )
    assert extract_packaging(analysis) == "- line one\n- line two"


def test_packaging_defaults_when_heading_missing():
    assert extract_packaging("PACKAGING CONTRADICTION CHECK without hashes") == DEFAULT_PACKAGING


def test_parse_sections_leaves_analysis_untouched():
    analysis = "Risk Level: high\n### PACKAGING CONTRADICTION CHECK\nclear"
    original = str(analysis)
    sections = parse_sections(analysis)
    assert sections == {"riskLevel": "HIGH", "packaging": "clear"}
    assert analysis == original
