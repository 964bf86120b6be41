"""
Tests for theme scanning and content-nature classification.
"""

from yt_insights.core.themes import THEME_MARKERS, ThemeScanner, average_summary_length
from yt_insights.models.schemas import VideoDigest


def digest(summary_length):
    return VideoDigest(video_id="vid", title="Video", summary="s" * summary_length)


def test_vocabulary_is_fixed():
    assert len(THEME_MARKERS) == 17
    assert THEME_MARKERS[0] == "learn"
    assert THEME_MARKERS[-1] == "tool"


def test_marker_counts_once_per_video_case_insensitively():
    scanner = ThemeScanner()
    scanner.scan("This TUTORIAL is a tutorial about Tutorials")

    assert scanner.tally["tutorial"] == 1

    scanner.scan("another tutorial")
    assert scanner.tally["tutorial"] == 2


def test_markers_match_inside_words():
    """Matching is by substring: "show" contains "how"."""
    scanner = ThemeScanner()
    scanner.scan("Let me show you")

    assert scanner.tally == {"how": 1}


def test_top_themes_ranked_by_count():
    scanner = ThemeScanner()
    scanner.scan("free tool")
    scanner.scan("tool")

    assert scanner.top_themes() == [("tool", 2), ("free", 1)]


def test_top_themes_ties_follow_vocabulary_order():
    scanner = ThemeScanner()
    scanner.scan("worst")
    scanner.scan("best")

    assert scanner.top_themes() == [("best", 1), ("worst", 1)]


def test_top_themes_limit():
    scanner = ThemeScanner()
    scanner.scan(" ".join(THEME_MARKERS))

    assert len(scanner.top_themes()) == 10
    assert len(scanner.top_themes(limit=3)) == 3


def test_content_types():
    scanner = ThemeScanner()
    assert scanner.content_types() == "General Video Content"

    scanner.scan("a review of the guide")
    assert scanner.content_types() == "Reviews, Guide/How-to"

    scanner.scan("tutorial")
    assert scanner.content_types() == "Tutorial/Educational, Reviews, Guide/How-to"


def test_topics_are_capped():
    scanner = ThemeScanner()
    transcript = " ".join(f"Sentence number {i:02d} talks about some topic." for i in range(60))

    scanner.scan(transcript)
    scanner.scan(transcript)

    assert len(scanner.topics) == 50
    assert scanner.topics[0] == "Sentence number 00 talks about some topic"


def test_report_depth_classification():
    scanner = ThemeScanner()
    scanner.scan("tutorial")

    detailed = scanner.report([digest(1200), digest(1000)])
    assert "Most Common Themes:\n- tutorial (appears 1 times)\n" in detailed
    assert "Content Type: Tutorial/Educational" in detailed
    assert "detailed and comprehensive" in detailed
    assert "Average content depth: 1100 characters per summary." in detailed

    assert "moderately detailed" in scanner.report([digest(600)])
    assert "concise" in scanner.report([digest(500)])


def test_report_without_digests():
    """No analyzed videos reads as concise with zero depth."""
    report = ThemeScanner().report([])

    assert "Content Type: General Video Content" in report
    assert "Average content depth: 0 characters per summary." in report


def test_average_rounds_half_up():
    assert average_summary_length([digest(1), digest(2)]) == 1.5
    assert "Average content depth: 2 characters" in ThemeScanner().report([digest(1), digest(2)])
