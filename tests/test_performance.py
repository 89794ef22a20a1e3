import pytest

from webaudit.audit.performance import extract_performance, load_time_score
from webaudit.audit.rules import ScoringConfig


@pytest.mark.parametrize(
    "load_ms, expected",
    [(0, 100), (2999, 100), (3000, 100), (3050, 99), (3025, 99.5), (8000, 0), (53000, 0)],
)
def test_load_time_score(load_ms, expected):
    assert load_time_score(load_ms) == expected


def test_budget_is_configurable():
    config = ScoringConfig(load_budget_ms=1000, ms_per_point=10)
    assert load_time_score(1100, config) == 90


def test_extract_performance_counts_raw_tags():
    html = (
        '<head><script src="a.js" async></script><SCRIPT>x()</SCRIPT>'
        '<style>p{}</style><link rel="stylesheet" href="a.css"><link rel="icon" href="i.png">'
        "</head><body><scripts>not a tag we count</scripts></body>"
    )
    perf = extract_performance(html, 3049.6)
    assert perf.render_blocking.scripts == 2
    assert perf.render_blocking.styles == 1
    assert perf.render_blocking.links == 2
    assert perf.load_time_ms == 3050
    assert perf.score == 99


def test_html_size_uses_utf8_bytes():
    assert extract_performance("a" * 2048, 10).html_size_kb == 2.0
    # "é" is two bytes in UTF-8
    assert extract_performance("é" * 512, 10).html_size_kb == 1.0


def test_empty_body():
    perf = extract_performance("", 0)
    assert perf.html_size_kb == 0
    assert perf.score == 100
