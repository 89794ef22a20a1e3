from webaudit.audit.models import SecurityMetrics
from webaudit.audit.security import calculate_security_score, extract_security

from .conftest import SECURE_HEADERS


def test_https_only_scores_30():
    security = extract_security("https://acme.example/", {})
    assert security == SecurityMetrics(is_https=True)
    assert calculate_security_score(security) == 30


def test_all_checks_pass():
    security = extract_security("https://acme.example/", SECURE_HEADERS)
    assert all(security.model_dump().values())
    assert calculate_security_score(security) == 100


def test_plain_http_with_headers():
    security = extract_security("http://acme.example/", SECURE_HEADERS)
    assert not security.is_https
    assert calculate_security_score(security) == 70


def test_nosniff_must_match():
    assert not extract_security("https://a.example/", {"x-content-type-options": "sniff"}).has_nosniff
    assert extract_security("https://a.example/", {"x-content-type-options": " NoSniff "}).has_nosniff


def test_empty_header_values_do_not_count():
    security = extract_security("https://a.example/", {"strict-transport-security": "", "x-frame-options": ""})
    assert not security.has_hsts
    assert not security.has_frame_options
