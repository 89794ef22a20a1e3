from webaudit.audit.markup import MarkupDocument
from webaudit.audit.mobile import calculate_mobile_score, extract_mobile
from webaudit.audit.models import MobileMetrics, SizeStats

from .conftest import page

VIEWPORT = '<meta name="viewport" content="width=device-width, initial-scale=1">'


def test_unmeasured_elements_are_not_undersized():
    doc = MarkupDocument(page(VIEWPORT, "<a href='/'>x</a><button>b</button><p>text</p><div>more</div>"))
    mobile = extract_mobile(doc)
    assert mobile.has_viewport
    assert mobile.viewport_content == "width=device-width, initial-scale=1"
    assert mobile.tap_targets == SizeStats(total=2, undersized=0, percentage=0.0)
    assert mobile.text_elements.total == 2
    assert calculate_mobile_score(mobile) == 100


def test_missing_viewport():
    mobile = extract_mobile(MarkupDocument(page()))
    assert not mobile.has_viewport
    assert mobile.viewport_content is None
    # no elements at all: 0% undersized in both bands
    assert calculate_mobile_score(mobile) == 60


def test_tap_target_banding():
    buttons = '<button style="width:30px">s</button>' * 2 + "<button>ok</button>" * 8
    inputs = '<input type="text" style="width:10px"><input type="checkbox">'
    mobile = extract_mobile(MarkupDocument(page(VIEWPORT, buttons + inputs)))
    # text/checkbox inputs are not tap targets
    assert mobile.tap_targets == SizeStats(total=10, undersized=2, percentage=20.0)
    assert calculate_mobile_score(mobile) == 40 + 20 + 30


def test_submit_inputs_and_height_count():
    body = '<input type="submit" style="height: 20px"><input type="BUTTON" height="100"><a href="#">a</a>'
    mobile = extract_mobile(MarkupDocument(page(VIEWPORT, body)))
    assert mobile.tap_targets.total == 3
    assert mobile.tap_targets.undersized == 1


def test_text_size_banding():
    small = '<p style="font-size: 12px">s</p>' * 3
    fine = '<p style="font-size: 18px">f</p>' * 4 + '<span style="font-size: 0.8rem">r</span>' * 3
    mobile = extract_mobile(MarkupDocument(page(VIEWPORT, small + fine)))
    assert mobile.text_elements.total == 10
    assert mobile.text_elements.undersized == 3
    assert calculate_mobile_score(mobile) == 40 + 30 + 10


def test_score_bands_from_records():
    def score(tap_pct, text_pct):
        return calculate_mobile_score(
            MobileMetrics(
                has_viewport=False,
                tap_targets=SizeStats(total=100, undersized=int(tap_pct), percentage=tap_pct),
                text_elements=SizeStats(total=100, undersized=int(text_pct), percentage=text_pct),
            )
        )

    assert score(10, 10) == 60
    assert score(10.5, 30) == 30
    assert score(31, 31) == 0
