"""Creative selection rule tests."""

from adserver.domain.selection import is_applicable, select_creative
from adserver.models import AdFormat, AdPlacement, Creative

BANNER_SLOT = AdPlacement(placement_id="slot-1", format=AdFormat.banner, width=300, height=250)


def _creative(creative_id: str, price: float, fmt: str = "banner", width: int = 300, height: int = 250) -> Creative:
    return Creative(
        creative_id=creative_id,
        format=fmt,
        width=width,
        height=height,
        content=f"content {creative_id}",
        price=price,
    )


def test_highest_priced_applicable_creative_wins():
    creatives = [
        _creative("cr-1", 1.5),
        _creative("cr-2", 3.0),
        _creative("cr-3", 2.0, fmt="interstitial", width=1024, height=768),
    ]
    selected = select_creative(BANNER_SLOT, creatives)
    assert selected is not None
    assert selected.creative_id == "cr-2"
    assert selected.price == 3.0


def test_higher_price_with_wrong_format_is_ignored():
    creatives = [
        _creative("cr-1", 1.0),
        _creative("cr-2", 50.0, fmt="video"),
    ]
    assert select_creative(BANNER_SLOT, creatives).creative_id == "cr-1"


def test_size_must_match_exactly():
    creatives = [
        _creative("wide", 9.0, width=301),
        _creative("tall", 9.0, height=251),
    ]
    assert select_creative(BANNER_SLOT, creatives) is None


def test_zero_price_never_selected():
    assert select_creative(BANNER_SLOT, [_creative("free", 0.0)]) is None


def test_zero_price_loses_to_any_positive_price():
    creatives = [_creative("free", 0.0), _creative("cheap", 0.01)]
    assert select_creative(BANNER_SLOT, creatives).creative_id == "cheap"


def test_tie_keeps_first_in_input_order():
    creatives = [
        _creative("first", 2.0),
        _creative("second", 2.0),
        _creative("lower", 1.0),
    ]
    results = {select_creative(BANNER_SLOT, creatives).creative_id for _ in range(5)}
    assert results == {"first"}


def test_tie_after_lower_price_still_keeps_first_at_max():
    creatives = [
        _creative("low", 1.0),
        _creative("top-a", 4.0),
        _creative("top-b", 4.0),
    ]
    assert select_creative(BANNER_SLOT, creatives).creative_id == "top-a"


def test_empty_input_returns_none():
    assert select_creative(BANNER_SLOT, []) is None


def test_is_applicable():
    assert is_applicable(BANNER_SLOT, _creative("ok", 1.0))
    assert not is_applicable(BANNER_SLOT, _creative("bad", 1.0, fmt="video"))
