import pytest

from tamath.models import MAType, OHLC, OHLCV


def test_ma_type_display():
    assert MAType.SMA.__str__() == "SMA"
    assert MAType(1).__str__() == "EMA"
    assert f"{MAType.WMA}" == "WMA"
    assert MAType(8).__str__() == "T3"


def test_ma_type_default_period():
    assert MAType.SMA.default_period() == 14
    assert MAType.EMA.default_period() == 14
    assert all(t.default_period() == 14 for t in MAType)


def test_ma_type_min_period():
    assert MAType.SMA.min_period() == 1
    assert MAType.DEMA.min_period() == 2
    assert MAType.TEMA.min_period() == 3
    assert MAType.MAMA.min_period() == 32
    assert MAType.T3.min_period() == 6


def test_ma_type_numbering_and_order():
    assert [int(t) for t in MAType] == list(range(9))
    assert MAType(5) is MAType.TRIMA


def test_ohlc_calculations():
    ohlc = OHLC(10.0, 12.0, 9.0, 11.0)

    assert ohlc.typical_price() == pytest.approx((12.0 + 9.0 + 11.0) / 3.0)
    assert ohlc.median_price() == 10.5
    assert ohlc.weighted_close_price() == 10.75
    assert ohlc.average_price() == 10.5

    assert ohlc.body_size() == 1.0
    assert ohlc.upper_shadow() == 1.0
    assert ohlc.lower_shadow() == 1.0

    assert ohlc.is_bullish()
    assert not ohlc.is_bearish()
    assert not ohlc.is_doji(0.1)


def test_bearish_and_doji():
    bearish = OHLC(11.0, 12.0, 9.0, 10.0)
    assert bearish.is_bearish()
    assert not bearish.is_bullish()
    assert bearish.upper_shadow() == 1.0
    assert bearish.lower_shadow() == 1.0

    doji = OHLC(10.0, 11.0, 9.0, 10.05)
    assert doji.is_doji(0.1)


def test_true_range():
    ohlc = OHLC(10.0, 12.0, 9.0, 11.0)
    assert ohlc.true_range(None) == 3.0
    assert ohlc.true_range() == 3.0
    assert ohlc.true_range(8.0) == 4.0
    assert ohlc.true_range(13.0) == 4.0


def test_money_flow():
    bar = OHLCV(OHLC(10.0, 12.0, 9.0, 12.0), 100.0)
    assert bar.money_flow() == pytest.approx(1100.0)


def test_ohlc_is_immutable():
    ohlc = OHLC(1.0, 2.0, 0.5, 1.5)
    with pytest.raises(AttributeError):
        ohlc.open = 3.0  # type: ignore[misc]
    assert ohlc.open == 1.0
    assert ohlc.average_price() == 1.25