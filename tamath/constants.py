"""Constants, default parameters, limits and unstable-period estimates."""

from __future__ import annotations

import math

# Pattern recognition output values.
PATTERN_BULLISH = 100
PATTERN_BEARISH = -100
PATTERN_NONE = 0

# Default indicator parameters.
DEFAULT_PERIOD = 14
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9
BBANDS_PERIOD = 20
BBANDS_STDDEV = 2.0
SAR_AF = 0.02
SAR_MAX_AF = 0.20
MAMA_FAST_LIMIT = 0.5
MAMA_SLOW_LIMIT = 0.05
T3_VOLUME_FACTOR = 0.7
ULTOSC_PERIOD1 = 7
ULTOSC_PERIOD2 = 14
ULTOSC_PERIOD3 = 28
STOCH_FASTK = 5
STOCH_SLOWK = 3
STOCH_SLOWD = 3

# Mathematical constants.
PI = math.pi
TWO_PI = 2.0 * math.pi
PI_2 = math.pi / 2.0
PI_4 = math.pi / 4.0
SQRT_2 = math.sqrt(2.0)
LN_2 = math.log(2.0)
LN_10 = math.log(10.0)
E = math.e

# Thresholds and tolerances.
EPSILON = 1e-10
DOJI_THRESHOLD = 0.1
LONG_CANDLE_THRESHOLD = 1.5
SHORT_CANDLE_THRESHOLD = 0.5
HAMMER_SHADOW_RATIO = 2.0
HAMMER_UPPER_SHADOW_MAX = 0.1
ENGULFING_RATIO = 1.0
CCI_CONSTANT = 0.015
MIN_CORRELATION = -1.0
MAX_CORRELATION = 1.0

# Validation limits.
MAX_PERIOD = 100_000
MIN_PERIOD = 1
MAX_PRICE = 1e15
MIN_PRICE = -1e15
MAX_VOLUME = 1e15
MIN_VOLUME = 0.0
MAX_BBANDS_STDDEV = 10.0
MIN_BBANDS_STDDEV = 0.1
MAX_SAR_AF = 1.0
MIN_SAR_AF = 0.001

# Fixed unstable periods.
HILBERT_TRANSFORM_UNSTABLE = 63
MAMA_UNSTABLE = 32


def unstable_ema(period: int) -> int:
    """Unstable period of an EMA: 2 * period - 1."""
    return 2 * period - 1


def unstable_rsi(period: int) -> int:
    """Conservative unstable period for Wilder-smoothed RSI."""
    return period + 100


def unstable_atr(period: int) -> int:
    """Conservative unstable period for Wilder-smoothed ATR."""
    return period + 100


def unstable_adx(period: int) -> int:
    """Unstable period for ADX (DX smoothing plus ADX smoothing)."""
    return 2 * period + 100


def unstable_macd(slow_period: int, signal_period: int) -> int:
    """Unstable period for MACD."""
    return slow_period + signal_period - 1


def unstable_stochastic(fastk_period: int, slowk_period: int, slowd_period: int) -> int:
    """Unstable period for the stochastic oscillator."""
    return fastk_period + slowk_period + slowd_period - 2


def unstable_bbands(period: int) -> int:
    """Unstable period for Bollinger Bands."""
    return period - 1


def unstable_kama(period: int) -> int:
    """Conservative unstable period for KAMA."""
    return period + 32


def unstable_t3(period: int) -> int:
    """Unstable period for T3 (six chained EMAs)."""
    return 6 * period