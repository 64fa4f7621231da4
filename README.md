# tamath

Building blocks for technical analysis of price series, in plain Python
with no third-party dependencies. Every function takes ordinary sequences
of floats and returns new lists.

## Modules

- `tamath.errors`: the `TAError` base class and its subclasses
  `InsufficientDataError`, `InvalidParameterError`, `EmptyInputError`,
  `MismatchedInputsError`, `InvalidInputError`, `NumericalError`,
  `UnsupportedOperationError` and `InternalError`. Errors compare equal when
  they are of the same class and carry the same details.
- `tamath.models`: `MAType` (an `IntEnum` of moving-average kinds with
  `default_period()` and `min_period()`), the frozen `OHLC` candle with
  `typical_price()`, `median_price()`, `weighted_close_price()`,
  `average_price()`, `true_range(prev_close)`, `body_size()`,
  `upper_shadow()`, `lower_shadow()`, `is_bullish()`, `is_bearish()` and
  `is_doji(threshold)`, and `OHLCV` with `money_flow()`.
- `tamath.constants`: default indicator parameters (`DEFAULT_PERIOD`,
  `MACD_FAST`, `BBANDS_STDDEV`, ...), mathematical constants, thresholds,
  validation limits, and unstable-period helpers such as `unstable_ema`,
  `unstable_macd` and `unstable_stochastic`.
- `tamath.utils`: input validation (`validate_not_empty`,
  `validate_period`, `validate_sufficient_data`, `validate_same_length`,
  `validate_prices`, `validate_ohlc`) and small numeric helpers
  (`highest`, `lowest`, `highest_index`, `lowest_index`, `sum_values`,
  `mean`, `variance`, `std_dev`, `mean_absolute_deviation`,
  `ema_multiplier`, `wilders_multiplier`, `approx_equal`,
  `round_to_decimals`, `clamp`).
- `tamath.arithmetic`: element-wise `add`, `sub`, `mult`, `div` and the
  scalar forms `add_scalar`, `sub_scalar`, `mult_scalar`, `div_scalar`.
  `div` gives NaN where the divisor is zero; `div_scalar` raises
  `InvalidParameterError` for a zero scalar.
- `tamath.rolling`: `rolling_max`, `rolling_min`, `minmax`, `rolling_sum`
  (also available as `sum_rolling`) and the index variants `max_index`,
  `min_index` and `minmax_index`.
- `tamath.trigonometric`: `sin`, `cos`, `tan`, `asin`, `acos`, `atan`,
  `sin_cos`, `deg_to_rad`, `rad_to_deg`.
- `tamath.elementwise`: `sqrt`, `absolute`, `power`.
- `tamath.rounding`: `ceil`, `floor`, `round_nearest` (halves rounded away
  from zero).

## Installation

```
pip install .
```

## Usage

```python
from tamath.arithmetic import add, div
from tamath.rolling import rolling_max, max_index, rolling_sum
from tamath.rounding import round_nearest
from tamath.models import OHLC

add([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])        # [5.0, 7.0, 9.0]
div([1.0, 2.0], [2.0, 0.0])                   # [0.5, nan]
rolling_max([1.0, 3.0, 2.0, 5.0, 4.0], 3)     # [nan, nan, 3.0, 5.0, 5.0]
max_index([1.0, 3.0, 2.0, 5.0, 4.0], 3)       # [0, 0, 1, 3, 3]
rolling_sum([1.0, 2.0, 3.0, 4.0, 5.0], 3)     # [nan, nan, 6.0, 9.0, 12.0]
round_nearest([0.5, -0.5, 2.7])               # [1.0, -1.0, 3.0]

OHLC(10.0, 12.0, 9.0, 11.0).true_range(8.0)   # 4.0
```

Rolling functions leave the first `period - 1` positions as NaN (or 0 for
index results). Invalid input raises a subclass of `TAError`: an empty
series, a period of zero, fewer values than the period, series of different
lengths, NaN or infinite values, or values outside a function's domain
(`asin`/`acos` outside [-1, 1], `sqrt` of a negative number).

## What it does not do

The package holds building blocks only. It has no indicators (moving
averages, oscillators, volume or volatility studies, pattern recognition),
no logarithmic, exponential or hyperbolic transforms, and no command-line
tool or data storage.

## Running the tests

```
pip install ".[test]"
pytest
```