# luxide

Small support utilities for a path tracer. These cover the parts that are not rendering itself.

## Modules

### `luxide.interval`

`Interval(minimum, maximum)` is a frozen dataclass for a range of floats.

- `size()` returns the width of the interval.
- `expand(delta)` grows the interval by `delta` in total, half on each side.
- `contains_including(x)` checks whether `x` lies in the interval, ends included.
- `contains_excluding(x)` checks whether `x` lies strictly inside.
- `clamp(x)` limits `x` to the interval.
- `Interval.from_intervals(a, b)` returns the smallest interval that encloses both.
- `interval + x`, `x + interval` and `interval - x` shift the interval by a real number.
- `Interval.EMPTY` is `(inf, -inf)` and `Interval.UNIVERSE` is `(-inf, inf)`.

### `luxide.units`

`Angle` is a frozen dataclass that records an `AngleUnit` (`DEGREES` or `RADIANS`) together with a value.

- Build one with `Angle.degrees(v)` or `Angle.radians(v)`.
- Convert it with `as_degrees()` and `as_radians()`.
- `to_dict()` gives a one-key mapping such as `{"degrees": 90.0}`.
- `Angle.from_dict(data)` parses that mapping. It raises `ValueError` in these cases:
  - the input is not a mapping with exactly one key;
  - the key is not a known unit;
  - the value is not a number.

### `luxide.progress`

- `format_percentage(p)` turns a fraction into a percentage string. It uses up to two decimals and only as many as needed: `0.42` gives `"42%"`, `0.425` gives `"42.5%"` and `0.4257` gives `"42.57%"`.
- `format_duration(d)` turns a `timedelta` into a string such as `"1h2m5.0s"`. Parts that are zero are left out, so a zero duration gives an empty string.
- `ProgressInfo` is a snapshot of a job's state. It holds `progress`, `elapsed`, `estimated_remaining` and `estimated_total`.
  - `ProgressInfo.empty()` returns an all-zero snapshot.
  - `str(info)` gives a one-line report such as `" 50.0% done... [1.0s elapsed, est. 1.0s/2.0s remaining]"`.
- `FormattedProgressInfo.from_info(info)` holds the same four fields as strings.
- `ProgressTracker(total, memory, update_interval, update_fn)` counts completed steps. Each `await tracker.mark()` records one step.
  - It calls `update_fn(info)` every `update_interval` steps and on the final step, and awaits the result.
  - The estimate of remaining time averages the gaps between the last `memory` reports.

### `luxide.arc_lock`

`ArcLock(value)` guards a shared value with a readers-writer lock. Waiting writers take priority over new readers.

- `with lock.read() as value:` gives shared access to the value.
- `with lock.write() as guard:` gives exclusive access. Read or replace the value through `guard.value`.
- `lock.read_only()` returns a `ReadOnlyArcLock`. It shares the same value and lock and offers only `read()`.
- `copy.copy(lock)` returns another handle to the same value.

### `luxide.synchronizer`

`Synchronizer()` runs its own event loop on a background thread. This lets synchronous code drive coroutines.

- `block_on(coro)` runs a coroutine to completion and returns its result.
- `spawn(coro)` schedules it and returns a `concurrent.futures.Future`.
- `close()` stops the loop and cancels anything still running. After that, `spawn` raises `RuntimeError`.
- It works as a context manager. `copy.copy` returns a new synchronizer with its own loop.

### `luxide.timestamps`

`formatted_timestamp(time)` formats a timezone-aware `datetime` as an RFC 3339 string in UTC, for example `"2024-01-02T03:04:05+00:00"`.

- Fractional seconds appear only when they are present. They are shown as milliseconds when that is exact, and as microseconds otherwise.
- A naive datetime raises `ValueError`.

## Example

```python
import asyncio
from datetime import timedelta

from luxide.interval import Interval
from luxide.units import Angle
from luxide.progress import ProgressTracker, format_duration, format_percentage

span = Interval(0.0, 10.0)
print(span.clamp(12.5))          # 10.0
print((span + 1.0).size())       # 10.0

print(Angle.degrees(180.0).as_radians())   # about 3.14159

print(format_percentage(0.4257))                 # 42.57%
print(format_duration(timedelta(seconds=3725)))  # 1h2m5.0s

async def report(info):
    print(info)

async def run():
    tracker = ProgressTracker(total=100, memory=10, update_interval=10, update_fn=report)
    for _ in range(100):
        await tracker.mark()

asyncio.run(run())
```

## What this package does not do

This package contains only the utilities listed above. It has none of the following:

- a renderer, geometry, materials or scene loading;
- no command-line program and no server;
- no storage of renders;
- no encoding of pixel data.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```