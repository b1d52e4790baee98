# concurrex

A small collection of thread-based concurrency patterns.

- **Streams** (`concurrex.generators`): `generate(done, *values)` yields its
  arguments in order, and `generate_from_func(done, fn)` yields the values
  returned by `fn`, which is called only when the first value is requested.
  Both stop early once the `threading.Event` `done` is set.
- **Fan-out** (`concurrex.fanout`): `fanout(done, source, num_workers, work)`
  lets `num_workers` threads pull from `source` and apply `work`, merging the
  results into one iterator in completion order. The iterator ends when every
  worker has finished or `done` is set.
  `fanout_with_sem(done, source, num_workers, concurrency_limit, work)` does the
  same while a semaphore keeps at most `concurrency_limit` workers running at
  once; a limit below 1 raises `ValueError`.
- **Downloader** (`concurrex.downloader`): `Downloader(concurrency_limit)`
  generates the URLs of photo records 1 to 5000 on a public JSON photos
  endpoint (`generate_image_urls`), fetches them with a pool of
  `concurrency_limit` worker threads guarded by a semaphore (`fetch`), and
  decodes each answer into an `APIResult` (`album_id`, `id`, `title`, `url`,
  `thumbnail_url`). Every fetch yields a `Result` holding either the record or
  the error: a request failure, a status other than 200, or a malformed body.
  `run(stop)` counts the successful fetches and returns that count; while it
  runs it appends a line with the thread count and the downloaded count to
  `logs.txt` in the current directory once a second.
- **Rate limiter** (`concurrex.limiter`): `NaiveLimitedRunner(limit,
  reset_interval)` fetches the URLs of the `Task` objects given to `add_tasks`.
  At most `limit` fetches may start per `reset_interval` seconds; the token
  pool is refilled on each tick. `start(stop=None)` blocks until every task has
  been handled or `stop` is set. `fetch(url)` returns the response status code,
  or `None` if the request failed.
- **Mutex counter** (`concurrex.counter`): `simple_mutex_counter_driver(iterations=1000)`
  has one thread increment a shared counter `iterations` times and another
  decrement it `iterations - 10` times under a lock, and returns the final
  count (10 by default).
- **Runner bookkeeping** (`concurrex.runner`): `Runner(concurrency_limit)` holds
  the limit, a bounded semaphore of 100 slots and the set of active users added
  with `add_user`.
- **Slice** (`concurrex.dynslice`): `Slice(length)` is a growable sequence that
  starts with `max(length, 1)` slots set to `None`. `append` adds at the end;
  `insert_at` replaces the element at an existing index; `pop`, `remove_at`,
  `swap`, `slice`, indexing, `len`, iteration and `to_list` work as their names
  say. Any index out of range, and popping from an empty slice, raises
  `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

```
concurrex            # stream and fan-out demos, then the concurrent downloader
concurrex-slice      # the Slice demo
concurrex-counter    # the mutex counter demo
concurrex-limiter    # the rate-limited fetcher demo (two tasks, 3 per second)
```

`concurrex` runs the downloader with a single worker for at most three minutes.
It needs network access, appends progress lines to `logs.txt`, and always
exits with status 1 once the download run is over.

## Library use

```python
import threading

from concurrex.fanout import fanout
from concurrex.generators import generate

done = threading.Event()
doubled = sorted(fanout(done, generate(done, 1, 2, 3, 4, 5), 3, lambda v: v * 2))
print(doubled)  # [2, 4, 6, 8, 10]
```

```python
from concurrex.dynslice import Slice

s = Slice(2)             # [None, None]
s.append("foo")          # [None, None, "foo"]
s.insert_at(0, "bas")    # ["bas", None, "foo"]
s.insert_at(1, "boo")    # ["bas", "boo", "foo"]
s.remove_at(1)           # ["bas", "foo"]
print(s.pop(), s.to_list())  # foo ['bas']
```

## What it does not do

- The downloader fetches and decodes photo *records* only; it does not save
  image files to disk.
- `Runner` only keeps its limit, slots and users; it does not run tasks or
  enforce time limits on them.
- The rate limiter and downloader only issue GET requests to fixed URLs; there
  is no option to configure the endpoint from the command line.