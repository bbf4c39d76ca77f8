# cookbook

A collection of small, self-contained command-line tools and library
modules: text utilities, duplicate-line and word counting, temperature,
length and weight conversions, bzip2 compression, HTTP fetching, tiny
web servers, fractal images and a deep equality check.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

| Command | What it does |
| --- | --- |
| `cookbook-textfmt` | Subcommands `basename` (base name of each line of stdin, without directory or `.suffix`), `comma` (groups digits with commas) and `printints` (prints integers as `[1, 2, 3]`). |
| `cookbook-echo` | Prints its arguments joined by a separator (`-s`, default a space); `-n` omits the trailing newline. |
| `cookbook-dup` | Prints the count and text of lines that appear more than once in standard input or the named files. `-o` also lists where each line was found; `-w` splits whole files on every newline. |
| `cookbook-dedup` | Prints each distinct line of standard input once, in first-seen order. |
| `cookbook-wordfreq` | Reports how often each word occurs in an input file (`-i file`, default `input.txt`; `-h` for help). |
| `cookbook-charcount` | Counts Unicode characters and UTF-8 encoding lengths in standard input; `-c` counts by Unicode category instead. |
| `cookbook-graph` | Builds a small directed graph and prints the result of several edge queries. |
| `cookbook-netflag` | Demonstrates setting and clearing interface flags, printing the bits. |
| `cookbook-tempconv` | Subcommands `boiling`, `ftoc`, `cf` and `kelvin` for Celsius, Fahrenheit and Kelvin conversions. |
| `cookbook-units` | Converts each numeric argument between temperature, length and weight units. |
| `cookbook-bzip` | bzip2-compresses standard input to standard output. |
| `cookbook-fetch` | Prints the content found at each URL. `--https` forces `https://` and reports each URL fetched, `--status` also reports the status code, `--copy` streams each body and reports its size. |
| `cookbook-fetchall` | Fetches URLs in parallel and prints time, size and URL as each finishes, then the total elapsed time. |
| `cookbook-autoescape` | Renders the same markup once HTML-escaped and once as trusted HTML. |
| `cookbook-server` | Serves on `localhost:8000`: `echo` (default) echoes the URL path, `counter` also counts requests and reports them at `/count`, `dump` echoes the whole request. |
| `cookbook-mandelbrot` | Writes a 1024×1024 PNG to standard output: `mandelbrot` (default), `acos`, `sqrt` or `newton`. |
| `cookbook-jpeg` | Reads a PNG or JPEG image from standard input and writes it as JPEG (quality 95), reporting the input format on standard error. |

Example:

```
cookbook-mandelbrot | cookbook-jpeg > mandelbrot.jpg
cookbook-echo -s , a b c
cookbook-tempconv cf 100
```

## Library modules

- `cookbook.textfmt` — `basename`, `comma`, `ints_to_string`, `quote`, `format_g`.
- `cookbook.echo` — `echo`, `concat_args`, `join_args`, `numbered_args`, `time_echoes`.
- `cookbook.dup` — `count_lines`, `split_lines`, `count_with_origins`, `duplicates`.
- `cookbook.textstats` — `dedup`, `word_counts`.
- `cookbook.charcount` — `count_chars`, `count_categories`, `category_of`, `format_counts`, `format_categories`, with the `CharCounts` and `CategoryCounts` results.
- `cookbook.word` — `is_palindrome` ignores case and non-letters; `is_palindrome_bytes` is a naive byte-wise check.
- `cookbook.graph` — `Graph` with `add_edge` and `has_edge`.
- `cookbook.netflag` — `Flags` with `is_up`, `turn_down`, `set_broadcast`, `is_cast`.
- `cookbook.tempconv` — `Celsius`, `Fahrenheit`, `Kelvin` and the `c_to_f`, `f_to_c`, `c_to_k`, `k_to_c`, `f_to_k`, `k_to_f` conversions.
- `cookbook.units` — `Foot`, `Meter`, `Pound`, `Gram` with `f_to_m`, `m_to_f`, `p_to_g`, `g_to_p`, and `report`.
- `cookbook.treesort` — `sort` sorts a list in place using a binary tree.
- `cookbook.bzip` — `BzipWriter`, a context-managed writer producing bzip2 streams; closing it does not close the underlying stream.
- `cookbook.fetch` — `fetch`, `copy_url`, `normalize_url`, `fetch_all`, raising `FetchError` on failure.
- `cookbook.autoescape` — `render` escapes one value and trusts the other.
- `cookbook.server` — `EchoHandler`, `CounterHandler`, `RequestDumpHandler`, `echo_path`, `describe_request`, `make_server`.
- `cookbook.mandelbrot` — `mandelbrot`, `acos`, `sqrt`, `newton` colour functions and `render`, which returns a Pillow image.
- `cookbook.jpeg` — `to_jpeg` converts an image stream to JPEG.
- `cookbook.equal` — `equal` is a deep equality that copes with cyclic data.

```python
from cookbook.word import is_palindrome
from cookbook.textfmt import comma
from cookbook.equal import equal

is_palindrome("A man, a plan, a canal: Panama")   # True
comma("1234567890")                               # "1,234,567,890"
equal([1, [2, 3]], [1, [2, 3]])                   # True
```

## What is not included

The package has no message-digest tools, no issue-tracker search, no
animated GIF or SVG surface generation, no query-parameter parsing
endpoint, and no structured value formatting or S-expression encoding.