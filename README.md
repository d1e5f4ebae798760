# purplekit

A small collection of self-contained utilities. None of them needs a third-party
runtime dependency.

- `purplekit.cron_parser` expands five-field cron expressions into sets of allowed values.
- `purplekit.timepoint` provides UTC time helpers.
- `purplekit.dotenv` loads `KEY=value` environment files.
- `purplekit.robots_txt` parses and rebuilds robots.txt files, and answers
  path-permission queries.
- `purplekit.jsonvalue` is a strict JSON parser with a mutable value model and a
  serializer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Cron expressions

`parse_cron` takes `minute hour day-of-month month day-of-week`. It returns a frozen
`CronParsedFields` that holds one frozenset per field.

```python
from purplekit.cron_parser import parse_cron, parse_field

fields = parse_cron("*/15 9-17 * * MON-FRI")
fields.minutes        # frozenset({0, 15, 30, 45})
fields.hours          # frozenset({9, ..., 17})
fields.days_of_week   # frozenset({1, 2, 3, 4, 5})

parse_field("22-2", 0, 23)   # {22, 23, 0, 1, 2}: a reversed range wraps around
```

The parser supports:

- `*` wildcards
- lists separated by `,`
- ranges written `a-b`
- steps written `*/n` or `a-b/n`
- month names (`JAN`–`DEC`)
- weekday names (`SUN`–`SAT`)

Day of week runs from 0 to 7. A plain value outside its field's range raises
`ValueError`, and so does an expression that does not have exactly five fields. The
helper `name_to_value` resolves a single month or weekday name, or reads an integer.

## Time helpers

```python
from datetime import datetime
from purplekit.timepoint import now, timepoint_string, is_leap_year, days_in_month

timepoint_string(datetime(2025, 7, 26, 10, 0, 0))  # "2025-07-26 10:00:00 UTC"
now()                     # aware datetime in UTC
is_leap_year(2024)        # True
days_in_month(2024, 2)    # 29
```

`timepoint_string` treats naive datetimes as UTC. `days_in_month` raises `ValueError`
when the month is outside 1–12.

## .env files

```python
from purplekit.dotenv import DotEnv, unquote_and_unescape

env = DotEnv()
env.load(".env")                       # raises OSError if the file cannot be read
env.get("APP_NAME")                    # raises KeyError when missing
env.get("MISSING", "default_value")
"DB_HOST" in env
env.has("DB_HOST")
```

The loader handles lines as follows:

- It trims each line.
- It skips blank lines, lines starting with `#`, and lines without `=`.
- It trims keys and values.
- It strips single quotes and returns the content verbatim.
- It strips double quotes and resolves the escapes `\n`, `\r`, `\t`, `\\` and `\"`.
- Calling `load` again adds variables and replaces existing ones.

## robots.txt

```python
from purplekit.robots_txt import RobotsTxt

robots = RobotsTxt.parse("User-agent: *\nDisallow: /private/\nAllow: /\n")
robots.is_path_allowed("AnyBot", "/private/page")  # False
robots.is_path_allowed("AnyBot", "/public")        # True
print(robots.build())
```

`RobotsTxt` is a dataclass with two fields:

- `user_agent_blocks`: a list of `UserAgentBlock`. Each block holds `user_agents`,
  `rules` (a list of `RobotsTxtRule` entries with a `DirectiveType`), `crawl_delay`
  and `host`.
- `sitemaps`: a set.

Every `User-agent` line starts a new block.

`is_path_allowed` chooses a block by these rules:

- A block naming the exact user agent wins over `*`.
- If no block applies, the path is allowed.

Within the chosen block:

- The longest rule whose path is a prefix of the queried path decides.
- A trailing `$` on a rule requires an exact match.
- If no rule matches, the path is allowed.

`build` writes user agents and sitemaps in sorted order.

## JSON

```python
from purplekit.jsonvalue import JsonValue, parse_json

doc = parse_json('{"name": "Alice", "courses": ["Math"]}')
doc["name"].as_string()        # "Alice"
doc["age"] = 31
doc["courses"].as_array().append(JsonValue("Physics"))
doc.serialize()                # compact
print(doc.serialize(pretty=True))   # four-space indentation

built = JsonValue()
built["items"][2] = True       # null becomes an array, padded with nulls
```

`JsonValue` holds one of null, boolean, number, string, array or object.
`JsonValueType` names these kinds.

- Check the kind with `is_null`, `is_bool` and the other `is_*` methods.
- Read the content with `as_bool`, `as_number`, `as_string`, `as_array` and
  `as_object`. Reading the wrong kind raises `JsonParseException`.
- Indexing a null value turns it into an array or an object.
- Indexing an object with a missing key adds that key with a null value.

The serializer's output:

- Numbers are printed with at most six decimal places, with trailing zeros removed.
- Infinity and NaN are written as `null`.
- Non-ASCII characters are written as `\uXXXX` escapes.

`JsonParser.parse` and `parse_json` raise `JsonParseException` on malformed input. This
includes trailing characters, leading zeros, unescaped control characters, and
`\u` escapes above ASCII.

## What this package does not do

The cron support stops at parsing expressions into value sets. There is no schedule
that computes the next run time, no job scheduler that runs callbacks, and no worker
pool. The package runs no background threads, servers or commands.