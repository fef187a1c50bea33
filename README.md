# envoysync

A small library for working with `.env` files: parse them, lint them,
reformat them, merge and synchronise them, mask secrets, and keep several
environment profiles side by side.

It needs nothing beyond the Python standard library.

## Installation

```
pip install envoysync
```

## Parsing

```python
from envoysync.parsing import parse, parse_lines

env_file = parse(".env")
for entry in env_file.entries:
    print(entry.key, entry.value)

values = env_file.to_map()   # comment lines are left out
```

Blank lines are skipped, lines starting with `#` become entries with an
empty key and the line in `comment`, double quotes at either end of a value
are removed, and a line without `=` raises `ValueError`. `parse_lines`
does the same for lines you already have in memory.

## Secrets

`envoysync.mask.is_secret` treats a key as secret when its upper-cased name
contains `SECRET`, `PASSWORD`, `PASSWD`, `TOKEN`, `API_KEY`, `PRIVATE_KEY`,
`AUTH` or `CREDENTIAL` (or patterns you pass yourself). `mask_entry` and
`masked_map` replace secret values with `***`; `envoysync.redact.redact`
can also blank them or turn them into `{{KEY}}` placeholders.

## Checking a file

```python
from envoysync.lint import lint
from envoysync.schema import load_schema, check_schema
from envoysync.validate import validate_against_schema

result = lint(env_file.entries)
for issue in result.issues:
    print(issue)
if result.has_errors():
    raise SystemExit(1)

schema = load_schema("env.schema.json")
for violation in check_schema(env_file.entries, schema):
    print(violation)

validate_against_schema(values, example_values).raise_for_errors()
```

`lint` reports duplicate keys as errors, and keys that are not upper case,
empty values and values with surrounding whitespace as warnings.

A schema file is JSON; `pattern` is a regular expression searched for in
the value:

```json
{"fields": [{"key": "PORT", "required": true, "pattern": "^\\d+$"}]}
```

## Formatting and generating

```python
from envoysync.formatting import format_entries, FormatStyle
from envoysync.generate import generate

formatted = format_entries(env_file.entries, style=FormatStyle.ALIGNED,
                           sort_keys=True, mask_secret=True)
print("\n".join(formatted.lines))

template = generate(["APP_NAME", "DB_PASSWORD"], include_comments=True,
                    placeholder="CHANGEME")
print("\n".join(template.lines))
```

Styles are `compact` (`KEY=value`), `spaced` (`KEY = value`) and `aligned`
(the `=` signs line up). In generated templates secret keys get `***`
instead of the placeholder.

## Transforming

```python
from envoysync.interpolate import interpolate
from envoysync.normalize import normalize, normalize_summary
from envoysync.redact import redact, RedactMode

expanded = interpolate(env_file.entries, fail_on_missing=True)   # $VAR and ${VAR}

cleaned = normalize(env_file.entries, uppercase_keys=True, trim_values=True,
                    remove_empty=True, sort_alpha=True)
print(normalize_summary(cleaned))

safe = redact(env_file.entries, RedactMode.PLACEHOLDER, [])
```

More helpers:

- `envoysync.patch.patch` applies `PatchOp` set, delete and rename operations.
- `envoysync.rename.rename_entry` and `bulk_rename` rename keys in a mapping.
- `envoysync.rotate.rotate` replaces secret values using a function you supply.
- `envoysync.trim.trim` and `trim_keys` strip whitespace from values.
- `envoysync.sorting.sort_entries` orders entries alphabetically, in reverse,
  secrets first, or by key length.
- `envoysync.group.group_by` groups by prefix, secrecy or emptiness.
- `envoysync.scope` selects entries by key prefix and summarises prefixes.
- `envoysync.tag` labels entries and groups them by label.
- `envoysync.search.search` finds entries by exact, prefix or regex match.
- `envoysync.stats.gather_stats` and `top_prefixes` count keys, secrets,
  empty values, duplicates and prefixes.
- `envoysync.pin.pin` freezes values with a timestamp.
- `envoysync.template.render_template` fills `{{KEY}}` placeholders.

## Combining environments

```python
from envoysync.merge import merge, MergeStrategy
from envoysync.sync import sync, SyncStrategy
from envoysync.profiles import load_profile, list_profiles

result = merge(base_values, override_values, MergeStrategy.PREFER_OVERRIDE)
for conflict in result.conflicts:
    print(conflict.key, conflict.base_value, "->", conflict.override_value)

print(list_profiles("config"))        # finds dev.env, .env.staging, ...
staging = load_profile("config", "staging")
```

`envoysync.promote.promote` copies keys from one set of entries into
another, `envoysync.resolve.resolve` combines file values with the live
process environment and defaults, and `envoysync.inject.inject` sets values
in the current process environment (`os.environ`).

## Snapshots and watching

```python
import threading

from envoysync.snapshot import take_snapshot, save_snapshot, load_snapshot
from envoysync.watch import Watcher

snap = take_snapshot(".env", env_file.to_map())
save_snapshot("env.snapshot.json", snap)
restored = load_snapshot("env.snapshot.json")

watcher = Watcher(".env", interval=1.0)
stop = threading.Event()
for event in watcher.events(stop):
    print(event.file, event.changed, event.error)
```

`Watcher` compares MD5 checksums of the file; `poll()` checks once, and
`events()` keeps polling until the stop event is set.

## What it does not do

- There is no command-line program; everything is used from Python.
- There is no function that lists key-by-key differences between two
  files, profiles or a snapshot and the current values. `merge` and `sync`
  report conflicting keys, which covers part of that need.

## Running the tests

```
pip install -e ".[test]"
pytest
```