# zenops

Building blocks for declarative shell-config and dotfile management.

## Modules

- `zenops.safepath`: relative paths that cannot escape their parent
  directory through `..`. The check is lexical only; symlinks are not
  followed.
  - `SafeRelativePath.from_relative_path("a/b")` validates and wraps a
    path; `srpath("a/b")` does the same for literals. Both raise
    `PathGoesOutsideParent` when any component is `..`.
  - `try_join` joins an unchecked path (and raises on traversal),
    `safe_join` joins an already-safe path, `safe_parent` drops the last
    component (returns `None` for the empty path), `normalize_safe`
    drops `.` and empty segments, and `to_full_path(base)` gives a
    `pathlib.Path` beneath `base`. The `/` operator works like
    `try_join`.
  - `SinglePathComponent.try_new("name")` accepts exactly one segment
    and raises `NotASinglePathComponent` otherwise.
  - `is_safe_relative_path(path)` returns whether a path is free of
    `..`. All errors derive from `SafePathError`, a `ValueError`.
- `zenops.expand`: `ExpandStr` templates with `${name}` placeholders and
  no escape syntax. `ExpandStr("hi ${name}").expand_to_string({"name": "Ada"})`
  returns `"hi Ada"`; `write_expanded(lookup, out)` writes into any
  object with a `write` method. An unknown name raises
  `UnresolvedPlaceholder`, an unclosed `${` raises
  `UnterminatedPlaceholder`; both derive from `ExpandError`.
- `zenops.expand_lookup`: a lookup is a mapping or any object with a
  `write_value(name, out)` method. `ChainLookup(a, b, ...)` tries each
  lookup in order and uses the first that knows the name; otherwise it
  raises `LookupUnresolved`.
- `zenops.config`: configuration helpers.
  - `deep_merge(base, overlay)` merges nested mappings key by key; in
    every other case the overlay value wins.
  - `detect_brew_prefix()` returns the first of `/opt/homebrew`,
    `/usr/local` and `/home/linuxbrew/.linuxbrew` that holds
    `bin/brew`, or `None`; other candidates can be passed in.
  - `build_system_inputs(brew_prefix, user_name, user_email)` builds the
    placeholder values `brew_prefix`, `os`, `user.name` and
    `user.email`, leaving out those that are `None`.
  - `extract_toml_blocks(body)` returns the bodies of the fenced
    `toml` blocks in a Markdown text.
- `zenops.ansi`: `Styler(on=True)` hands out ANSI escape codes from
  methods such as `bold()`, `red()` and `reset()`; `Styler(on=False)`
  hands out empty strings, so they can be interpolated unconditionally.

## Example

```python
from zenops.config import build_system_inputs, detect_brew_prefix
from zenops.expand import ExpandStr
from zenops.safepath import srpath

rc = srpath(".config").safe_join(srpath("zenops/config.toml"))
print(rc.to_full_path("/home/ada"))

inputs = build_system_inputs(detect_brew_prefix(), "Ada", "ada@example.com")
print(ExpandStr("user=${user.name} os=${os}").expand_to_string(inputs))
```

## What the package does not do

There is no `zenops` command here. The package does not read
`config.toml` from disk, does not parse TOML itself, does not generate or
write shell profiles or other dotfiles, does not run git, and has no
`apply`, `status` or `doctor` workflow. It provides the path, template,
merge and styling pieces such a tool is built from.

## Tests

```
pip install -e .[test]
pytest
```