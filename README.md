# crablings

Support code for a course of small programming exercises: worked solutions
to the exercises, coloured status lines for the terminal, and a generator for
the `rust-project.json` file that lets a language server see every exercise
file.

## Installing

```
pip install .
```

The only runtime dependency is `rich`.

## Worked solutions

The `crablings.lessons` package holds solved exercises, grouped by topic:

- `basics`: `calculate_price_of_apples`, `sale_price`, `is_even`, `square`,
  `bigger`, `foo_if_fizz`, `animal_habitat`
- `sequences`: `array_and_vec`, `vec_loop`, `vec_map`, `is_a_color_word`,
  `trim_me`, `compose_me`, `replace_me`
- `quizzes`: `Command`, `transformer`, `ReportCard`
- `records`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order`, `create_order_template`, `Package`, `Point`, `Message`, `State`
- `maps`: `Fruit`, `make_fruit_basket`, `fill_fruit_basket`, `Team`,
  `build_scores_table`, `maybe_icecream`
- `errors`: `generate_nametag_text`, `total_cost`, `CreationError`,
  `ParsePosNonzeroError`, `PositiveNonzeroInteger`, `parse_pos_nonzero`
- `traits`: `Wrapper`, `append_bar`, `Licensed`, `SomeSoftware`,
  `OtherSoftware`, `compare_license_types`
- `testing`: `is_even`, `Rectangle`
- `pointers`: `Cons`, `create_empty_list`, `create_non_empty_list`, `Cow`,
  `abs_all`
- `iteration`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` and its errors `DivisionError`,
  `NotDivisibleError`, `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `Progress` and the `count_*` functions
- `conversions`: `Person`, `ParsePersonError`, `Color`, `IntoColorError`

For example:

```python
from crablings.lessons.basics import calculate_price_of_apples
from crablings.lessons.conversions import Color, Person
from crablings.lessons.iteration import divide

calculate_price_of_apples(41)     # 41
Person.from_text("Mark,20")       # Person(name='Mark', age=20)
Person.from_text("Mark")          # Person(name='John', age=30), the default
Person.parse("John,32,")          # raises ParsePersonError (kind BAD_LEN)
Color.try_from((183, 65, 14))     # Color(red=183, green=65, blue=14)
divide(81, 0)                     # raises DivideByZeroError
```

Where a lesson reports a failure it raises an exception; `list_of_results`
instead returns each quotient or the error for that element.

## Status lines

`crablings.ui` prints one-line messages through `rich`:

```python
from crablings.ui import success, warn

success("Successfully ran exercises/intro1.rs")   # green, prefixed with ✅
warn("Compilation failed!")                        # red, prefixed with ⚠️
```

When the environment variable `NO_EMOJI` is set (`no_emoji()` returns
`True`), the prefixes are the plain symbols `✓` and `!`.

## rust-project.json

`crablings.project.RustAnalyzerProject` builds the file a language server
reads to treat each exercise file as its own crate:

```python
from crablings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` takes the standard library path from `RUST_SRC_PATH`
  when it is set; otherwise it runs `rustc --print sysroot`, prints the
  toolchain it found, and appends `lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` adds a `Crate` for every `.rs` file below `root`,
  in sorted order; `add_path(path)` does the same for a single path and
  ignores anything that is not a `.rs` file.
- Each `Crate` has edition `"2021"`, no dependencies and the `test` cfg, so
  code inside test blocks is analysed too.
- `write_to_disk(path)` writes compact JSON; `to_dict()` gives the same
  structure as a dictionary.

## What this package does not do

There is no command-line program. The package does not read a course list,
compile or run exercise files, check whether an exercise is marked as done,
track progress, watch files for changes, show hints, or reset exercises. It
provides the solutions, the status-line helpers and the `rust-project.json`
generator described above, to be used from Python.