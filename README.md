# rustdrill

`rustdrill` is a small library that goes with a course of Rust exercises.
It provides three things:

- coloured status lines for the terminal (`rustdrill.ui`)
- a generator for the `rust-project.json` file that lets rust-analyzer see
  stand-alone exercise files (`rustdrill.project`)
- worked solutions to many course topics, written as plain Python
  (`rustdrill.exercises`)

## Requirements

- Python 3.11 or later
- `rich`, which is installed with the package
- `rustc` on your `PATH`, but only for
  `RustAnalyzerProject.get_sysroot_src()`

## Installation

```
pip install rustdrill
```

## Status lines: `rustdrill.ui`

```python
from rustdrill.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`warn(message)` prints the message in red after a warning sign.
`success(message)` prints it in green after a check mark. When the
`NO_EMOJI` environment variable is set, the prefixes are the plain
characters `!` and `✓`. `no_emoji()` reports whether that variable is set.

## rust-analyzer projects: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()             # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk()               # writes ./rust-project.json
```

- `get_sysroot_src()` runs `rustc --print sysroot`, prints the toolchain it
  found, and sets `sysroot_src` to `<toolchain>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root="./exercises")` walks `root` recursively and calls
  `add_path` for every entry, in sorted order.
- `add_path(path)` adds a `Crate` when the text after the first `.` in the
  path is exactly `rs`. A path with a dot earlier in it, such as `./a.rs`,
  is therefore skipped. Each crate uses edition `"2021"`, has no
  dependencies, and has `cfg` set to `["test"]` so that rust-analyzer also
  works inside test code.
- `to_json()` returns the compact JSON text. `write_to_disk(path="./rust-project.json")`
  writes that text to the file.

## Worked solutions: `rustdrill.exercises`

Each module holds plain functions and classes for one course topic:

| Module | Contents |
| --- | --- |
| `basics` | `bigger`, `foo_if_fizz`, `maybe_icecream`, `sale_price`, `is_even`, `square`, `Wrapper` |
| `lifetimes` | `longest` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Uppercase`, `Trim`, `Append`, and `ReportCard` |
| `errors` | `generate_nametag_text`, `parse_int`, `total_cost`, `remaining_tokens`, `parse_pos_nonzero`, `PositiveNonzeroInteger` and its errors |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, and counting by `Progress` |
| `pointers` | a cons list (`Cons`, `Nil`), a clone-on-write `Cow` with `abs_all`, and `offset_sums` over threads |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map` |
| `hashmaps` | `fruit_basket`, `fill_fruit_basket`, `build_scores_table`, `Team`, `Fruit` |
| `strings` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package` |
| `traits` | `append_bar`, `Licensed`, `compare_license_types`, `SomeTrait`, `OtherTrait`, `some_func` |
| `enums` | a message-driven `State` with `ChangeColor`, `Echo`, `Move`, `Quit` |

```python
from rustdrill.exercises.iterators import capitalize_words_string, divide
from rustdrill.exercises.quizzes import calculate_price_of_apples

capitalize_words_string(["hello", " ", "world"])  # "Hello World"
divide(81, 9)                                     # 9
calculate_price_of_apples(41)                     # 41
```

Failures are raised as exceptions. For example, `divide(81, 0)` raises
`DivideByZeroError`, `divide(81, 6)` raises `NotDivisibleError`, and
`parse_pos_nonzero("0")` raises `ParsePosNonzeroError`, which wraps a
`CreationError`.

## What this package does not do

`rustdrill` has no command-line program. It does not read a course's
`info.toml`, and it does not compile, run, test, lint or verify exercise
files. It also has no watch mode, no exercise list, no hints and no reset.
The only external program it starts is `rustc --print sysroot`, from
`RustAnalyzerProject.get_sysroot_src()`.

## Running the tests

```
pip install "rustdrill[test]"
pytest
```