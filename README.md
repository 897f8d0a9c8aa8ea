# katarunner

A small command-line companion for working through a set of macro exercises.
Every exercise lives in its own directory under `exercises/` and holds a
`main.rs` for you to edit, plus a reference `solutions/main.rs` and a
`solutions/solution.diff` that records how the two differ.

`katarunner` builds your attempt with `cargo`, shows its macro expansion next
to the expected one, and prints a unified diff until the two match.

## Installation

```
pip install .
```

The package itself has no dependencies beyond Python 3.10 or later. Running
the exercises needs `cargo` on your `PATH`, and the `test` and `goal`
commands need the `cargo expand` subcommand.

## Usage

By default commands work on the current directory, so run them from the root
of the exercise repository, or point at it with `--root`:

```
katarunner --root path/to/kata test 01_my_first_macro
```

### test

```
katarunner test 01_my_first_macro
```

Builds the exercise's binary. If the build writes anything to stderr or fails,
the errors are shown and the command exits with status 1. Otherwise it prints
the expansion you produced, the expansion of the `<exercise>_soln` binary, and
then either a congratulation (when they are identical) or the unified diff
between them. Cargo colour output is switched on only when stdout is a
terminal.

### goal

```
katarunner goal 02_numbers
```

Runs `cargo expand` on the solution binary and shows its output, so you know
what to aim for. Cargo's stderr is discarded.

### update-diff

```
katarunner update-diff 03_literal_variables
```

Rewrites `solutions/solution.diff` from the current `main.rs` and
`solutions/main.rs`. If either file cannot be read, an error is printed and
the command exits with status 1.

### check-all

```
katarunner check-all
```

Checks every directory under `exercises/` that holds a `main.rs`, in name
order: the three files must be readable, the stored diff must equal the
diff computed from `main.rs` and `solutions/main.rs`, and `cargo clippy` must
succeed on the solution binary. Each failure is reported on stderr and the
command exits with status 1 if there was any.

## Library use

The same steps are available from Python:

- `katarunner.diffing.unified_diff(before, after)` returns only the `@@`
  hunks (three lines of context, no file headers), or an empty string when
  the texts are equal.
- `katarunner.layout.ExercisePaths.for_exercise(root, exercise)` gives the
  `main`, `solution` and `diff` paths; `katarunner.layout.list_exercises(root)`
  lists exercise names.
- `katarunner.check.check(exercise, root, clippy=None)` raises a subclass of
  `CheckError` (`MainFileDoesNotExist`, `SolutionFileDoesNotExist`,
  `DiffFileDoesNotExist`, `DiffFileDoesNotMatch` with `actual` and `expected`,
  `SolutionFileDoesNotClippy`). Pass `clippy`, a callable taking the exercise
  name and root and returning a bool, to replace the `cargo clippy` run.
  `check_all(root, clippy=None)` returns the list of `(exercise, error)` pairs.
- `katarunner.update_diff.update_diff(exercise, root)` writes and returns the
  new diff.
- `katarunner.goal.goal(exercise, root=None)` returns cargo's exit status.
- `katarunner.trial.run_test(exercise, root=None, out=None, err=None)` returns
  the diff and raises `BuildFailed` when the build does not succeed cleanly.
- `katarunner.cargo` builds (`cargo_command`) and runs (`run_cargo`) cargo
  command lines; `solution_binary(exercise)` names the solution binary.

## Worked katas

The `katarunner.katas` package holds plain Python functions that show each
exercise's idea, for example `katarunner.katas.numbers.num`,
`katarunner.katas.literal_math.math`, `katarunner.katas.grid.for_2d`,
`katarunner.katas.repetition.if_any`, `katarunner.katas.mappings.hashmap`,
`katarunner.katas.graph.graph`, `katarunner.katas.number_type.get_number_type`,
`katarunner.katas.digits.number`, `katarunner.katas.currying.curry` and
`katarunner.katas.coordinates.coord`. Each module has a `main()` that prints a
short demonstration, and can be run with `python -m`:

```
python -m katarunner.katas.digits
```

## Limits

- Diffs are computed with Python's `difflib`. A `solution.diff` written by
  another diff tool may group its hunks differently and then fail
  `check-all`; regenerate it with `update-diff`.
- The package does not compile or expand code itself; `test`, `goal` and the
  clippy step of `check-all` all depend on `cargo`.

## Development

```
pip install .[test]
pytest
```