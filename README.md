# macrokata

MacroKata is a set of exercises for learning how to write macros well. In a
kata checkout each exercise lives in its own directory under `exercises/`,
holding `main.rs`, a reference solution in `solutions/main.rs`, and the
expected diff between the two in `solutions/solution.diff`. This package is
the runner that works with those directories.

## Installing

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## Where the exercises are looked for

Every command works on the project directory that holds `exercises/`. It is
taken from the `--root` option if given, otherwise from the `MACROKATA_ROOT`
environment variable, otherwise the current directory.

## Working through the exercises

The `macrokata` command calls `cargo` (and `cargo expand`) on your behalf in
that directory, so both must be on your `PATH`.

```
macrokata test 01_my_first_macro
```

Builds your attempt (`cargo build --quiet --bin <exercise>`), prints its macro
expansion, prints the expansion of the `<exercise>_soln` binary, and shows a
unified diff between them. When they match you are told you solved it. If the
build fails or writes anything to stderr, its errors are shown and the command
exits with status 1.

```
macrokata goal 01_my_first_macro
```

Shows the expansion of the solution binary.

## Maintaining the exercises

```
macrokata update-diff 01_my_first_macro
```

Rewrites `exercises/<name>/solutions/solution.diff` from the current
`main.rs` and `solutions/main.rs`.

```
macrokata check-all
```

For every `exercises/*/main.rs`, confirms that the main file, the solution
and the stored diff can be read, that the stored diff still matches, and that
`cargo clippy --bin <name>_soln` succeeds. Each failing exercise is reported
on stderr, and the command exits with status 1 if any failed.

`macrokata --version` prints the version.

## Using it from Python

- `macrokata.check.check(exercise, root)` raises a subclass of `CheckError`
  (`MainFileDoesNotExist`, `SolutionFileDoesNotExist`, `DiffFileDoesNotExist`,
  `DiffFileDoesNotMatch` with `actual` and `expected`, or
  `SolutionFileDoesNotClippy`) when an exercise is out of order.
  `check_all(root)` checks every exercise and returns `True` if all pass.
- `macrokata.update_diff.update_diff(exercise, root)` writes the stored diff
  and returns its text.
- `macrokata.goal.goal(exercise, root)` runs `cargo expand` on the solution
  and returns its exit status.
- `macrokata.testing.run_test(exercise, root)` does what `macrokata test`
  does and returns the diff (empty when solved); it raises `BuildFailed` when
  the build fails.
- `macrokata.diffing.unified_diff(before, after)` produces the diff text used
  throughout: `@@` hunks with three lines of context and no file headers.
- `macrokata.paths.ExercisePaths.for_exercise(exercise, root)` gives the
  `main`, `solution` and `diff` paths of an exercise; `exercise_root(root)`
  resolves the project directory.
- `macrokata.cli.main(argv)` runs the command line and returns its exit
  status.

## The exercises' ideas in Python

The `macrokata.kata` package writes out what each exercise's macros do as
ordinary Python functions, each module with `run_...` functions that print
the exercise's output:

- `basics`: `show_output`, `num`, `math_plus`, `math_square`.
- `repetition`: `Coordinate`, `for_2d`, `if_any`, `hashmap`, `graph`.
- `ambiguity`: `get_number_type`, which tells a literal, a negative literal,
  a block (a callable) and an expression string apart, with `NumberType`,
  `NumberKind` and `sum_numbers`.
- `composition`: `digit`, `number`, `pair`, `hashmap_from`.
- `currying`: `curry`, `curry_fn`, `print_curried_argument`.
- `coordinates`: `coord`, building `Coordinate2D`, `Coordinate3D` or
  `Coordinate4D` from two, three or four values.

## What it does not do

The package does not contain the exercise files themselves; it needs a kata
checkout with an `exercises/` directory and a cargo project that defines the
`<exercise>` and `<exercise>_soln` binaries. It does not compile or expand
macros on its own: building, expanding and linting are left to `cargo`.