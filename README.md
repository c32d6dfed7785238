# cursus

Three small console programs in one package, with no dependencies beyond
the standard library:

- **minishell** – an interactive shell with a handful of builtins,
  pipelines and file redirection (`cursus.shell`).
- **philo** – the dining-philosophers problem, simulated with one thread
  per philosopher and a monitor thread (`cursus.philo`).
- **animals** – demonstrations of polymorphic classes: plain animals,
  animals with a brain that is deep-copied, and an abstract base
  (`cursus.animals`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## minishell

```
minishell
```

Starts a prompt `minishell> `. Each line is split on spaces; the first
word selects what runs. Empty lines are skipped.

Builtins:

| command          | effect                                                      |
|------------------|-------------------------------------------------------------|
| `cd [dir]`       | change directory (to `$HOME` with no argument)              |
| `env`            | print the environment as `NAME=value` lines                 |
| `export K=V ...` | set environment variables                                   |
| `unset K ...`    | remove environment variables                                |
| `echo [-n] ...`  | print the words separated by spaces; `-n` drops the newline |
| `clear`          | clear the screen                                            |
| `exit`           | leave the shell                                             |

In `echo`, a word `$?` prints the exit status of the last program the
shell ran, and `$NAME` prints the value of a set variable; either one is
printed on a line of its own and ends the output of that `echo`. A word
that starts with a quote is printed up to its closing quote.

Any other command is looked up on `PATH` (or used as given when it
contains a `/`) and run. If nothing is found, `<name>: Command not found`
is printed. Redirections `< file`, `> file` (truncate) and `>> file`
(append) apply to a single program; output files are created with mode
0644. Commands joined with `|` form a pipeline: the stages run one after
another, each reading what the previous one wrote, and the last writing
to the terminal.

Ctrl-D ends the session; Ctrl-C discards the current line and shows a
fresh prompt; Ctrl-\ is ignored. The shell takes no arguments; passing
any prints a usage hint and exits with status 1.

The loop can also be driven from Python, for example in scripts or tests:

```python
import io
from cursus.shell.repl import run

out = io.StringIO()
state = run(["export GREETING=hello", "echo $GREETING", "exit"], out=out)
print(out.getvalue())   # "hello\n"
print(state.status)     # exit status of the last program run
```

### What the shell does not do

Arguments are split on spaces only: there is no general quoting,
escaping, globbing or variable expansion outside `echo`. Redirections are
not applied to builtins or to pipelines, and pipeline stages do not run
concurrently. There is no job control, no here-documents and no `&&`,
`||` or `;`.

## philo

```
philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [meals_required]
```

Times are in milliseconds. Every value must consist of digits only, be at
most 2147483647, and the number of philosophers may not exceed 200;
otherwise a usage message is printed and the exit status is 1. Each line
of output has the form

```
<elapsed_ms> <philosopher_id> <action>
```

where the action is `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. The simulation stops when a philosopher dies or,
if `meals_required` is given, when every philosopher has eaten that many
times. A single philosopher takes one fork, waits `time_to_die` and dies;
the command then exits with status 2.

Examples:

```
philo 4 800 200 200
philo 4 800 200 200 4
```

From Python:

```python
import io
from cursus.philo.table import Settings, Simulation

out = io.StringIO()
Simulation(Settings.from_args(["4", "800", "200", "200", "2"]), out=out).run()
```

## animals

```
animals
animals-thinking
animals-abstract
```

Each command builds a few animals, makes them speak and reports their
construction, copying and destruction.

- `animals` (`cursus.animals.basic`) shows `Dog` and `Cat` overriding
  `Animal.sound`, while `WrongCat.make_sound` still prints the
  `WrongAnimal` sound.
- `animals-thinking` (`cursus.animals.thinking`) gives `Dog` and `Cat` a
  `Brain` of 100 idea slots and shows that `copy()` duplicates the brain,
  so changing one copy's ideas leaves the other untouched.
- `animals-abstract` (`cursus.animals.abstract`) uses the abstract base
  `AAnimal`, which cannot be instantiated on its own.

The classes can also be used directly:

```python
import sys
from cursus.animals.thinking import Dog

first = Dog()
first.set_idea(0, "I want a bone")
second = first.copy()
second.set_idea(0, "I want a nap")
first.make_sound(sys.stdout)   # WUFF! WUFF! WUFF!
```

`get_idea` returns the idea wrapped in terminal colour codes, or an
`INVALID_INDEX` marker for an index outside 0–99; `set_idea` ignores
such an index.