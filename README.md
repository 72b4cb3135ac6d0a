# dining

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. There is one fork between each pair of neighbours. A monitor thread
watches for starvation. The simulation stops when a philosopher dies. It also
stops when every philosopher has eaten the required number of meals, if that
number was given.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

All times are in milliseconds. `MEALS` is optional. When it is left out or
given as `0`, the simulation runs until a philosopher dies.

Example:

```
dining 5 800 200 200 7
```

Each event is printed as one line. The line holds the milliseconds since the
start, the philosopher's number and the action:

```
0ms 1 is thinking
1ms 1 has taken a fork
1ms 1 has taken a fork
1ms 1 is eating
...
```

The possible actions are `is thinking`, `has taken a fork`, `is eating`,
`is sleeping` and `died`.

The exit status is 0 after a finished simulation and 1 otherwise:

- With fewer than four arguments, or a number of philosophers that is not
  positive, the program exits with status 1 and prints nothing.
- If a time is not positive, or `MEALS` is negative, the program prints
  `Parameter no vailable` and exits with status 1.

Numbers are read leniently: leading blanks and one sign are accepted. Every
character after that is folded in as if it were a digit, with no check.

## Library use

```python
import sys
from dining.params import parse_params
from dining.table import Table

params = parse_params(["4", "800", "200", "200", "3"])
Table(4, params, sys.stdout).run()
```

`parse_params` takes the same arguments as the command. The first one, the
number of philosophers, is not part of the returned `Params`. It returns a
`Params` with `die_ms`, `eat_ms`, `sleep_ms` and `meals`. It raises
`ParamError`, a `ValueError`, when an argument is missing or out of range.

`Table(nb_philos, params, out)` writes its log lines to `out`, or to standard
output when `out` is `None`. `Table.run()` returns once every philosopher
thread and the monitor have finished.