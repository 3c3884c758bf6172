# philo

A threaded simulation of the dining philosophers problem.

Each philosopher runs in its own thread and repeats the cycle eat, sleep, think.
To eat, a philosopher must hold the forks on both sides. A monitor thread stops
the simulation in two cases:

- a philosopher has gone longer than the time to die without eating;
- a meal count was given and every philosopher has eaten at least that many times.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_PER_PHILOSOPHER]
```

All times are in milliseconds.

Each argument is read leniently:

- leading blanks are skipped;
- one `+` or `-` sign is allowed;
- anything after the digits is ignored;
- text with no digits reads as 0.

Every value must then be at least 1. The command writes `Error: Invalid arguments`
to standard error and exits with status 1 in these cases:

- there are not four or five arguments;
- any value is below 1.

If a thread cannot be started, the command writes an `Error:` line and exits
with status 1. A run that completes exits with status 0.

Each event is written to standard output as one line: the milliseconds since the
start, the philosopher's number (counted from 1), and the action.

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
810 3 died
```

After a death, or once every philosopher has eaten enough, no further action
lines are printed.

Examples:

```
philo 5 800 200 200        # runs until someone dies
philo 5 800 200 200 7      # stops once everyone has eaten 7 times
philo 1 800 200 200        # a lone philosopher holds one fork and dies
```

## Library use

```python
import sys
from philo.config import parse_args
from philo.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
sim = Simulation(settings, sys.stdout)
sim.run()
print(sim.meals_eaten, sim.someone_dead, sim.all_ate)
```

Configuration (`philo.config`):

- `parse_args` returns a frozen `Settings` dataclass. Its fields are
  `philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `must_eat`.
  `must_eat` is `None` when no meal count is given.
- `parse_args` raises `ConfigError`, a subclass of `ValueError`, on bad input.
- `parse_int` is the lenient reader described above. It wraps its result
  like a 32-bit signed integer.

Simulation (`philo.simulation`):

- `Simulation.log(philosopher, action)` writes one action line for a
  0-based philosopher. It writes nothing once the run is over.
- `timestamp()` returns the wall-clock time in milliseconds.

## Helpers

`philo.formatting`:

- `format_string(fmt, *args)` supports the conversions
  `%c %s %p %d %i %u %x %X %%`.
- A `None` string formats as `(null)`. A `None` pointer formats as `0x0`.
- Integers wrap to 32 bits.
- An unknown conversion is dropped and takes no argument.
- `print_formatted(fmt, *args, file=None)` writes the formatted text and
  returns its length.

`philo.linereader`:

- `LineReader(stream, buffer_size=42)` reads any object that has a
  `read(size)` method, text or binary. `next_line()` returns each line with
  its newline, and returns `None` at the end. A `LineReader` can also be iterated.
- `get_next_line(fd)` reads bytes from a file descriptor. It keeps separate
  unread data for each descriptor. It returns `None` in three cases: end of
  input, a negative descriptor, or a read error.

`philo.strutil`:

| Function | What it does |
| --- | --- |
| `atoi(text)` | Same reading as `parse_int`. |
| `itoa(n)` | Converts an integer to its decimal string. Anything else raises `TypeError`. |
| `split(text, sep)` | Splits on a single character and drops empty pieces. |
| `strtrim(text, charset)` | Removes leading and trailing characters that appear in `charset`. |
| `substr(text, start, length)` | Returns at most `length` characters starting at `start`. Gives `""` when `start` is past the end. |
| `strnstr(haystack, needle, length)` | Returns the index of `needle` within the first `length` characters, or `None`. An empty needle is found at 0. |
| `strncmp(s1, s2, n)` | Returns 0 on a match. Otherwise returns the code-point difference at the first mismatch. |
| `put_number(n, file=None)` | Writes `n` in decimal. |

## Running the tests

```
pip install .[test]
pytest
```