"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import TextIO

from cursus.philo.table import Settings, Simulation
from cursus.philo.timing import all_digits, parse_long, precise_sleep

INT_MAX = 2**31 - 1
MAX_PHILOSOPHERS = 200


def check_input(args: list[str]) -> bool:
    """Tell whether the arguments are acceptable for a simulation."""
    if len(args) not in (4, 5):
        return False
    if not all_digits(args):
        return False
    if parse_long(args[0]) > MAX_PHILOSOPHERS:
        return False
    return all(parse_long(arg) <= INT_MAX for arg in args)


def usage_text() -> str:
    """Return the help shown when the arguments are wrong."""
    return (
        "\033[1m\033[31mWRONG INPUT\033[0m\n"
        "\033[1m\033[32mUsage:\033[0m philo <number_of_p> <time_to_die>"
        " <time_to_eat> <time_to_sleep>"
        " <[number_of_times_each_philosopher_must_eat]>\n"
        "\033[1m\033[31mWARNING:\033[0m \033[1;33m1)\033[0mtime_to_eat +"
        " time_to_sleep < time_to_die\n"
        "\t \033[1;33m2)\033[0mnumber_of_p <= 200\n"
        "\t \033[1;33m3)\033[0mtime_to_die ||"
        " time_to_eat || time_to_sleep < INT_MAX\n"
        "\033[1m\033[34mExample1:\033[0m philo 4 800 200 200\n"
        "\033[1m\033[34mExample2:\033[0m philo 4 800 200 200 4\n"
    )


def one_philosopher(args: list[str], out: TextIO | None = None) -> None:
    """Play out a lone philosopher, who holds one fork and starves."""
    out = sys.stdout if out is None else out
    time_to_die_text = args[1]
    last = time_to_die_text[-1:]
    first_stamp = ord(last) - ord("0") if last else 0
    time_to_die = parse_long(time_to_die_text)
    out.write(f"{first_stamp} 1 has taken a fork\n")
    out.flush()
    precise_sleep(time_to_die)
    out.write(f"{time_to_die} {parse_long(args[0])} died\n")
    out.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the simulation described by the command-line arguments."""
    args = sys.argv[1:] if argv is None else argv
    if not check_input(args):
        sys.stdout.write(usage_text())
        return 1
    if parse_long(args[0]) == 1:
        one_philosopher(args)
        return 2
    try:
        simulation = Simulation(Settings.from_args(args))
    except ValueError:
        sys.stdout.write(usage_text())
        return 1
    simulation.run()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())