"""The dining philosophers: settings, philosophers and the simulation that runs them."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from cursus.philo.timing import current_time_ms, parse_long, precise_sleep

BUFFER_MS = 5
EVEN_START_DELAY_MS = 10
_MONITOR_PAUSE_S = 0.0001


@dataclass(frozen=True)
class Settings:
    """The parameters of one simulation, times in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None

    @classmethod
    def from_args(cls, args: list[str]) -> Settings:
        """Build settings from four or five command-line words.

        The words are count, time to die, time to eat, time to sleep and,
        optionally, how many meals every philosopher must eat.
        """
        if len(args) not in (4, 5):
            raise ValueError("expected four or five arguments")
        values = [parse_long(arg) for arg in args]
        meals = values[4] if len(values) == 5 else None
        return cls(values[0], values[1], values[2], values[3], meals)


@dataclass(eq=False)
class Philosopher:
    """One philosopher at the table, sharing a fork with each neighbour."""

    id: int
    simulation: Simulation
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal_time: int
    meals_eaten: int = 0
    eating: bool = False

    def take_forks(self) -> None:
        """Pick up both forks; even philosophers start with the left one."""
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        first.acquire()
        self.simulation.report("has taken a fork", self)
        second.acquire()

    def eat(self) -> None:
        """Take the forks, eat for the configured time and put the forks down."""
        simulation = self.simulation
        self.take_forks()
        try:
            with simulation.meal_lock:
                self.eating = True
            simulation.report("is eating", self)
            with simulation.meal_lock:
                self.last_meal_time = current_time_ms()
                self.meals_eaten += 1
            precise_sleep(simulation.settings.time_to_eat)
            with simulation.meal_lock:
                self.eating = False
        finally:
            self.left_fork.release()
            self.right_fork.release()

    def sleep(self) -> None:
        """Sleep for the configured time."""
        self.simulation.report("is sleeping", self)
        precise_sleep(self.simulation.settings.time_to_sleep)

    def think(self) -> None:
        """Announce thinking; thinking lasts until the forks are free."""
        self.simulation.report("is thinking", self)

    def routine(self) -> None:
        """Eat, sleep and think until the simulation is over."""
        if self.id % 2 == 0:
            precise_sleep(EVEN_START_DELAY_MS)
        while not self.simulation.is_over():
            self.eat()
            self.sleep()
            self.think()


class Simulation:
    """A table of philosophers watched by a monitor until one dies or all have eaten."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        if settings.count < 2:
            raise ValueError("a simulation needs at least two philosophers")
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self.over = False
        forks = [threading.Lock() for _ in range(settings.count)]
        self.start_time = current_time_ms()
        self.philosophers = [
            Philosopher(
                id=position + 1,
                simulation=self,
                left_fork=fork,
                right_fork=forks[position - 1],
                last_meal_time=self.start_time,
            )
            for position, fork in enumerate(forks)
        ]

    def report(self, message: str, philosopher: Philosopher) -> None:
        """Print a timestamped state change unless the simulation has ended."""
        with self.print_lock:
            elapsed = current_time_ms() - self.start_time
            if not self.is_over():
                self.out.write(f"{elapsed} {philosopher.id} {message}\n")

    def is_over(self) -> bool:
        """Tell whether a philosopher died or everyone ate enough."""
        with self.dead_lock:
            return self.over

    def _finish(self) -> None:
        with self.dead_lock:
            self.over = True

    def check_dead(self) -> bool:
        """Announce and end the simulation if a philosopher went hungry too long."""
        for philosopher in self.philosophers:
            with self.meal_lock:
                since_meal = current_time_ms() - philosopher.last_meal_time
                eating = philosopher.eating
            if since_meal >= self.settings.time_to_die + BUFFER_MS and not eating:
                self.report("died", philosopher)
                self._finish()
                return True
        return False

    def all_ate(self) -> bool:
        """End the simulation once every philosopher has eaten the required meals."""
        required = self.settings.meals_required
        if required is None:
            return False
        with self.meal_lock:
            done = all(p.meals_eaten >= required for p in self.philosophers)
        if done:
            self._finish()
        return done

    def monitor(self) -> None:
        """Watch the table until a philosopher dies or all have eaten."""
        while not (self.check_dead() or self.all_ate()):
            time.sleep(_MONITOR_PAUSE_S)

    def run(self) -> None:
        """Start the monitor and every philosopher, and wait for them all."""
        now = current_time_ms()
        self.start_time = now
        for philosopher in self.philosophers:
            philosopher.last_meal_time = now
        threads = [threading.Thread(target=self.monitor, name="monitor")]
        threads.extend(
            threading.Thread(target=p.routine, name=f"philosopher-{p.id}")
            for p in self.philosophers
        )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()