"""The dining philosophers simulation: one thread per philosopher plus a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from philo.config import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"

_PHILOSOPHER_POLL = 0.0002
_SINGLE_FORK_POLL = 0.00025
_ODD_START_DELAY = 0.0002
_MONITOR_POLL = 0.0005
_FORK_POLL = 0.001


def timestamp() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class _Philosopher:
    id: int
    left_fork: int
    right_fork: int
    last_meal: int = 0
    meals_eaten: int = 0


class Simulation:
    """Runs philosophers who eat, sleep and think until one dies or all have eaten."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self._forks = [threading.Lock() for _ in range(count)]
        self._print_lock = threading.Lock()
        self._data_lock = threading.Lock()
        self._philosophers = [
            _Philosopher(i, i, (i + 1) % count) for i in range(count)
        ]
        self.someone_dead = False
        self.all_ate = False
        self.start_time = timestamp()

    @property
    def meals_eaten(self) -> tuple[int, ...]:
        """How many times each philosopher has eaten, in seat order."""
        with self._data_lock:
            return tuple(p.meals_eaten for p in self._philosophers)

    def log(self, philosopher: int, action: str) -> None:
        """Write one action line for the 0-based philosopher unless the run is over."""
        with self._print_lock:
            if not self.someone_dead and not self.all_ate:
                self._write(f"{timestamp() - self.start_time} {philosopher + 1} {action}")

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for all of them."""
        self.start_time = timestamp()
        threads = []
        for philo in self._philosophers:
            philo.last_meal = self.start_time
            thread = threading.Thread(target=self._routine, args=(philo,), daemon=True)
            try:
                thread.start()
            except RuntimeError as exc:
                raise RuntimeError("pthread_create error") from exc
            threads.append(thread)
        monitor = threading.Thread(target=self._monitor, daemon=True)
        try:
            monitor.start()
        except RuntimeError as exc:
            raise RuntimeError("monitor thread error") from exc
        monitor.join()
        for thread in threads:
            thread.join()

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def _stopped(self) -> bool:
        return self.someone_dead or self.all_ate

    def _precise_sleep(self, duration: int) -> None:
        start = timestamp()
        while not self.someone_dead and timestamp() - start < duration:
            time.sleep(_PHILOSOPHER_POLL)

    def _take(self, fork: threading.Lock) -> bool:
        while not fork.acquire(timeout=_FORK_POLL):
            if self._stopped():
                return False
        return True

    def _eat(self, philo: _Philosopher) -> None:
        left = self._forks[philo.left_fork]
        if not self._take(left):
            return
        try:
            self.log(philo.id, TAKEN_FORK)
            if philo.left_fork == philo.right_fork:
                while not self.someone_dead:
                    time.sleep(_SINGLE_FORK_POLL)
                return
            right = self._forks[philo.right_fork]
            if not self._take(right):
                return
            try:
                self.log(philo.id, TAKEN_FORK)
                with self._data_lock:
                    self.log(philo.id, EATING)
                    philo.last_meal = timestamp()
                    philo.meals_eaten += 1
                self._precise_sleep(self.settings.time_to_eat)
            finally:
                right.release()
        finally:
            left.release()

    def _routine(self, philo: _Philosopher) -> None:
        if philo.id % 2:
            time.sleep(_ODD_START_DELAY)
        while not self._stopped():
            self._eat(philo)
            if self.all_ate:
                break
            self.log(philo.id, SLEEPING)
            self._precise_sleep(self.settings.time_to_sleep)
            self.log(philo.id, THINKING)

    def _check_death(self) -> bool:
        for philo in self._philosophers:
            if self.someone_dead:
                break
            with self._data_lock:
                if timestamp() - philo.last_meal > self.settings.time_to_die:
                    self.someone_dead = True
                    with self._print_lock:
                        self._write(f"{timestamp() - self.start_time} {philo.id + 1} died")
                    return True
        return False

    def _check_all_ate(self) -> bool:
        must_eat = self.settings.must_eat
        if must_eat is None:
            return False
        done = 0
        for philo in self._philosophers:
            with self._data_lock:
                if philo.meals_eaten >= must_eat:
                    done += 1
        if done == len(self._philosophers):
            with self._data_lock:
                self.all_ate = True
            return True
        return False

    def _monitor(self) -> None:
        while not self.all_ate and not self.someone_dead:
            if self._check_death() or self._check_all_ate():
                break
            time.sleep(_MONITOR_POLL)