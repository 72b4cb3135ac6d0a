"""The dining table: philosophers sharing forks, watched by a monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dining.params import Params, current_millis


class Table:
    """Shared state of one simulation: forks, philosophers and the stop flag."""

    def __init__(self, nb_philos: int, params: Params, out: TextIO | None = None) -> None:
        if nb_philos <= 0:
            raise ValueError("there must be at least one philosopher")
        self.nb_philos = nb_philos
        self.params = params
        self.out = out if out is not None else sys.stdout
        self.start_time = current_millis()
        self._death = False
        self._log_lock = threading.Lock()
        self.life_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(nb_philos)]
        self.philosophers = [
            Philosopher(i + 1, self.forks[i], self.forks[(i + 1) % nb_philos], self)
            for i in range(nb_philos)
        ]

    def log(self, philo: Philosopher, message: str) -> None:
        """Write one timestamped status line for a philosopher."""
        with self._log_lock:
            timestamp = current_millis() - self.start_time
            self.out.write(f"{timestamp}ms {philo.ident} {message}\n")
            self.out.flush()

    def is_over(self) -> bool:
        """Tell whether the simulation has been stopped."""
        with self.life_lock:
            return self._death

    def stop(self) -> None:
        """Stop the simulation."""
        with self.life_lock:
            self._death = True

    def everybody_ate_enough(self) -> bool:
        """Tell whether every philosopher has eaten the required number of meals."""
        meals = self.params.meals
        if meals == 0:
            return False
        for philo in self.philosophers:
            with self.life_lock:
                if philo.eat_count < meals:
                    return False
        return True

    def check_starvation(self) -> bool:
        """Report the first starved philosopher and stop; return whether one died."""
        for philo in self.philosophers:
            with self.life_lock:
                if not self._death and current_millis() - philo.last_eat >= self.params.die_ms:
                    self.log(philo, "died")
                    self._death = True
                    return True
        return False

    def monitor(self) -> None:
        """Watch the philosophers until one starves or all have eaten enough."""
        while True:
            if self.check_starvation():
                return
            if self.everybody_ate_enough():
                self.stop()
                return
            time.sleep(0.001)

    def run(self) -> None:
        """Run the monitor and all philosophers, waiting for them to finish."""
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        threads = [
            threading.Thread(target=philo.run, name=f"philosopher-{philo.ident}")
            for philo in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        watcher.join()


class Philosopher:
    """One philosopher thinking, eating with two forks and sleeping."""

    def __init__(
        self,
        ident: int,
        left: threading.Lock,
        right: threading.Lock,
        table: Table,
    ) -> None:
        self.ident = ident
        self.left = left
        self.right = right
        self.table = table
        self.last_eat = table.start_time
        self.eat_count = 0

    @property
    def _forks_in_order(self) -> tuple[threading.Lock, threading.Lock]:
        if self.ident % 2 == 0:
            return self.right, self.left
        return self.left, self.right

    def still_alive(self) -> bool:
        """Tell whether this philosopher should keep going."""
        table = self.table
        with table.life_lock:
            if table._death:
                return False
            if current_millis() - self.last_eat >= table.params.die_ms:
                return False
            meals = table.params.meals
            if meals != 0 and self.eat_count == meals:
                return False
            return True

    def think(self) -> None:
        self.table.log(self, "is thinking")
        time.sleep(0.001)

    def take_forks(self) -> bool:
        """Pick up both forks; return False, holding none, if that fails."""
        table = self.table
        first, second = self._forks_in_order
        first.acquire()
        with table.life_lock:
            stopped = table._death
        if stopped:
            first.release()
            return False
        table.log(self, "has taken a fork")

        if table.nb_philos == 1:
            while current_millis() - self.last_eat < table.params.die_ms:
                time.sleep(0.0001)
            first.release()
            return False

        second.acquire()
        with table.life_lock:
            stopped = table._death
        if stopped:
            second.release()
            first.release()
            return False
        table.log(self, "has taken a fork")
        return True

    def eat(self) -> bool:
        """Take the forks and eat one meal; return False if the simulation ended."""
        if not self.take_forks():
            return False
        table = self.table
        with table.life_lock:
            if table._death:
                self.left.release()
                self.right.release()
                return False
            self.last_eat = current_millis()
            self.eat_count += 1
        table.log(self, "is eating")
        self.wait_for(table.params.eat_ms)
        self.left.release()
        self.right.release()
        return True

    def sleep(self) -> None:
        self.table.log(self, "is sleeping")
        self.wait_for(self.table.params.sleep_ms)

    def wait_for(self, duration: int) -> None:
        """Wait for the given milliseconds, returning early if the simulation stops."""
        start = current_millis()
        while current_millis() - start < duration:
            if self.table.is_over():
                break
            time.sleep(0.0001)

    def run(self) -> None:
        """Think, eat and sleep until the simulation ends for this philosopher."""
        table = self.table
        while self.still_alive():
            if table.is_over():
                break
            self.think()
            if table.is_over():
                break
            if not self.eat():
                break
            if table.is_over():
                break
            self.sleep()