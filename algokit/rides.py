"""A ride-booking simulation: drivers shared between threads, payments and notifications."""

from __future__ import annotations

import argparse
import logging
import math
import queue
import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

FARE = 300

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    x: int = 0
    y: int = 0

    def distance(self, other: "Location") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(eq=False)
class Driver:
    id: int
    location: Location
    available: bool = True


def _default_drivers() -> list[Driver]:
    return [Driver(101, Location(1, 1)) for _ in range(3)]


class DriverManager:
    """Hands out the nearest free driver, making callers wait while none is free."""

    def __init__(self, drivers: Iterable[Driver] | None = None) -> None:
        self.drivers = list(drivers) if drivers is not None else _default_drivers()
        if not self.drivers:
            raise ValueError("at least one driver is needed")
        self._condition = threading.Condition()

    def find_nearest_driver(self, location: Location) -> Driver:
        """Block until a driver is free, then claim and return the nearest one."""
        with self._condition:
            self._condition.wait_for(lambda: any(d.available for d in self.drivers))
            best = min(
                (d for d in self.drivers if d.available),
                key=lambda d: d.location.distance(location),
            )
            best.available = False
            return best

    def release_driver(self, driver: Driver) -> None:
        with self._condition:
            driver.available = True
            self._condition.notify()


class PaymentService:
    """Collects payments into a running total shared between threads."""

    def __init__(self, delay: float = 1.0) -> None:
        self.delay = delay
        self._lock = threading.Lock()
        self._total = 0

    @property
    def total_earnings(self) -> int:
        with self._lock:
            return self._total

    def pay(self, amount: int) -> None:
        time.sleep(self.delay)
        with self._lock:
            self._total += amount


class NotificationService:
    def __init__(self, delay: float = 0.1) -> None:
        self.delay = delay

    def send(self, ride_id: int) -> None:
        time.sleep(self.delay)
        print(f"Notified to ride\n{ride_id}\n")


class ThreadPool:
    """A fixed set of worker threads taking tasks from a shared queue.

    Shutting down lets the workers finish every task already submitted.
    """

    _STOP = object()

    def __init__(self, workers: int) -> None:
        if workers < 1:
            raise ValueError("a pool needs at least one worker")
        self._tasks: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._stopped = False
        self._workers = [threading.Thread(target=self._work, daemon=True) for _ in range(workers)]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            task = self._tasks.get()
            if task is self._STOP:
                return
            try:
                task()
            except Exception:
                _log.exception("task failed")

    def submit(self, task: Callable[[], object]) -> None:
        with self._lock:
            if self._stopped:
                raise RuntimeError("cannot submit to a pool that has shut down")
            self._tasks.put(task)

    def shutdown(self) -> None:
        """Run the remaining tasks, then stop and join every worker."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            for _ in self._workers:
                self._tasks.put(self._STOP)
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()


class RideService:
    def __init__(
        self,
        drivers: DriverManager,
        payments: PaymentService,
        notifier: NotificationService | None = None,
        ride_time: float = 5.0,
    ) -> None:
        self.drivers = drivers
        self.payments = payments
        self.notifier = notifier if notifier is not None else NotificationService()
        self.ride_time = ride_time

    def book_ride(self, ride_id: int, location: Location) -> Driver:
        """Assign a driver, take payment, notify in the background, and finish the ride."""
        print(f"Ride Request {ride_id}")
        driver = self.drivers.find_nearest_driver(location)
        print(f"Driver {driver.id} assigned to the ride {ride_id}")
        self.payments.pay(FARE)
        with ThreadPoolExecutor(max_workers=1) as executor:
            notification = executor.submit(self.notifier.send, ride_id)
            time.sleep(self.ride_time)
            self.drivers.release_driver(driver)
            notification.result()
        print(f"ride {ride_id} completed")
        return driver


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate concurrent ride bookings.")
    parser.add_argument("--rides", type=int, default=8)
    parser.add_argument("--workers", type=int, default=4)
    parser.add_argument("--ride-time", type=float, default=5.0)
    parser.add_argument("--payment-delay", type=float, default=1.0)
    parser.add_argument("--notify-delay", type=float, default=0.1)
    parser.add_argument("--wait", type=float, default=3.0)
    args = parser.parse_args(argv)

    payments = PaymentService(args.payment_delay)
    service = RideService(
        DriverManager(),
        payments,
        NotificationService(args.notify_delay),
        args.ride_time,
    )
    with ThreadPool(args.workers) as pool:
        for ride_id in range(1, args.rides + 1):
            pool.submit(lambda ride_id=ride_id: service.book_ride(ride_id, Location(ride_id, ride_id)))
        time.sleep(args.wait)
        print(f"Total Earnings\n{payments.total_earnings}")
    return 0