"""Drives a particle system, stepping it on a timer or on demand."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Any, Callable

from amoebot.node import Node
from amoebot.system import System


class Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class Simulator:
    """Runs activations of a system, optionally on a background timer."""

    def __init__(self, system: System | None = None) -> None:
        self.step_duration = 100
        self.system_changed = Signal()
        self.step_duration_changed = Signal()
        self.started = Signal()
        self.stopped = Signal()
        self._system = system
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def system(self) -> System | None:
        return self._system

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()

    def _require_system(self) -> System:
        if self._system is None:
            raise RuntimeError("no system has been set")
        return self._system

    def set_system(self, system: System) -> None:
        """Stop the timer and switch to a new system."""
        self._halt_timer()
        self.stopped.emit()
        self._system = system
        self.system_changed.emit(system)

    def start(self) -> None:
        """Start stepping every ``step_duration`` milliseconds."""
        if not self.running:
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event,), daemon=True
            )
            self._thread.start()
        self.started.emit()

    def stop(self) -> None:
        self._halt_timer()
        self.stopped.emit()

    def _halt_timer(self) -> None:
        self._stop_event.set()
        thread = self._thread
        self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.step_duration / 1000.0):
            self.step()

    def step(self) -> None:
        """Activate one particle; stop the timer if the system has terminated."""
        system = self._require_system()
        with system.mutex:
            system.activate()
            terminated = system.has_terminated()
        if terminated:
            self.stop()

    def step_for_particle_at(self, node: Node) -> None:
        system = self._require_system()
        with system.mutex:
            system.activate_particle_at(node)

    def set_step_duration(self, ms: int) -> None:
        """Set the delay between timed activations, in milliseconds."""
        if ms < 0:
            raise ValueError("step duration must be non-negative")
        self.step_duration = ms
        self.step_duration_changed.emit(ms)

    def run_until_termination(self) -> None:
        system = self._require_system()
        with system.mutex:
            while not system.has_terminated():
                system.activate()

    def num_particles(self) -> int:
        system = self._require_system()
        with system.mutex:
            return len(system)

    def num_objects(self) -> int:
        system = self._require_system()
        with system.mutex:
            return system.num_objects()

    def metrics(self) -> list[tuple[str, float]]:
        """Current value of every count and latest value of every measure."""
        system = self._require_system()
        with system.mutex:
            data: list[tuple[str, float]] = [(c.name, c.value) for c in system.counts]
            for m in system.measures:
                data.append((m.name, m.history[-1] if m.history else 0.0))
            return data

    def export_metrics(self, directory: str | Path | None = None) -> Path:
        """Write the metrics JSON into ``<directory>/metrics`` and return its path."""
        system = self._require_system()
        base = Path(directory) if directory is not None else Path.cwd()
        metrics_dir = base / "metrics"
        metrics_dir.mkdir(parents=True, exist_ok=True)
        with system.mutex:
            text = system.metrics_as_json()
        path = metrics_dir / f"metrics_{int(time.time())}.json"
        path.write_text(text, encoding="utf-8")
        return path