from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator


class ReversibleGenerator(ABC):
    """
    A maze that builds itself one step at a time and can undo those steps.

    advance_step and reverse_step must be inverses: any sequence of advances,
    reversals and resets stays on the same linear history of steps.
    Advancing a finished maze and reversing a fresh one do nothing.
    """

    @property
    @abstractmethod
    def state(self) -> Enum:
        pass

    @property
    @abstractmethod
    def is_finished(self) -> bool:
        pass

    @abstractmethod
    def advance_step(self):
        pass

    @abstractmethod
    def reverse_step(self):
        pass

    @abstractmethod
    def reset(self):
        pass

    def advance(self, steps: int = 1):
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        for _ in range(steps):
            self.advance_step()

    def reverse(self, steps: int = 1):
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        for _ in range(steps):
            self.reverse_step()

    def finish(self):
        while not self.is_finished:
            self.advance_step()

    def run(self, report_every: int = 100) -> Iterator[str]:
        """
        Yields status strings while generating, so a driver can pace or
        animate the work. Stopping iteration simply stops generation.
        """
        step_count = 0
        while not self.is_finished:
            self.advance_step()
            step_count += 1
            if step_count % report_every == 0:
                yield f"Step {step_count}: {self.state.name.lower()}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
