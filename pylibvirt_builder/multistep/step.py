from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import StateBag


class StepAction(enum.Enum):
    CONTINUE = "CONTINUE"
    HALT = "HALT"


class Step:
    def run(self, state: StateBag) -> StepAction:
        raise NotImplementedError()

    def cleanup(self, state: StateBag):
        """
        Revert whatever `run` has done. Called for every step that was run, whether it succeeded or not.
        """
        pass
