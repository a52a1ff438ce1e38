from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import TYPE_CHECKING

from .state import HALTED
from .step import StepAction

if TYPE_CHECKING:
    from .state import StateBag
    from .step import Step


logger = logging.getLogger(__name__)


class BasicRunner:
    """
    Runs steps one after another until all of them are done or one of them halts, then cleans up every
    step that was run in reverse order.
    """

    def __init__(self, steps: list[Step]):
        self.steps = steps

    def run(self, state: StateBag) -> StepAction:
        action = StepAction.CONTINUE
        with ExitStack() as exit_stack:
            for step in self.steps:
                # Registered before running so that a step raising halfway through still gets cleaned up
                exit_stack.callback(self._cleanup, step, state)

                action = step.run(state)
                if action == StepAction.HALT:
                    logger.debug('Step %s halted the build', type(step).__name__)
                    state.put(HALTED, True)
                    break

        return action

    def _cleanup(self, step: Step, state: StateBag):
        try:
            step.cleanup(state)
        except Exception as e:
            logger.error(f'Failed to cleanup step {type(step).__name__}: {e}', exc_info=True)
