from .runner import BasicRunner  # noqa
from .state import StateBag  # noqa
from .step import Step, StepAction  # noqa
