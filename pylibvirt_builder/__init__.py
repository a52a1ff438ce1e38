from .config import VmConfiguration  # noqa
from .driver.base import Driver  # noqa
from .error import (  # noqa
    Error, DomainAlreadyExistsError, DomainDoesNotExistError, StepError, ValidationError,
)
from .multistep.runner import BasicRunner  # noqa
from .multistep.state import StateBag  # noqa
from .multistep.step import Step, StepAction  # noqa
from .steps.create_vm import StepCreateVM  # noqa
from .ui import LoggingUi, Ui  # noqa
