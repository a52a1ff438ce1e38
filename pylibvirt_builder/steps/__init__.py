from .create_vm import StepCreateVM  # noqa
