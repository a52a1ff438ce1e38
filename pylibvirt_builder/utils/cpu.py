import contextlib
import functools

NESTED_PARAMETER_PATHS = (
    '/sys/module/kvm_intel/parameters/nested',
    '/sys/module/kvm_amd/parameters/nested',
)


@functools.cache
def nested_virtualization_supported() -> bool:
    """
    Check if the loaded KVM module allows guests to run a hypervisor of their own.
    """
    for path in NESTED_PARAMETER_PATHS:
        with contextlib.suppress(FileNotFoundError):
            with open(path, 'r') as f:
                if f.read().strip() in ('Y', 'y', '1'):
                    return True

    return False
