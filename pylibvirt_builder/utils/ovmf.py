import functools
import os
import re

OVMF_DIR = '/usr/share/OVMF'
OVMF_CODE = 'OVMF_CODE_4M.fd'
OVMF_SECURE_CODE = 'OVMF_CODE_4M.secboot.fd'

RE_OVMF_CODE = re.compile(r'^OVMF_CODE(?P<size>_\d+M)?(?P<variants>(\.[\w-]+)*)\.fd$')


@functools.cache
def get_ovmf_vars_file(code_filename: str, ovmf_dir: str = OVMF_DIR) -> str | None:
    """
    Find the NVRAM variables template matching an OVMF firmware image.

    Secure boot capable images (`secboot`, `ms`) prefer the template with Microsoft keys enrolled,
    `snakeoil` images prefer their own test keys. Every variant falls back to the plain template
    of the same size when the preferred one is not installed.
    """
    if not (match := RE_OVMF_CODE.match(os.path.basename(code_filename))):
        return None

    size = match.group('size') or ''
    variants = set(filter(None, match.group('variants').split('.')))

    if 'snakeoil' in variants:
        candidates = ['.snakeoil', '.ms', '']
    elif variants & {'secboot', 'ms'}:
        candidates = ['.ms', '']
    else:
        candidates = ['']

    for candidate in candidates:
        path = os.path.join(ovmf_dir, f'OVMF_VARS{size}{candidate}.fd')
        if os.path.exists(path):
            return path

    return None
