import logging
import re
import subprocess

from ..error import Error

logger = logging.getLogger(__name__)

# Virtual hard disk extensions and the matching qemu image format
VIRTUAL_HARDDRIVE_FORMATS = {
    '.vhd': 'vpc',
    '.vhdx': 'vhdx',
}


def path_extension(path: str) -> str:
    """
    Extension of the last path element, including the leading dot. Both `/` and `\\` separate path
    elements so that paths on Windows hosts are handled as well.
    """
    name = re.split(r'[\\/]', path)[-1]
    if (index := name.rfind('.')) == -1:
        return ''

    return name[index:]


def is_virtual_harddrive(path: str) -> bool:
    return path_extension(path).lower() in VIRTUAL_HARDDRIVE_FORMATS


def virtual_harddrive_format(path: str) -> str:
    try:
        return VIRTUAL_HARDDRIVE_FORMATS[path_extension(path).lower()]
    except KeyError:
        raise Error(f'{path!r} is not a virtual hard disk') from None


def create_virtual_harddrive(path: str, size: int):
    """
    Create an empty, dynamically growing virtual hard disk of `size` bytes.
    """
    image_format = virtual_harddrive_format(path)
    logger.debug('Creating %s disk %r of %d bytes', image_format, path, size)
    try:
        subprocess.run(
            ['qemu-img', 'create', '-q', '-f', image_format, path, str(size)],
            capture_output=True, check=True, text=True,
        )
    except subprocess.CalledProcessError as e:
        raise Error(
            f'Unable to create virtual hard disk: {e.cmd} returned code {e.returncode}:\n{e.stderr.strip()}'
        ) from None
