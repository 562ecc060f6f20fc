import logging
import os
import shutil

import humanfriendly

log = logging.getLogger(__name__)


def check_disk_full(*paths, minimum="50MB"):
    bytes_size = humanfriendly.parse_size(minimum) if isinstance(minimum, str) else minimum

    for path in [os.getcwd(), *paths]:
        path = existing_folder(path)
        total, used, free = shutil.disk_usage(path)

        if free < bytes_size:
            totalh, usedh, freeh = humanfriendly.format_size(total), humanfriendly.format_size(used), humanfriendly.format_size(free)
            log.warning(f"Disk is running out of space path: {path} total: {totalh}, used: {usedh}, free:{freeh}")
            return True

    return False


def existing_folder(path):
    # the target file, and maybe its folders, do not exist yet
    path = os.path.abspath(path)
    while not os.path.isdir(path):
        path = os.path.dirname(path)

    return path


def file_size(path):
    return humanfriendly.format_size(os.path.getsize(path)) if os.path.exists(path) else "0 bytes"


def remove_file(path):
    if os.path.exists(path):
        log.info(f"remove file {path}")
        os.unlink(path)
        return True

    return False
