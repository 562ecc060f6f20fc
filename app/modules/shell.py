import logging
import shlex
import subprocess
from threading import Lock
from typing import Tuple

threadlock = Lock()
log = logging.getLogger(__name__)


def split_command(command):
    """accepts "npx wrangler@latest" as well as ["npx", "wrangler@latest"]"""
    return shlex.split(command) if isinstance(command, str) else list(command)


def execute_shell(command, *args, **kwargs) -> Tuple[int, str, str]:
    res = None, None, None
    threadlock.acquire()
    try:
        result = subprocess.run([*split_command(command), *args], capture_output=True, text=True, **kwargs)
        res = result.returncode, result.stdout, result.stderr
        log.info(f"{command} {args} \n\t rc: {result.returncode}")
        return res
    except Exception as e:
        log.error(f"{command} {args} \n\t {res}", exc_info=1)
        raise e
    finally:
        threadlock.release()


def execute_checked(command, *args, **kwargs) -> str:
    rc, std, err = execute_shell(command, *args, **kwargs)
    if rc != 0: raise IOError(std + '\n' + err)

    return std
