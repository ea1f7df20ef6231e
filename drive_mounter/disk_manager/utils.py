import subprocess
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

def run_command(cmd: List[str], input_text: Optional[str] = None) -> Tuple[bool, str]:
    """
    Execute a command without a shell and return its success status and output.
    Output is decoded as UTF-8; undecodable output counts as a failure.
    Returns: (success_boolean, std_out_or_error_string)
    """
    try:
        result = subprocess.run(
            cmd,
            input=input_text.encode("utf-8") if input_text is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False
        )
    except FileNotFoundError:
        logger.error(f"Command not found: {cmd[0]}")
        return False, f"Command not found: {cmd[0]}"
    except OSError as e:
        logger.error(f"Exception running command '{' '.join(cmd)}': {e}")
        return False, str(e)

    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.error(f"Command '{' '.join(cmd)}' produced non UTF-8 output")
        return False, "got non UTF-8 data"

    if result.returncode == 0:
        return True, stdout.strip()

    stderr = result.stderr.decode("utf-8", errors="replace").strip()
    logger.debug(f"Command failed '{' '.join(cmd)}' ({result.returncode}): {stderr}")
    return False, stderr
