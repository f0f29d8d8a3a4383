"""
Environment variable loading utility.

Reads simple KEY=VALUE files (such as env_var.env) into os.environ.
"""
import os
import logging

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def _parse_line(line):
    """
    Parse one line of an env file.

    Returns:
        A (key, value) tuple, or None for blank, comment and malformed lines.
    """
    line = line.strip()
    if not line or line.startswith('#'):
        return None

    if line.startswith('export '):
        line = line[len('export '):].lstrip()

    if '=' not in line:
        return None

    key, value = line.split('=', 1)
    key = key.strip()
    value = value.strip()
    if not key:
        return None

    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]

    return key, value


def load_env_from_file(file_path, override=False):
    """
    Load environment variables from a file.

    Variables already present in the environment are kept unless
    ``override`` is True.

    Args:
        file_path: Path to the environment variable file.
        override: Replace values that are already set.

    Returns:
        True if the file was read, False otherwise.
    """
    if not os.path.exists(file_path):
        logger.debug(f"Environment file not found: {file_path}")
        return False

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        logger.error(f"Error reading environment file {file_path}: {str(e)}")
        return False

    loaded = 0
    for line_number, line in enumerate(lines, start=1):
        parsed = _parse_line(line)
        if parsed is None:
            if line.strip() and not line.strip().startswith('#'):
                logger.warning(f"Skipping malformed line {line_number} in {file_path}")
            continue

        key, value = parsed
        if not override and key in os.environ:
            continue
        os.environ[key] = value
        loaded += 1

    logger.info(f"Loaded {loaded} environment variables from {file_path}")
    return True
