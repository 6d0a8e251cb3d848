"""Subprocess execution helpers shared by controllers.

Commands run synchronously in a worker thread so the event loop stays
responsive while ``kubectl`` or a cloud CLI is busy. Output is decoded as
UTF-8 with undecodable bytes replaced, so a stray byte never escapes as a
UnicodeDecodeError.
"""

from __future__ import annotations

import asyncio
import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

from ktx.errors import CommandError

logger = logging.getLogger(__name__)


def run_command_sync(
    program: str,
    args: Sequence[str],
    timeout: float | None = None,
    *,
    env: Mapping[str, str] | None = None,
    error_cls: type[CommandError] = CommandError,
) -> str:
    """Run a command synchronously (thread-safe wrapper target).

    Returns:
        The command's standard output.

    Raises:
        CommandError: (or ``error_cls``) if the program is missing, times out
            or exits with a non-zero status.
    """
    cmd = [program, *args]
    process_env = {**os.environ, **env} if env else None
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            env=process_env,
        )
    except FileNotFoundError as e:
        raise error_cls(program, f"{program}: command not found") from e
    except subprocess.TimeoutExpired as e:
        raise error_cls(program, f"{program} timed out after {timeout}s") from e
    except OSError as e:
        raise error_cls(program, f"{program}: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise error_cls(
            program,
            stderr or f"{program} command failed",
            returncode=result.returncode,
            stderr=stderr,
        )
    return result.stdout


async def run_command(
    program: str,
    args: Sequence[str],
    timeout: float | None = None,
    *,
    env: Mapping[str, str] | None = None,
    error_cls: type[CommandError] = CommandError,
) -> str:
    """Run a command in a worker thread."""
    return await asyncio.to_thread(
        run_command_sync,
        program,
        tuple(args),
        timeout,
        env=env,
        error_cls=error_cls,
    )


__all__ = ["run_command", "run_command_sync"]
