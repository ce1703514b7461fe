"""Linked-framework lookup through an external linker tool (``otool -L``).

The tool runs once per executable. Its listing is parsed by
:func:`framedeps.domain.links.linked_frameworks`; every tool failure is
reported as :class:`LinkResolutionError` so callers decide whether it is
fatal.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from os import PathLike

from framedeps.domain.links import LinkResolutionError, linked_frameworks

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("xcrun", "otool", "-L")


class LinkerTool:
    """Callable link-name resolver backed by a subprocess.

    Usage::

        resolve = LinkerTool()
        resolve(Path("Build/iOS/Alamofire.framework/Alamofire"))
        # ['Foundation', 'UIKit']
    """

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND, *, timeout: float | None = 30.0) -> None:
        if not command:
            msg = "Linker command must not be empty"
            raise ValueError(msg)
        self.command = tuple(command)
        self.timeout = timeout

    def __call__(self, executable: str | PathLike[str]) -> list[str]:
        return linked_frameworks(self.listing(executable))

    def listing(self, executable: str | PathLike[str]) -> str:
        """Raw linked-images listing for *executable*."""
        args = [*self.command, str(executable)]
        logger.debug("Running %s", " ".join(args))
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            reason = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise LinkResolutionError(executable, reason) from exc
        except subprocess.TimeoutExpired as exc:
            raise LinkResolutionError(executable, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise LinkResolutionError(executable, str(exc)) from exc
        return result.stdout
