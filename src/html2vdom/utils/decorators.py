#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/utils/decorators.py
"""Utility decorators for html2vdom adapters.

This module provides reusable decorators shared by the parsing backends,
particularly for dependency management and debug timing.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from html2vdom.exceptions import DependencyError
from html2vdom.utils.packages import check_version_requirement


def _check_packages(
    packages: List[Tuple[str, str, str]],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], ImportError | None]:
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    return missing, version_mismatches, original_error


def ensure_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise DependencyError unless every package is importable at a matching version.

    Parameters
    ----------
    converter_name : str
        Backend name shown in the error message
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    """
    missing, version_mismatches, original_error = _check_packages(packages)
    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the backend (e.g., "standalone", "document"). This appears
        in error messages to help users identify which backend needs dependencies.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("document", [("html5lib", "html5lib", ">=1.1")])
        ... def build_parse_tree(self, html):
        ...     import html5lib
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ensure_dependencies(converter_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time when DEBUG logging is enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Conversion (document)")

    Examples
    --------
        >>> with debug_timer(logger, "Conversion (standalone)"):
        ...     result = adapter.to_element(html)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
