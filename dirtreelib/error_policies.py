"""
Error handling policies for dirtreelib.

The builder and writer catch every OSError raised while processing a node
and hand it to an ErrorPolicy, which decides what ends up in the tree.
The default policy turns the error into a FailedNode so that the rest of
the traversal continues; other policies add bookkeeping or stop early.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .core.errors import ErrorKind, classify_error
from .core.node import FailedNode

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    that occur while reading or writing a single node.
    """

    @abstractmethod
    def handle(self, error: OSError, path: str, name: Any) -> FailedNode:
        """
        Handle an error raised while processing one node.

        Args:
            error: The exception that was raised
            path: Full path of the node being processed
            name: Name the node has in the tree

        Returns:
            The FailedNode to put in place of the node, or re-raises the
            exception to stop the traversal.
        """
        pass


class CaptureFailuresPolicy(ErrorPolicy):
    """
    Policy that records each error as a FailedNode and moves on.

    This is the default behavior. Nothing is kept outside the tree; use
    ``failures()`` on the result to find the errors.
    """

    def handle(self, error: OSError, path: str, name: Any) -> FailedNode:
        logger.debug("Captured %s at %s: %s", type(error).__name__, path, error)
        return FailedNode(name, error)


class CollectErrorsPolicy(CaptureFailuresPolicy):
    """
    Policy that captures FailedNodes and also keeps a list of every error.

    Handy when a summary of problems is wanted without walking the tree.
    NotFound errors are collected too, even when the failure policy later
    removes the corresponding node from the tree.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every error
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle(self, error: OSError, path: str, name: Any) -> FailedNode:
        kind = classify_error(error)
        self.errors.append({
            'path': path,
            'error': error,
            'error_type': type(error).__name__,
            'error_kind': kind,
            'error_message': str(error),
        })

        if kind is ErrorKind.PERMISSION_DENIED:
            self.skipped_paths.append(path)

        if self.verbose:
            if kind is ErrorKind.PERMISSION_DENIED:
                logger.warning("Skipping inaccessible path '%s': %s", path, error)
            else:
                logger.warning("Error for '%s': %s", path, error)

        return super().handle(error, path, name)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'not_found_errors': sum(1 for e in self.errors if e['error_kind'] is ErrorKind.NOT_FOUND),
            'permission_errors': sum(1 for e in self.errors if e['error_kind'] is ErrorKind.PERMISSION_DENIED),
            'other_errors': sum(1 for e in self.errors if e['error_kind'] is ErrorKind.OTHER_IO),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the traversal.

    Useful when partial results are not acceptable. Note that with a lazy
    build the error surfaces wherever the failing node is first forced.
    """

    def handle(self, error: OSError, path: str, name: Any) -> FailedNode:
        """Re-raise the error immediately."""
        raise error
