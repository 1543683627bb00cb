"""Configuration system for dirtreelib.

This module defines how users describe a tree read: which strategy to
use, whether to follow symbolic links, and which entries to hide.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .adapters.filesystem import FileSystemAdapter, FilteredFileSystemAdapter, LocalFileSystemAdapter
from .error_policies import ErrorPolicy


class BuildStrategy(Enum):
    """When directory contents are read.

    EAGER reads the whole tree up front; LAZY reads each child only when
    the consumer first looks at it.
    """
    EAGER = "eager"
    LAZY = "lazy"


@dataclass
class BuildConfig:
    """Configuration for reading a directory tree."""

    strategy: BuildStrategy = BuildStrategy.EAGER
    follow_symlinks: bool = False

    # Listing filters
    include_hidden: bool = True
    exclude_names: Set[str] = field(default_factory=set)
    exclude_extensions: Set[str] = field(default_factory=set)

    # Custom collaborators; None means the defaults
    adapter: Optional[FileSystemAdapter] = None
    error_policy: Optional[ErrorPolicy] = None

    @property
    def lazy(self) -> bool:
        return self.strategy is BuildStrategy.LAZY

    def has_filters(self) -> bool:
        """True if any listing filter is configured."""
        return (not self.include_hidden
                or bool(self.exclude_names)
                or bool(self.exclude_extensions))

    def create_adapter(self) -> FileSystemAdapter:
        """Return the adapter to use for this configuration.

        An explicitly configured adapter wins; otherwise a filtered local
        adapter is created when filters are set, and a plain local adapter
        when they are not.
        """
        if self.adapter is not None:
            return self.adapter
        if self.has_filters():
            return FilteredFileSystemAdapter(
                exclude_names=self.exclude_names,
                exclude_extensions=self.exclude_extensions,
                include_hidden=self.include_hidden,
            )
        return LocalFileSystemAdapter()

    def validate(self) -> List[str]:
        """Check the configuration for mistakes.

        Returns:
            List of problems found (empty if the configuration is valid)
        """
        problems = []
        if not isinstance(self.strategy, BuildStrategy):
            problems.append(f"strategy must be a BuildStrategy, got {self.strategy!r}")
        for ext in self.exclude_extensions:
            if not ext.startswith("."):
                problems.append(f"extension {ext!r} should start with '.'")
        if self.adapter is not None and self.has_filters():
            problems.append("listing filters are ignored when a custom adapter is set")
        return problems

    @classmethod
    def lazy_config(cls, **kwargs) -> "BuildConfig":
        """Create a configuration for lazy, on-demand reads."""
        return cls(strategy=BuildStrategy.LAZY, **kwargs)
