"""Project name resolution against an existing root directory."""

import logging
from pathlib import Path
from typing import Callable, Optional

from .exceptions import NameExhaustedError
from .models import NameGeneratorConfig
from .name_generator import NameGenerator

logger = logging.getLogger(__name__)

# Availability predicate: True if the candidate path is already taken
ExistsCheck = Callable[[Path], bool]


def _path_exists(path: Path) -> bool:
    return path.exists()


class ProjectNameResolver:
    """Picks a project name that does not collide with a directory in root.

    Three modes, checked in order:
        explicit name  -> returned unchanged, never checked
        copy base      -> "{base}-copy", then "{base}-copy-1", "-copy-2", ...
        neither        -> random "adjective-animal-NN" names until one is free

    Random probing is unbounded unless ``max_attempts`` is set.
    """

    def __init__(
        self,
        root: str | Path,
        exists: Optional[ExistsCheck] = None,
        generator: Optional[NameGenerator] = None,
        seed: Optional[int] = None,
        max_attempts: Optional[int] = None,
    ):
        """Initialize ProjectNameResolver.

        Args:
            root: Directory the project will be created in
            exists: Predicate for taken paths (default: filesystem check)
            generator: Name generator for fresh names (default: dash-separated
                with numbers, seeded with ``seed``)
            seed: Seed for the default generator
            max_attempts: Give up on fresh names after this many probes

        Raises:
            ValueError: If max_attempts is less than 1
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.root = Path(root)
        self.exists = exists or _path_exists
        self.max_attempts = max_attempts
        self._generator = generator
        self._seed = seed

    @property
    def generator(self) -> NameGenerator:
        if self._generator is None:
            self._generator = NameGenerator(
                NameGeneratorConfig(seed=self._seed, separator="-", add_numbers=True)
            )
        return self._generator

    def _taken(self, name: str) -> bool:
        return self.exists(self.root / name)

    def resolve(self, name: Optional[str] = None, copy: Optional[str] = None) -> str:
        """Resolve the project name for one run.

        Args:
            name: Explicit name supplied by the caller
            copy: Name of an existing project being copied

        Returns:
            The project name to use
        """
        if name:
            logger.debug(f"Using explicit project name: {name}")
            return name

        if copy:
            return self.copy_name(copy)

        return self.fresh_name()

    def copy_name(self, base: str) -> str:
        """Derive the first free "{base}-copy[-N]" name."""
        candidate = f"{base}-copy"
        counter = 1
        while self._taken(candidate):
            candidate = f"{base}-copy-{counter}"
            counter += 1

        logger.debug(f"Resolved copy name for {base}: {candidate}")
        return candidate

    def fresh_name(self) -> str:
        """Draw random names until one is free in root.

        Raises:
            NameExhaustedError: If ``max_attempts`` is set and every probe
                hit an existing directory
        """
        attempts = 0
        while True:
            candidate = self.generator.next()
            attempts += 1
            if not self._taken(candidate):
                logger.debug(f"Resolved fresh name after {attempts} probe(s): {candidate}")
                return candidate

            logger.debug(f"Name already taken: {candidate}")
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise NameExhaustedError(
                    f"No free project name in {self.root} after {attempts} attempts"
                )


def resolve_project_name(
    root: str | Path,
    name: Optional[str] = None,
    copy: Optional[str] = None,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = None,
    exists: Optional[ExistsCheck] = None,
) -> str:
    """Resolve a project name under root using the filesystem by default.

    Args:
        root: Directory the project will be created in
        name: Explicit name, returned unchanged
        copy: Base name for copy-suffix mode
        seed: Seed for fresh-name generation
        max_attempts: Optional cap on fresh-name probes
        exists: Availability predicate override

    Returns:
        A project name unused at the moment of the check
    """
    resolver = ProjectNameResolver(
        root, exists=exists, seed=seed, max_attempts=max_attempts
    )
    return resolver.resolve(name=name, copy=copy)
