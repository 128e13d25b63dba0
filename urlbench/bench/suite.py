"""Suites of named cases compared against each other.

Usage:
    from urlbench.bench.suite import Suite

    suite = Suite.create("URL")
    suite.add("urllib", lambda: urlsplit(url))
    suite.add("httpx", lambda: httpx.URL(url))
"""

from collections.abc import Iterator
from dataclasses import dataclass

from urlbench.bench.collector import Operation


class SuiteError(Exception):
    """Base exception for suite registration errors."""

    pass


class DuplicateNameError(SuiteError):
    """Raised when a case name is registered twice in the same suite."""

    def __init__(self, suite_label: str, name: str) -> None:
        self.suite_label = suite_label
        self.name = name
        super().__init__(
            f"Duplicate case name: '{name}' is already registered in suite "
            f"'{suite_label}'"
        )


class SuiteFrozenError(SuiteError):
    """Raised when a suite is modified after it has been handed to a runner."""

    def __init__(self, suite_label: str) -> None:
        self.suite_label = suite_label
        super().__init__(
            f"Suite '{suite_label}' is frozen; cases can only be registered "
            "before it runs"
        )


class CaseNotFoundError(SuiteError):
    """Raised when a case name is not registered in a suite."""

    def __init__(self, suite_label: str, name: str) -> None:
        self.suite_label = suite_label
        self.name = name
        super().__init__(f"Case not found in suite '{suite_label}': '{name}'")


@dataclass(frozen=True)
class Case:
    """A named unit of work. The operation's return value is discarded."""

    name: str
    operation: Operation

    def __call__(self) -> object:
        return self.operation()


class Suite:
    """Ordered collection of cases sharing a comparison label.

    Cases keep their registration order, which the reporter uses to break
    ties between equally fast cases. A suite without cases is valid and
    produces an empty result. The runner freezes a suite before running it;
    later registrations raise SuiteFrozenError.

    Example:
        >>> suite = Suite.create("URLSearchParams.append")
        >>> suite.add("urllib", append_with_urllib).add("httpx", append_with_httpx)
        >>> [case.name for case in suite]
        ['urllib', 'httpx']
    """

    def __init__(self, label: str, baseline: str | None = None) -> None:
        """Initialize an empty suite.

        Args:
            label: Label shown in reports. Should be unique across a run.
            baseline: Optional case name used as the relative-speed reference
                once that case is registered.
        """
        self._label = label
        self._cases: dict[str, Case] = {}
        self._baseline = baseline
        self._frozen = False

    @classmethod
    def create(cls, label: str) -> "Suite":
        """Construct an empty suite with the given label."""
        return cls(label)

    @property
    def label(self) -> str:
        """Suite label."""
        return self._label

    @property
    def baseline(self) -> str | None:
        """Name of the reference case, if one was chosen."""
        return self._baseline

    @property
    def frozen(self) -> bool:
        """True once the suite no longer accepts registrations."""
        return self._frozen

    def freeze(self) -> None:
        """Close the registration phase. Idempotent."""
        self._frozen = True

    @property
    def cases(self) -> tuple[Case, ...]:
        """Registered cases, in registration order."""
        return tuple(self._cases.values())

    @property
    def names(self) -> list[str]:
        """Registered case names, in registration order."""
        return list(self._cases)

    def add(self, name: str, operation: Operation) -> "Suite":
        """Register a new case.

        Args:
            name: Case name, unique within this suite.
            operation: Zero-argument callable measured by the runner.

        Returns:
            This suite, so registrations can be chained.

        Raises:
            ValueError: If the name is empty or the operation is not callable.
            SuiteFrozenError: If the suite has already been run.
            DuplicateNameError: If a case with this name already exists. The
                existing case is kept.
        """
        if self._frozen:
            raise SuiteFrozenError(self._label)
        if not name:
            raise ValueError("Case name must be a non-empty string")
        if not callable(operation):
            raise ValueError(f"Operation for case '{name}' is not callable")
        if name in self._cases:
            raise DuplicateNameError(self._label, name)

        self._cases[name] = Case(name=name, operation=operation)
        return self

    def set_baseline(self, name: str) -> "Suite":
        """Use the named case as the reference for relative speeds.

        Raises:
            SuiteFrozenError: If the suite has already been run.
            CaseNotFoundError: If no case with this name is registered.
        """
        if self._frozen:
            raise SuiteFrozenError(self._label)
        if name not in self._cases:
            raise CaseNotFoundError(self._label, name)
        self._baseline = name
        return self

    def get(self, name: str) -> Case:
        """Return the case registered under ``name``.

        Raises:
            CaseNotFoundError: If no case with this name is registered.
        """
        try:
            return self._cases[name]
        except KeyError:
            raise CaseNotFoundError(self._label, name) from None

    def __iter__(self) -> Iterator[Case]:
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._cases

    def __repr__(self) -> str:
        return f"Suite({self._label!r}, cases={self.names!r})"
