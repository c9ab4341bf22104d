"""Error types raised while resolving an ECS Exec target."""

from __future__ import annotations


class EcsRemoteError(Exception):
    """Base class for errors that end an ecs-remote run."""


class NoResourcesFoundError(EcsRemoteError):
    """A discovery stage produced no candidates."""


class ResourceNotFoundError(EcsRemoteError):
    """A user supplied cluster or service did not match anything."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Specified {kind} '{value}' not found")


class SelectionAbortedError(EcsRemoteError):
    """The interactive prompt was cancelled."""


class ShellLaunchError(EcsRemoteError):
    """The AWS CLI session could not be started."""
