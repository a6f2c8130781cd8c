"""Errors raised by workspace tools and sub-agent dispatch.

Tools never let these escape to the agent loop: each tool converts them into a
plain ``"Error: ..."`` string so the model can read the message and retry.
"""


class WorkspaceError(Exception):
    """Base class for failures inside a workspace tool."""


class NotFoundError(WorkspaceError):
    """A file path or sub-agent name is not present."""


class AmbiguousMatchError(WorkspaceError):
    """An edit target occurs more than once and ``replace_all`` was not set."""

    def __init__(self, old_string: str, occurrences: int):
        self.old_string = old_string
        self.occurrences = occurrences
        super().__init__(
            f"String '{old_string}' appears {occurrences} times in file. "
            "Use replace_all=True to replace all instances, or provide a more "
            "specific string with surrounding context."
        )


class RangeError(WorkspaceError):
    """A read offset lies at or beyond the end of the file."""

    def __init__(self, offset: int, line_count: int):
        self.offset = offset
        self.line_count = line_count
        super().__init__(
            f"Line offset {offset} exceeds file length ({line_count} lines)"
        )


class DelegationFailure(WorkspaceError):
    """A nested sub-agent run did not complete."""

    def __init__(self, agent_name: str, task: str, cause: BaseException):
        self.agent_name = agent_name
        self.task = task
        self.cause = cause
        super().__init__(
            f"Error executing task '{task}' with agent '{agent_name}': "
            f"{type(cause).__name__}: {cause}"
        )
