"""
Internal-consistency errors raised by the net.

Both categories signal a bug in rule application, never a condition a
caller is expected to recover from. Nothing inside the package catches them.
"""


class NetConsistencyError(RuntimeError):
    """Base class for violated net invariants."""


class UnwiredPortError(NetConsistencyError):
    """Raised when following a port slot that was never connected."""

    def __init__(self, agent: int, index: int):
        super().__init__(f"port ({agent},{index}) was never wired")
        self.agent = agent
        self.index = index


class MissingAgentError(NetConsistencyError):
    """Raised on a stale identifier or a double deletion."""

    def __init__(self, agent: int):
        super().__init__(f"agent {agent} is not live in the net")
        self.agent = agent
