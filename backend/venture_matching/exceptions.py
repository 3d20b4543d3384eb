class MatchingError(Exception):
    """Base class for matching engine errors."""


class InvalidArgumentError(MatchingError, ValueError):
    pass


class InvalidRoleError(InvalidArgumentError):

    def __init__(self, role):
        self.role = role
        super().__init__(f"role must be 'creator' or 'investor', got {role!r}")
