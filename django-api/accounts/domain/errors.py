from common.domain.errors import DomainError, ErrorCode


class ProfileNotFoundError(DomainError):
    """Raised when a user has no profile."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
        )
        self.user_id = user_id
