"""Centralized exit codes for the refshift CLI."""


class ExitCodes:
    """Standard exit codes for refshift runs.

    1 and 2 are left to click (ClickException, usage errors).
    """

    SUCCESS = 0

    REFS_SKIPPED = 3
    PARSE_FAILURE = 4

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - every string ref was migrated",
            cls.REFS_SKIPPED: "Some string refs had no enclosing class and were left as-is",
            cls.PARSE_FAILURE: "One or more files could not be parsed",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
