"""Authentication for Wafeq API."""

from wafeqpy.exceptions import WafeqConfigError


class ApiKeyAuth:
    """Authentication using a Wafeq API key."""

    def __init__(self, api_key: str) -> None:
        """Initialize API key authentication.

        Args:
            api_key: API key from the Wafeq dashboard
        """
        if not api_key:
            raise WafeqConfigError("API key is required.")
        self.api_key = api_key

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"Api-Key {self.api_key}"}

    def __repr__(self) -> str:
        # Never expose the key itself
        return f"ApiKeyAuth(api_key='{self.api_key[:4]}...')"
