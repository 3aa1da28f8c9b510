"""Auth service client for session operations"""
import requests


class AuthClient:
    """Talks to the backend auth REST API on behalf of a signed-in user"""

    def __init__(self, supabase_url: str, anon_key: str, timeout: float = 10.0):
        self.base_url = f"{supabase_url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.timeout = timeout

    def _headers(self, access_token: str) -> dict:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token}",
        }

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind `access_token`."""
        response = requests.post(
            f"{self.base_url}/logout",
            headers=self._headers(access_token),
            timeout=self.timeout,
        )
        response.raise_for_status()
