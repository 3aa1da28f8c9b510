"""JWT Token Verification"""
import requests
from jose import jwt
from typing import Dict, Optional


class JWTVerifier:
    """Verifies access tokens issued by the backend auth service.

    Tokens are checked with the shared HS256 secret when one is configured,
    otherwise against the project's published JWKS.
    """

    ASYMMETRIC_ALGORITHMS = ["RS256", "ES256"]

    def __init__(
        self,
        supabase_url: str,
        anon_key: str,
        jwt_secret: Optional[str] = None,
        audience: str = "authenticated",
        timeout: float = 10.0,
    ):
        self.supabase_url = supabase_url.rstrip("/")
        self.anon_key = anon_key
        self.jwt_secret = jwt_secret
        self.audience = audience
        self.timeout = timeout
        self.jwks_url = f"{self.supabase_url}/auth/v1/.well-known/jwks.json"
        self.issuer = f"{self.supabase_url}/auth/v1"
        self._jwks_cache: Optional[Dict] = None

    def _get_jwks(self) -> Dict:
        """Fetch JWKS from the auth service (cached)"""
        if self._jwks_cache is None:
            response = requests.get(
                self.jwks_url,
                headers={"apikey": self.anon_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            self._jwks_cache = response.json()
        return self._jwks_cache

    def verify_and_decode(self, token: str) -> Dict:
        """
        Verify JWT token signature and decode payload

        Raises:
            JWTError: Token is invalid or expired
        """
        if self.jwt_secret:
            return jwt.decode(
                token,
                self.jwt_secret,
                algorithms=["HS256"],
                audience=self.audience,
            )

        return jwt.decode(
            token,
            self._get_jwks(),
            algorithms=self.ASYMMETRIC_ALGORITHMS,
            audience=self.audience,
            issuer=self.issuer,
        )
