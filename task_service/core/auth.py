"""
Authentication module for Task Service.
Resolves bearer tokens to users through the Auth Service.
"""
import logging
from typing import Optional, Dict, Any
import httpx
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .config import get_settings

# Configure logging
logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(
    scheme_name="Bearer Token",
    description="JWT Bearer token from Auth Service"
)

settings = get_settings()


class CurrentUser:
    """Represents the current authenticated user."""

    def __init__(self, user_id: int, username: str, email: Optional[str] = None, **kwargs):
        self.user_id = user_id
        self.username = username
        self.email = email
        self.extra_data = kwargs

    def __str__(self):
        return f"User(id={self.user_id}, username={self.username})"

    def __repr__(self):
        return self.__str__()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurrentUser":
        """Create CurrentUser from an Auth Service user payload."""
        return cls(
            user_id=int(data["id"]),
            username=data.get("username") or data.get("email"),
            email=data.get("email"),
            **{k: v for k, v in data.items() if k not in ["id", "email", "username"]}
        )


class AuthService:
    """Service client for Auth Service integration."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        retries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or settings.auth_service_url
        self.timeout = timeout or settings.auth_service_timeout
        self.retries = max(1, retries or settings.auth_service_retries)
        self.transport = transport

    async def _get(self, path: str, token: str) -> Optional[httpx.Response]:
        """GET an Auth Service endpoint, retrying transport failures."""
        headers = {"Authorization": f"Bearer {token}"}

        for attempt in range(self.retries):
            try:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                    logger.debug(f"GET {path} on Auth Service (attempt {attempt + 1})")
                    return await client.get(f"{self.base_url}{path}", headers=headers)
            except httpx.TimeoutException:
                logger.warning(f"Auth Service timeout (attempt {attempt + 1})")
            except httpx.TransportError as e:
                logger.warning(f"Auth Service connection error (attempt {attempt + 1}): {e}")

        logger.error(f"Auth Service unreachable after {self.retries} attempts")
        return None

    async def verify_token(self, token: str) -> bool:
        """
        Verify JWT token with Auth Service.

        Args:
            token: JWT token to verify

        Returns:
            bool: True if the Auth Service accepts the token
        """
        response = await self._get("/auth/verify", token)
        if response is None:
            return False
        if response.status_code != 200:
            logger.warning(f"Token verification failed: status {response.status_code}")
            return False
        return bool(response.json().get("valid"))

    async def get_user_info(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Get current user information from Auth Service.

        Args:
            token: JWT token

        Returns:
            dict: User information if token is valid, None otherwise
        """
        response = await self._get("/auth/me", token)
        if response is None or response.status_code != 200:
            logger.warning("Failed to get user info")
            return None
        return response.json()


# Global auth service instance
auth_service = AuthService()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> CurrentUser:
    """
    Dependency to get current authenticated user.

    Raises:
        HTTPException: 401 if the token is invalid or the user cannot be resolved
    """
    token = credentials.credentials

    if not await auth_service.verify_token(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_info = await auth_service.get_user_info(token)
    try:
        current_user = CurrentUser.from_dict(user_info or {})
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Could not build user from Auth Service payload: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.debug(f"Authenticated user: {current_user}")
    return current_user
