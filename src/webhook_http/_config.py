from importlib.metadata import PackageNotFoundError, version

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import DEFAULT_RETRY_ATTEMPTS

PACKAGE_NAME = "webhook-http"


def user_agent_value() -> str:
    try:
        package_version = version(PACKAGE_NAME)
    except PackageNotFoundError:
        package_version = "unknown"
    return f"{PACKAGE_NAME}/{package_version}"


class HttpActionsConfig(BaseModel):
    """Settings shared by every call made through one ``HttpActions`` instance."""

    model_config = ConfigDict(frozen=True)

    retry_attempts: int = Field(default=DEFAULT_RETRY_ATTEMPTS, ge=1)
    user_agent: str = Field(default_factory=user_agent_value)
    follow_redirects: bool = False
