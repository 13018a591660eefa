from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_APP_NAME,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    base_url: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    app_name: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        app_name: Optional[str] = None,
        debug: Optional[bool] = None,
    ) -> "Config":
        """Build a config from explicit values, falling back to the environment.

        Variables from a ``.env`` file in the working directory are loaded
        first; variables already set in the process environment take
        precedence over the file.
        """
        load_dotenv()

        timeout_value = timeout if timeout is not None else env.get(ENV_TIMEOUT)

        return cls(
            base_url=base_url or env.get(ENV_BASE_URL),
            timeout=timeout_value if timeout_value is not None else DEFAULT_TIMEOUT,
            app_name=app_name or env.get(ENV_APP_NAME),
            debug=debug if debug is not None else env.get(ENV_DEBUG, "false"),
        )
