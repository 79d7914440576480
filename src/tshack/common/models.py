"""Common models used across tshack."""

from typing import Literal

from pydantic import BaseModel

from tshack.constants import APP_NAME, VERSION


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = VERSION
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    data_dir_name: str = APP_NAME
    preferences_filename: str = f".{APP_NAME}"
    log_filename: str = f"{APP_NAME}.log"
