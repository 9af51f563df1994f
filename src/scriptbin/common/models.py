"""Common models used across scriptbin."""

from typing import Literal

from pydantic import BaseModel

from scriptbin.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    config_filename: str = ".config.json"
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    scripts_marker: str = "scripts_bin"
    tool_binary_name: str = APP_NAME
    default_script_dir: str = "~/code/personal/scripts/scripts_bin"
    default_bin_dir: str = "~/opt/programs"
