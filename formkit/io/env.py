# coding: utf-8
import os
from typing import Callable, List, Optional

from dotenv import load_dotenv

RAISE_IF_NOT_FOUND = True
DEFAULT_ENV_FILE = "~/formkit.env"


def flag_from_env(s: str) -> bool:
    """Returns True if passed string is a flag, False otherwise.
    Possible values to set the flag to True:
        - "1"
        - "true"
        - "yes"

    :param s: string to check
    :type s: str
    :return: True if passed string is a flag, False otherwise
    :rtype: bool
    """
    return s.upper() in ["TRUE", "YES", "1"]


def load_env_file(path: Optional[str] = None) -> bool:
    """Loads variables from a dotenv file into the process environment.
    Already defined variables are not overridden.

    The file is looked up in the following order:
        - ``path`` argument
        - FORMKIT_ENV_FILE
        - ~/formkit.env

    :param path: path to dotenv file
    :type path: Optional[str]
    :return: True if a file was found and loaded
    :rtype: bool
    """
    if path is None:
        path = os.environ.get("FORMKIT_ENV_FILE", DEFAULT_ENV_FILE)
    path = os.path.expanduser(path)
    if not os.path.isfile(path):
        return False
    return load_dotenv(path, override=False)


def _parse_from_env(
    name: str,
    keys: List[str],
    postprocess_fn: Callable,
    default=None,
    raise_not_found=False,
):
    for k in keys:
        if k in os.environ:
            return postprocess_fn(os.environ[k])

    # env not found
    if raise_not_found is True:
        raise KeyError(
            f"{name} is not defined as environment variable. One of the envs has to be defined: {keys}"
        )

    return default


def content_id(raise_not_found: Optional[bool] = False) -> Optional[str]:
    """Returns id of the content being edited from environment variable using following keys:
        - CONTENT_ID
        - FORMKIT_CONTENT_ID

    New content that has not been saved yet has no id.

    :param raise_not_found: if True, raises KeyError if content id is not found in environment variables
    :type raise_not_found: Optional[bool]
    :return: content id
    :rtype: Optional[str]
    """
    return _parse_from_env(
        name="content_id",
        keys=["CONTENT_ID", "FORMKIT_CONTENT_ID"],
        postprocess_fn=lambda x: str(x) if x != "" else None,
        default=None,
        raise_not_found=raise_not_found,
    )


def files_url() -> str:
    """Returns base url of uploaded files from environment variable using following keys:
        - FILES_URL
        - FORMKIT_FILES_URL

    :return: files base url without trailing slash, "/files" by default
    :rtype: str
    """
    return _parse_from_env(
        name="files_url",
        keys=["FILES_URL", "FORMKIT_FILES_URL"],
        postprocess_fn=lambda x: str(x).rstrip("/"),
        default="/files",
        raise_not_found=False,
    )


def auto_widget_id() -> bool:
    """Returns auto widget id flag from environment variable using following keys:
        - AUTO_WIDGET_ID

    When disabled, widgets take the name of the variable they are assigned to.

    :return: auto widget id flag, True by default
    :rtype: bool
    """
    return _parse_from_env(
        name="auto_widget_id",
        keys=["AUTO_WIDGET_ID"],
        postprocess_fn=flag_from_env,
        default=True,
        raise_not_found=False,
    )


def log_level() -> str:
    """Returns logging level from environment variable using following keys:
        - LOG_LEVEL

    :return: logging level name, "INFO" by default
    :rtype: str
    """
    return _parse_from_env(
        name="log_level",
        keys=["LOG_LEVEL"],
        postprocess_fn=lambda x: str(x).upper(),
        default="INFO",
        raise_not_found=False,
    )
