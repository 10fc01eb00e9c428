# coding: utf-8

import itertools
import random
import re
import string
import time
from typing import Optional

from formkit.io import env as fk_env

random.seed(time.time())

_URL_WITH_SCHEME = re.compile(r"^[a-z0-9]+://", re.IGNORECASE)
_TMP_SUFFIX = "#tmp"


def rand_str(length):
    chars = string.ascii_letters + string.digits  # [A-z][0-9]
    return "".join((random.choice(chars)) for _ in range(length))


def generate_id(cls_name: str = "") -> str:
    suffix = rand_str(5)
    if cls_name == "":
        return "autoId" + suffix
    return cls_name + "AutoId" + suffix


class GroupKeyFactory:
    """Hands out unique keys for groups of rendered controls (e.g. the ``name``
    shared by the radio inputs of one selector).

    The counter lives as long as the process and cannot be reset or moved.
    """

    def __init__(self, prefix: str):
        self._prefix = prefix
        self._counter = itertools.count()

    @property
    def prefix(self) -> str:
        return self._prefix

    def next_key(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


def get_path(path: str, content_id: Optional[str] = None) -> str:
    """Returns url of a stored file.

    Absolute urls and paths from the server root are returned untouched.
    Relative paths are resolved against the files url of the edited content,
    or against the editor files when the content has no id yet.

    :param path: stored path, e.g. ``images/background-617a.png``
    :type path: str
    :param content_id: id of the edited content, read from env when omitted
    :type content_id: Optional[str]
    :return: file url
    :rtype: str
    """
    if _URL_WITH_SCHEME.match(path) or path.startswith("/"):
        return path

    if path.endswith(_TMP_SUFFIX):
        path = path[: -len(_TMP_SUFFIX)]
        content_id = None
    elif content_id is None:
        content_id = fk_env.content_id()

    if content_id is not None:
        prefix = f"{fk_env.files_url()}/content/{content_id}"
    else:
        prefix = f"{fk_env.files_url()}/editor"
    return f"{prefix}/{path}"
