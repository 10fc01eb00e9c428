from os import PathLike
from typing import Union

import jinja2


def create_env(directory: Union[str, PathLike]) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(directory),
        autoescape=True,
        variable_start_string="{{{",
        variable_end_string="}}}",
    )
    return env
