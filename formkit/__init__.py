# coding: utf-8

from formkit.io import env as fk_env

fk_env.load_env_file()

from formkit.fk_logger import logger
from formkit import app
from formkit.app import DataJson, StateJson
from formkit.app.widgets import (
    ColorSelector,
    Container,
    FileUpload,
    Input,
    Option,
    OptionType,
    RadioSelector,
)
