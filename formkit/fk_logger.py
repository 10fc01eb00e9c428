# coding: utf-8

import datetime
import logging
import sys
from collections import OrderedDict

from pythonjsonlogger import jsonlogger

from formkit.io import env as fk_env


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    additional_fields = {}

    def __init__(self, format_string):
        super().__init__(format_string)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        for field, val in CustomJsonFormatter.additional_fields.items():
            if (val is not None) and (field not in log_record):
                log_record[field] = val

    def process_log_record(self, log_record):
        log_record["timestamp"] = log_record.pop("asctime", None)

        levelname = log_record.pop("levelname", None)
        if levelname is not None:
            log_record["level"] = levelname.lower()

        return jsonlogger.JsonFormatter.process_log_record(self, log_record)

    def formatTime(self, record, datefmt=None):
        ct = datetime.datetime.fromtimestamp(record.created)
        t = ct.strftime("%Y-%m-%dT%H:%M:%S")
        s = "%s.%03dZ" % (t, record.msecs)
        return s


def _get_default_logging_fields():
    supported_keys = [
        "asctime",
        "message",
        "levelname",
    ]
    return " ".join(["%({0:s})".format(k) for k in supported_keys])


def create_formatter(logger_fmt_string=None):
    if logger_fmt_string is None:
        logger_fmt_string = _get_default_logging_fields()
    return CustomJsonFormatter(logger_fmt_string)


def add_logger_handler(the_logger, log_handler):
    log_handler.setFormatter(create_formatter())
    the_logger.addHandler(log_handler)


def add_default_logging_into_file(the_logger, log_path):
    fh = logging.FileHandler(log_path, encoding="utf-8")
    add_logger_handler(the_logger, fh)


def set_global_logging_level(level):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)


def _construct_logger(the_logger, loglevel_text):
    for handler in list(the_logger.handlers):
        the_logger.removeHandler(handler)

    add_logger_handler(the_logger, logging.StreamHandler(sys.stdout))
    the_logger.setLevel(logging.getLevelName(loglevel_text))
    the_logger.propagate = False
    return the_logger


logger = _construct_logger(logging.getLogger("formkit"), fk_env.log_level())
CustomJsonFormatter.additional_fields = OrderedDict(service_type="formkit")
