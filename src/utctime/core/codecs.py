"""
Codecs Core

Nil-safe encoders and interchange-format integrations for UtcTime.

The module-level encoders accept ``Optional[UtcTime]``: None stands for an
absent receiver. Encoding None is an error, while ``to_string(None)`` returns
the ``"<nil>"`` sentinel.
"""

import json
import sqlite3
from typing import Any, Optional

import yaml

from utctime.core.utc_time import UtcTime
from utctime.primitives.debug_hook import debug_log
from utctime.primitives.errors import NilReceiverError

NIL_STRING = "<nil>"
YAML_TAG = "!utc"
SQLITE_TYPE = "utctime"


def marshal_json(t: Optional[UtcTime]) -> bytes:
    """
    Raises:
        NilReceiverError: If t is None; nothing is emitted
    """
    if t is None:
        debug_log("marshal_json() called with None")
        raise NilReceiverError("cannot marshal nil UtcTime")
    return t.marshal_json()


def to_string(t: Optional[UtcTime]) -> str:
    """RFC 3339 text, or ``"<nil>"`` for None."""
    if t is None:
        debug_log("to_string() called with None")
        return NIL_STRING
    return str(t)


def db_value(t: Optional[UtcTime]):
    """
    Raises:
        NilReceiverError: If t is None
    """
    if t is None:
        debug_log("db_value() called with None")
        raise NilReceiverError("cannot call db_value() on nil UtcTime")
    return t.db_value()


# JSON
# ----

def json_default(obj: Any) -> str:
    """``default=`` hook for json.dumps that renders UtcTime as RFC 3339."""
    if isinstance(obj, UtcTime):
        return obj.rfc3339()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class UtcJSONEncoder(json.JSONEncoder):
    """JSONEncoder that renders UtcTime as RFC 3339."""

    def default(self, o):
        if isinstance(o, UtcTime):
            return o.rfc3339()
        return super().default(o)


# YAML
# ----

def _represent_utc_time(dumper: yaml.SafeDumper, data: UtcTime) -> yaml.Node:
    encoded = data.marshal_yaml()
    if encoded is None:
        return dumper.represent_none(None)
    return dumper.represent_str(encoded)


def _construct_utc_time(loader: yaml.SafeLoader, node: yaml.Node) -> UtcTime:
    return UtcTime.unmarshal_yaml(loader.construct_scalar(node))


def register_yaml(dumper=None, loader=None) -> None:
    """
    Teach PyYAML dumper/loader classes about UtcTime.

    The dumper writes UtcTime as an RFC 3339 string (null for the zero value).
    The loader builds UtcTime from scalars tagged ``!utc``.
    """
    if dumper is not None:
        dumper.add_representer(UtcTime, _represent_utc_time)
    if loader is not None:
        loader.add_constructor(YAML_TAG, _construct_utc_time)


class UtcSafeDumper(yaml.SafeDumper):
    """SafeDumper that can represent UtcTime."""


class UtcSafeLoader(yaml.SafeLoader):
    """SafeLoader that constructs ``!utc`` scalars as UtcTime."""


register_yaml(UtcSafeDumper, UtcSafeLoader)


# sqlite3
# -------

def _adapt_sqlite(t: UtcTime) -> str:
    return t.rfc3339_nano()


def register_sqlite3() -> None:
    """
    Register sqlite3 adapters for UtcTime.

    Parameters are stored as RFC 3339 text. Columns declared ``utctime`` are
    read back as UtcTime when the connection uses ``detect_types=PARSE_DECLTYPES``.
    """
    sqlite3.register_adapter(UtcTime, _adapt_sqlite)
    sqlite3.register_converter(SQLITE_TYPE, UtcTime.scan)
