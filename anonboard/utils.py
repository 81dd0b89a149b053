from __future__ import annotations

import itertools
import os
import re
import threading
import time
from datetime import datetime
from zoneinfo import ZoneInfo

import orjson
from flask import Response

from anonboard.constants import DATETIME_MS_FORMAT, OBJECT_ID_PATTERN


def utcnow(naive=True):
    if naive:
        return datetime.now(ZoneInfo('UTC')).replace(tzinfo=None)
    return datetime.now(ZoneInfo('UTC'))


def ap_datetime(date_time: datetime) -> str:
    return date_time.strftime(DATETIME_MS_FORMAT)


_object_id_counter = itertools.count(int.from_bytes(os.urandom(3), 'big'))
_object_id_lock = threading.Lock()
_object_id_random = os.urandom(5)


def new_object_id() -> str:
    """24 hex characters: 4-byte seconds timestamp, 5 bytes fixed per process, 3-byte counter."""
    with _object_id_lock:
        counter = next(_object_id_counter) % 0x1000000
    return (int(time.time()).to_bytes(4, 'big') + _object_id_random + counter.to_bytes(3, 'big')).hex()


def is_object_id(value) -> bool:
    return isinstance(value, str) and re.match(OBJECT_ID_PATTERN, value) is not None


def orjson_response(obj, status=200, headers=None):
    return Response(
        response=orjson.dumps(obj),
        status=status,
        headers=headers,
        mimetype="application/json"
    )


def text_response(body: str, status=200):
    return Response(response=body, status=status, mimetype="text/plain")
