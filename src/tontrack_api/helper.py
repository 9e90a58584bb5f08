from contextlib import contextmanager
import logging
from typing import Iterator

from flask import current_app
from flask_smorest import abort

from tontrack_helper.exceptions import (
    PersistenceFailed,
    SidecarIoError,
    SidecarNotFound,
    SidecarSpawnFailed,
    StateLockError,
)
from tontrack_monitor.Controller import Controller


def get_controller() -> Controller:
    return current_app.config['CONTROLLER']


@contextmanager
def abort_on_error() -> Iterator[None]:
    """Turn controller failures into HTTP errors carrying the message."""
    try:
        yield
    except (SidecarNotFound, SidecarSpawnFailed, SidecarIoError) as e:
        logging.error(f"VR overlay error: {e}")
        abort(409, message=str(e))
    except StateLockError as e:
        abort(503, message=str(e))
    except PersistenceFailed as e:
        logging.error(str(e))
        abort(500, message=str(e))
