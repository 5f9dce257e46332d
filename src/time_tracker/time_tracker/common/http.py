from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_errors(view):
    """Translate domain errors raised by services into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except HTTPException:
            raise
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"error": "Internal server error"}), 500

    return wrapper
