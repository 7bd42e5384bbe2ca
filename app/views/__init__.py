from __future__ import annotations
from flask import Blueprint


bp = Blueprint('main', __name__)

# import and register submodules
from . import home as _home  # noqa: E402
from . import cars as _cars  # noqa: E402
from . import detail as _detail  # noqa: E402


_home.register(bp)
_cars.register(bp)
_detail.register(bp)

__all__ = ['bp']
