from __future__ import annotations
import atexit
from flask import Flask
from pathlib import Path
from typing import Any, Dict, Optional

from showroom.client import CmsClient
from showroom.config import ShowroomConfig, load_config
from showroom.logger import Logger


log = Logger.bind(__name__)


def _format_number(value: Any) -> str:
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return str(value)


def create_app(config: Dict[str, Any] | None = None,
               showroom_config: Optional[ShowroomConfig] = None,
               cms_client: Optional[CmsClient] = None) -> Flask:
    # Explicit template folder path (project root/templates)
    base_dir = Path(__file__).resolve().parent.parent
    template_dir = base_dir / 'templates'
    app = Flask(__name__, template_folder=str(template_dir))
    if not template_dir.exists():
        log.warn(f"template dir not found: {template_dir}")
    if config:
        app.config.update(config)

    settings = showroom_config or load_config()
    client = cms_client
    if client is None:
        # app-owned session, closed at interpreter exit
        client = CmsClient(settings)
        atexit.register(client.close)
    log.info(f"cms base url={client.base_url}")

    from .views import bp  # noqa: WPS433 (late import to avoid circular)
    app.register_blueprint(bp)

    # Expose CMS client + settings via app extensions for access in views
    app.extensions['cms'] = client
    app.extensions['showroom_config'] = settings

    app.add_template_filter(_format_number, 'number')

    return app
