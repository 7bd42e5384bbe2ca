from __future__ import annotations
"""CMS connection settings.

Resolution order: dataclass defaults -> config.json at the project root ->
environment (STRAPI_URL, STRAPI_TIMEOUT).
"""
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .logger import Logger


log = Logger.bind(__name__)

DEFAULT_BASE_URL = 'http://localhost:1337'

_CONFIG_JSON_PATH = Path(__file__).resolve().parent.parent / 'config.json'


@dataclass
class ShowroomConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    featured_count: int = 3
    max_retries: int = 0
    user_agent: str = 'showroom/0.1 (+requests)'

    def __post_init__(self):
        self.base_url = (self.base_url or DEFAULT_BASE_URL).strip().rstrip('/')


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open('r', encoding='utf-8') as f:
            cfg = json.load(f) or {}
    except (OSError, ValueError) as e:
        log.warn(f"config.json load fail path={path} error={e}")
        return {}
    if not isinstance(cfg, dict):
        log.warn(f"config.json ignored (not an object) path={path}")
        return {}
    return cfg


def load_config(path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> ShowroomConfig:
    env = os.environ if env is None else env
    cfg = _read_json(path or _CONFIG_JSON_PATH)
    kwargs: Dict[str, Any] = {}
    if isinstance(cfg.get('strapi_url'), str) and cfg['strapi_url'].strip():
        kwargs['base_url'] = cfg['strapi_url']
    if cfg.get('timeout') is not None:
        kwargs['timeout'] = float(cfg['timeout'])
    if cfg.get('featured_count') is not None:
        kwargs['featured_count'] = int(cfg['featured_count'])
    if env.get('STRAPI_URL', '').strip():
        kwargs['base_url'] = env['STRAPI_URL']
    if env.get('STRAPI_TIMEOUT', '').strip():
        try:
            kwargs['timeout'] = float(env['STRAPI_TIMEOUT'])
        except ValueError:
            log.warn(f"STRAPI_TIMEOUT ignored value={env['STRAPI_TIMEOUT']!r}")
    config = ShowroomConfig(**kwargs)
    log.debug(f"config base_url={config.base_url} timeout={config.timeout}")
    return config


__all__ = ['ShowroomConfig', 'load_config', 'DEFAULT_BASE_URL']
