"""Bilingual used-car showroom: CMS fetch, record mapping and listing search.

Submodules are not imported at package-import time. Import what you need
explicitly (for example ``from showroom.mapper import map_listing``).
"""

__all__ = ["client", "formatting", "locale", "mapper", "pages", "search", "state"]
