"""
Utils Package - Helper modules for the site

Only the content helpers are exported here, so importing the registry does
not load the web stack. Import the other helpers from their own modules.
"""

from .data import SECTION_NAMES, freeze, is_displayed, get_section, get_global_meta

__all__ = [
    'SECTION_NAMES',
    'freeze',
    'is_displayed',
    'get_section',
    'get_global_meta'
]
