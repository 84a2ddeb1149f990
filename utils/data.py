"""
Data Module - Read access to the site content registry
The registry in content.py is built once at import and frozen here,
so every request reads the same immutable structure.
"""

from types import MappingProxyType


SECTION_NAMES = ('person', 'social', 'newsletter', 'home', 'about', 'blog', 'work', 'gallery')


def freeze(value):
    """
    Recursively convert authored content into read-only containers

    Dicts become mappingproxy objects and lists become tuples. Scalars and
    Markup fragments are returned untouched.

    Args:
        value: Content value as written in content.py

    Returns:
        The same content, immutable
    """
    if isinstance(value, dict):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def is_displayed(block):
    """Return the display flag of a content block (blocks without one are shown)"""
    if block is None:
        return False
    return bool(block.get('display', True))


def get_section(name):
    """
    Look up one of the named content values

    Args:
        name (str): One of SECTION_NAMES

    Returns:
        The frozen content value

    Raises:
        KeyError: If name is not a registry value
    """
    if name not in SECTION_NAMES:
        raise KeyError(name)
    import content
    return getattr(content, name)


def get_global_meta():
    """Get default meta tags from the home section"""
    home = get_section('home')
    person = get_section('person')
    return {
        'title': home['title'],
        'description': home['description'],
        'author': person['name'],
    }


__all__ = ['SECTION_NAMES', 'freeze', 'is_displayed', 'get_section', 'get_global_meta']
