"""
Blueprints Package - Modular application structure
Each blueprint serves one section of the site
"""

__all__ = ['pages', 'blog', 'work', 'newsletter']
