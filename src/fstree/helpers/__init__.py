"""Small formatting helpers used by the renderers."""
