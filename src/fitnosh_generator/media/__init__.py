"""Media composition - logo and label overlay."""

from fitnosh_generator.media.compositor import Compositor, FontChoice, resolve_font

__all__ = ["Compositor", "FontChoice", "resolve_font"]
