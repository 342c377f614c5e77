"""A side-scrolling flappy bird arcade game built on pygame."""

__version__ = "0.1.0"