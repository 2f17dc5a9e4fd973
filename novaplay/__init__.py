"""2D game toolkit: vector math, matrices, easing, camera, after-images, tile map and enemy physics."""

__version__ = "0.1.0"