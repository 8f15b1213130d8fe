"""godot-exports: publish Godot export preset artifacts as CI workflow outputs."""

__version__ = "0.1.0"
