"""A small command shell with cd, env, setenv, unsetenv, help and exit builtins."""

__version__ = "1.0.0"
__all__ = ["__version__"]