"""hostfetch: a terminal host information reporter."""

__app_name__ = "hostfetch"
__version__ = "0.3.0"
