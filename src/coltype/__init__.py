"""coltype — column-type marshalling and console command listing.

Integer and decimal converters between application values and driver
wire values, plus a ``help`` command that lists registered CLI commands.
"""

from coltype.version import __version__

__all__: list[str] = ["__version__"]
