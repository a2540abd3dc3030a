"""
Simple health check for the package.

Also provides version info from the command-line.
"""
import argparse
import platform
import time

from .sim import autolog
from .version import __version__


def hello_world():
    """Simple accumulation run as a health check."""
    t = time.time()
    res = autolog(steps=100, seed=42)
    elapsed = time.time() - t
    print(res.tail())
    print("Elapsed time:", elapsed)
    return res


def _python_info():
    """
    Return formatted string for python implementation and version.

    Returns
    --------
    str:
        Implementation name, version, and platform
    """
    impl = platform.python_implementation()
    version = platform.python_version()
    system = platform.system()
    return f"{impl} {version} on {system}"


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        prog="obslog",
        description="Record and plot observations accumulated over a loop",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}, {_python_info()}",
    )
    parser.parse_args()

    # `--version` exits on its own, so anything else runs the health check.
    hello_world()
