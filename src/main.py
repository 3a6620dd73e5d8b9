"""
bytediff - Binary diff service

Compares two binary payloads submitted under a shared case name, over
HTTP or from the command line.
"""

from bytediff.interface.cli.app import main


if __name__ == "__main__":
    main()
