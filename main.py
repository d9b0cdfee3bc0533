"""
Main entry point for the interactive public-folder image optimizer.

Scans ./public for images, asks which ones to convert and where to put the
WebP output, then converts them.

Example:
    $ python main.py
    $ python main.py --help
"""

from public_optimizer.cli import main


if __name__ == "__main__":
    main()
