# Path: stream_decoder/__main__.py
"""Allow running as: python -m stream_decoder records.bin"""

import sys

from stream_decoder.main import main


if __name__ == '__main__':
    sys.exit(main())
