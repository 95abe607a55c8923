import sys

from richtext_toolkit.cli import main

sys.exit(main())
