import sys

from surfcast.cli import main

sys.exit(main())
