import sys

from introspect_sdl.cli import main

sys.exit(main())
