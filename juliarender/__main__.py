import sys

from juliarender.cli import main

sys.exit(main())
