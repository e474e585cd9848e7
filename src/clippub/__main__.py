import sys

from clippub.main import main

sys.exit(main())
