import sys

from addrspec.main import main

sys.exit(main())
