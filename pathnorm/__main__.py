import sys

from pathnorm.main import main

sys.exit(main())
