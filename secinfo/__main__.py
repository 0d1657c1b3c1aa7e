import sys

from secinfo.leaderboards.build_tables import main

sys.exit(main())
