import sys

from time_server.run import main

sys.exit(main())
