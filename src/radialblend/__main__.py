import sys

from radialblend.cli import main

sys.exit(main())
