import sys

from chessduel.app import main

sys.exit(main())
