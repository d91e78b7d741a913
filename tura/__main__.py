import sys

from tura.app import main

sys.exit(main())
