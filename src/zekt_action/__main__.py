import sys

from zekt_action.main import main

sys.exit(main())
