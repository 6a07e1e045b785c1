import sys

from design_patterns.main import main

sys.exit(main())
