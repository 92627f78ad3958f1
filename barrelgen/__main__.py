import sys

from barrelgen.cli.generate import main

sys.exit(main())
